"""
Import parser for generated mind maps.

Turns raw text from the content generator into draft nodes. The generator
has no output contract, so the parser is permissive: it only insists on an
object with a list-typed "nodes" field and normalizes everything else.

Expected shape:
    {"title": "...", "nodes": [{"id", "text", "parentId", "level", "isDetailNode"?}, ...]}

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging

from agents.core.json_parser import extract_json_from_response
from models.common import MAX_LEVEL, ROOT_LEVEL
from services.mindmap.exceptions import ImportFailedError, ImportFailureKind

logger = logging.getLogger(__name__)


@dataclass
class DraftNode:
    """An externally supplied, not yet laid out node"""
    external_id: str
    label: str
    level: int = ROOT_LEVEL
    parent_id: Optional[str] = None
    # None defers to the long level-3 label heuristic
    is_detail: Optional[bool] = None


@dataclass
class ImportedMindMap:
    """Parser output: optional title plus drafts in arrival order"""
    title: Optional[str] = None
    drafts: List[DraftNode] = field(default_factory=list)


def parse_import(raw_text: Any) -> ImportedMindMap:
    """
    Parse generator output into draft nodes.

    Args:
        raw_text: Raw response text, possibly fenced or wrapped in prose

    Returns:
        ImportedMindMap with the drafts in arrival order

    Raises:
        ImportFailedError: PARSE_FAILURE when no decodable object is found,
            SCHEMA_FAILURE when the object has no list-typed "nodes" field
    """
    data = extract_json_from_response(raw_text)
    if data is None:
        raise ImportFailedError(ImportFailureKind.PARSE_FAILURE)

    nodes = data.get('nodes')
    if not isinstance(nodes, list):
        logger.warning("[ImportParser] Decoded object has no 'nodes' list (keys: %s)", list(data.keys()))
        raise ImportFailedError(
            ImportFailureKind.SCHEMA_FAILURE,
            context={"keys": list(data.keys())}
        )

    drafts = []
    for index, entry in enumerate(nodes):
        if not isinstance(entry, dict):
            logger.debug("[ImportParser] Skipping non-object node entry at %s", index)
            continue
        drafts.append(_build_draft(entry, index))

    title = data.get('title')
    if title is not None and not isinstance(title, str):
        title = str(title)

    logger.info("[ImportParser] Parsed %s draft nodes (title=%r)", len(drafts), title)
    return ImportedMindMap(title=title, drafts=drafts)


def _build_draft(entry: Dict[str, Any], index: int) -> DraftNode:
    external_id = entry.get('id')
    if external_id is None or external_id == '':
        external_id = f"draft-{index}"

    parent_id = entry.get('parentId')
    if parent_id == '':
        parent_id = None

    flagged = entry.get('isDetailNode')
    return DraftNode(
        external_id=str(external_id),
        label=_get_node_text(entry),
        level=_coerce_level(entry.get('level')),
        parent_id=str(parent_id) if parent_id is not None else None,
        is_detail=True if flagged is True else None,
    )


def _get_node_text(entry: Dict[str, Any]) -> str:
    """Generators use 'text' per the prompt, sometimes 'label'."""
    text = entry.get('text')
    if text is None:
        text = entry.get('label')
    return '' if text is None else str(text)


def _coerce_level(value: Any) -> int:
    """Missing or unreadable levels become 0; others are clamped into range."""
    if value is None or isinstance(value, bool):
        return ROOT_LEVEL
    try:
        level = int(value)
    except (TypeError, ValueError, OverflowError):
        logger.debug("[ImportParser] Unreadable level %r, using %s", value, ROOT_LEVEL)
        return ROOT_LEVEL
    return min(max(level, ROOT_LEVEL), MAX_LEVEL)
