"""
Hierarchical layout for imported mind maps.

Places a batch of draft nodes in rows by level:

- Level 0 sits at a fixed anchor.
- Level 1 forms one row centered under the root.
- Level 2+ children are spread around their parent. The parent's x is
  re-derived from its level group (index and group size), not read from
  the coordinate already assigned to it, so deep or unbalanced trees can
  drift slightly. Imports hold 12-20 nodes, which keeps this acceptable.

Drafts whose parent id does not resolve are placed in a fallback row and
left unconnected. A draft naming itself as parent is laid out normally but
gets no edge, so no self-loop e{id}-{id} reaches the canvas.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple
import logging

from agents.mind_maps.import_parser import DraftNode
from agents.mind_maps.size_estimator import estimate_node_size
from config.settings import config
from models.common import EdgeStyle, is_detail_label
from models.domain.mindmap import Edge, Node, Position, Size
from services.mindmap.id_generator import IdGenerator, uuid_id_generator

logger = logging.getLogger(__name__)


@dataclass
class LayoutResult:
    """Positioned nodes, their edges and the external -> internal id map"""
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    id_map: Dict[str, str] = field(default_factory=dict)
    # Internal ids of nodes whose declared parent did not resolve
    orphaned: List[str] = field(default_factory=list)


def centered_offset(center: float, count: int, index: int, spacing: float) -> float:
    """x of sibling `index` in a row of `count` centered on `center`."""
    return center - (count - 1) * spacing / 2 + index * spacing


class LayoutEngine:
    """Assigns positions and internal ids to a batch of draft nodes."""

    def __init__(self, id_generator: Optional[IdGenerator] = None, layout_config=None):
        self.id_generator = id_generator or uuid_id_generator("node")
        self.config = layout_config or config

    def layout(self, drafts: Sequence[DraftNode]) -> LayoutResult:
        """
        Lay out drafts in arrival order.

        Args:
            drafts: Draft nodes as produced by the import parser

        Returns:
            LayoutResult with one node per draft and one edge per resolvable parent
        """
        root_x = self.config.ROOT_X
        root_y = self.config.ROOT_Y
        row_y = self.config.BRANCH_ROW_Y
        row_height = self.config.ROW_HEIGHT

        level_groups, level_index = self._group_by_level(drafts)
        # First draft wins when external ids repeat
        first_by_id: Dict[str, int] = {}
        for i, draft in enumerate(drafts):
            first_by_id.setdefault(draft.external_id, i)
        siblings = self._group_siblings(drafts)

        result = LayoutResult()
        internal_ids: List[str] = []
        for i, draft in enumerate(drafts):
            node_id = self.id_generator()
            internal_ids.append(node_id)
            result.id_map[draft.external_id] = node_id

            if draft.level == 0:
                x, y = root_x, root_y
            elif draft.level == 1:
                x = centered_offset(root_x, len(level_groups[1]), level_index[i], self.config.BRANCH_SPACING)
                y = row_y
            else:
                y = row_y + draft.level * row_height
                parent_index = first_by_id.get(draft.parent_id) if draft.parent_id is not None else None
                if parent_index is not None:
                    parent_x = self._derive_parent_x(drafts[parent_index], level_groups, level_index[parent_index])
                    group = siblings[(draft.level, draft.parent_id)]
                    x = centered_offset(parent_x, len(group), group.index(i), self.config.CHILD_SPACING)
                else:
                    x = self.config.FALLBACK_X + level_index[i] * self.config.FALLBACK_SPACING

            is_detail = is_detail_label(draft.level, draft.label, bool(draft.is_detail))
            width, height = estimate_node_size(draft.label, is_detail)
            result.nodes.append(Node(
                id=node_id,
                label=draft.label,
                level=draft.level,
                position=Position(x=x, y=y),
                size=Size(width=width, height=height),
                is_detail=is_detail,
            ))

        level_by_node = {node.id: node.level for node in result.nodes}
        for i, draft in enumerate(drafts):
            node = result.nodes[i]
            if draft.parent_id is None:
                continue
            parent_node_id = result.id_map.get(draft.parent_id)
            if parent_node_id is None:
                logger.debug(
                    "[LayoutEngine] Draft %s names unknown parent %s, leaving it unconnected",
                    draft.external_id,
                    draft.parent_id
                )
                result.orphaned.append(node.id)
                continue
            if parent_node_id == internal_ids[i]:
                logger.debug("[LayoutEngine] Draft %s names itself as parent, skipping edge", draft.external_id)
                continue
            node.parent_id = parent_node_id
            result.edges.append(Edge(
                id=f"e{parent_node_id}-{node.id}",
                source=parent_node_id,
                target=node.id,
                style=EdgeStyle.for_source_level(level_by_node[parent_node_id]),
            ))

        logger.debug(
            "[LayoutEngine] Laid out %s nodes, %s edges, %s orphaned",
            len(result.nodes),
            len(result.edges),
            len(result.orphaned)
        )
        return result

    def _derive_parent_x(self, parent: DraftNode, level_groups: Dict[int, List[int]], parent_level_index: int) -> float:
        """Approximate parent x from its level group."""
        if parent.level == 0:
            return self.config.ROOT_X
        if parent.level == 1:
            return centered_offset(
                self.config.ROOT_X,
                len(level_groups[1]),
                parent_level_index,
                self.config.BRANCH_SPACING
            )
        return self.config.DEEP_PARENT_X + parent_level_index * self.config.FALLBACK_SPACING

    @staticmethod
    def _group_by_level(drafts: Sequence[DraftNode]) -> Tuple[Dict[int, List[int]], List[int]]:
        groups: Dict[int, List[int]] = defaultdict(list)
        index_in_group: List[int] = []
        for i, draft in enumerate(drafts):
            index_in_group.append(len(groups[draft.level]))
            groups[draft.level].append(i)
        return groups, index_in_group

    @staticmethod
    def _group_siblings(drafts: Sequence[DraftNode]) -> Dict[Tuple[int, Optional[str]], List[int]]:
        siblings: Dict[Tuple[int, Optional[str]], List[int]] = defaultdict(list)
        for i, draft in enumerate(drafts):
            siblings[(draft.level, draft.parent_id)].append(i)
        return siblings
