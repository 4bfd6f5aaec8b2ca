"""
Common Pydantic Models and Enums
=================================

Shared enumerations and constants used across the mind map models.

Author: lycosa9527
Made by: MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from enum import Enum


ROOT_LEVEL = 0
MAX_LEVEL = 3
DETAIL_LEVEL = 3
# Level-3 labels longer than this are rendered as detail nodes
DETAIL_TEXT_THRESHOLD = 30


class NodeLevel(int, Enum):
    """Semantic levels of a mind map node"""
    ROOT = 0
    BRANCH = 1
    CONCEPT = 2
    DETAIL = 3


class EdgeStyle(str, Enum):
    """Edge style tag, derived from the level of the edge's source node"""
    ROOT = "root"
    BRANCH = "branch"
    CONCEPT = "concept"
    DETAIL = "detail"

    @classmethod
    def for_source_level(cls, level: int) -> "EdgeStyle":
        """Style for an edge leaving a node at the given level."""
        return _EDGE_STYLE_BY_LEVEL.get(level, cls.DETAIL)


_EDGE_STYLE_BY_LEVEL = {
    0: EdgeStyle.ROOT,
    1: EdgeStyle.BRANCH,
    2: EdgeStyle.CONCEPT,
    3: EdgeStyle.DETAIL,
}


class StorageBackend(str, Enum):
    """Supported snapshot storage backends"""
    MEMORY = "memory"
    FILE = "file"
    REDIS = "redis"


def is_detail_label(level: int, label: str, flagged: bool = False) -> bool:
    """Detail nodes are explicitly flagged or long level-3 labels."""
    if flagged:
        return True
    return level == DETAIL_LEVEL and len(label or '') > DETAIL_TEXT_THRESHOLD
