"""
Mind Map Domain Models
======================

Pydantic models for the live mind map graph and its saved snapshots.

Author: lycosa9527
Made by: MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..common import EdgeStyle, MAX_LEVEL, ROOT_LEVEL


def utc_now() -> datetime:
    """Timezone-aware current time for snapshot stamps."""
    return datetime.now(timezone.utc)


class Position(BaseModel):
    """Canvas coordinates of a node"""
    x: float = 0.0
    y: float = 0.0


class Size(BaseModel):
    """Rendered node box, derived from the label"""
    width: int
    height: int


class Node(BaseModel):
    """A mind map node.

    parent_id is a layout hint only; connectivity lives in edges.
    editing is transient inline-edit state and is never serialized.
    """
    id: str
    label: str
    level: int = Field(ROOT_LEVEL, ge=ROOT_LEVEL, le=MAX_LEVEL)
    parent_id: Optional[str] = None
    position: Position = Field(default_factory=Position)
    size: Size
    is_detail: bool = False
    editing: bool = Field(False, exclude=True)


class Edge(BaseModel):
    """A directed connection between two nodes"""
    id: str
    source: str
    target: str
    style: EdgeStyle = EdgeStyle.ROOT

    def touches(self, node_id: str) -> bool:
        """True when the node is either endpoint."""
        return self.source == node_id or self.target == node_id


class Snapshot(BaseModel):
    """A named, independent copy of the graph"""
    id: str
    name: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    nodes: List[Node] = Field(default_factory=list)
    edges: List[Edge] = Field(default_factory=list)


class NodeStyle(BaseModel):
    """Per-node style attributes handed to the canvas"""
    background: str
    border: str
    color: str = "white"
    font_size: int = 14
    font_weight: int = 600
    text_align: str = "center"
    wrap: bool = False


LEVEL_STYLES: Dict[int, NodeStyle] = {
    0: NodeStyle(background="#2563eb", border="#1e40af"),
    1: NodeStyle(background="#10b981", border="#059669"),
    2: NodeStyle(background="#f59e0b", border="#d97706"),
    3: NodeStyle(background="#f59e0b", border="#d97706"),
}

DETAIL_STYLE = NodeStyle(
    background="#fef3c7",
    border="#f59e0b",
    color="#78350f",
    font_size=12,
    font_weight=500,
    text_align="left",
    wrap=True,
)


def style_for_node(node: Node) -> NodeStyle:
    """Colour by level; detail nodes get the light long-text style."""
    if node.is_detail and node.level >= 3:
        return DETAIL_STYLE
    return LEVEL_STYLES.get(node.level, LEVEL_STYLES[3])
