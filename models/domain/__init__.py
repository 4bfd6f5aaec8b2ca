"""
Domain Models

Pydantic models representing the mind map graph and its snapshots.
"""

from .mindmap import (
    Node,
    Edge,
    Snapshot,
    Position,
    Size,
    NodeStyle,
    style_for_node,
    utc_now,
)

__all__ = [
    'Node',
    'Edge',
    'Snapshot',
    'Position',
    'Size',
    'NodeStyle',
    'style_for_node',
    'utc_now',
]
