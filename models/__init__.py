"""
Mind Map Studio Pydantic Models
===============================

Domain, request and response models for FastAPI type safety and validation.

Author: lycosa9527
Made by: MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from .common import EdgeStyle, NodeLevel, StorageBackend
from .domain import Edge, Node, NodeStyle, Position, Size, Snapshot
from .requests import (
    AddNodeRequest,
    AddEdgeRequest,
    UpdateLabelRequest,
    MoveNodeRequest,
    SelectRequest,
    GenerateMindMapRequest,
    SaveSnapshotRequest,
    UpdateSnapshotRequest,
    LoadSnapshotRequest,
)
from .responses import (
    ErrorResponse,
    GenerateMindMapResponse,
    HealthResponse,
    MindMapResponse,
    SnapshotListItem,
    SnapshotListResponse,
    StatusResponse,
    StyledNode,
)

__all__ = [
    'EdgeStyle',
    'NodeLevel',
    'StorageBackend',
    'Edge',
    'Node',
    'NodeStyle',
    'Position',
    'Size',
    'Snapshot',
    'AddNodeRequest',
    'AddEdgeRequest',
    'UpdateLabelRequest',
    'MoveNodeRequest',
    'SelectRequest',
    'GenerateMindMapRequest',
    'SaveSnapshotRequest',
    'UpdateSnapshotRequest',
    'LoadSnapshotRequest',
    'ErrorResponse',
    'GenerateMindMapResponse',
    'HealthResponse',
    'MindMapResponse',
    'SnapshotListItem',
    'SnapshotListResponse',
    'StatusResponse',
    'StyledNode',
]
