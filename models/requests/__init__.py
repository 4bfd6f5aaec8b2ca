"""
Request Models

Pydantic request models for API endpoints.
"""

from .requests_mindmap import (
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

__all__ = [
    'AddNodeRequest',
    'AddEdgeRequest',
    'UpdateLabelRequest',
    'MoveNodeRequest',
    'SelectRequest',
    'GenerateMindMapRequest',
    'SaveSnapshotRequest',
    'UpdateSnapshotRequest',
    'LoadSnapshotRequest',
]
