"""Mind Map Editing and Storage Request Models.

Pydantic models for validating canvas gestures, AI generation and snapshot
storage API requests.

Author: lycosa9527
Made by: MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from typing import Optional

from pydantic import BaseModel, Field

from ..common import MAX_LEVEL, ROOT_LEVEL


class AddNodeRequest(BaseModel):
    """Request model for POST /api/mindmap/nodes"""
    level: int = Field(..., ge=ROOT_LEVEL, le=MAX_LEVEL, description="Level of the new node")
    label: str = Field(..., max_length=2000, description="Node text")
    anchor_id: Optional[str] = Field(
        None, description="Parent node (defaults to the current selection)"
    )


class AddEdgeRequest(BaseModel):
    """Request model for POST /api/mindmap/edges"""
    source: str = Field(..., min_length=1)
    target: str = Field(..., min_length=1)


class UpdateLabelRequest(BaseModel):
    """Request model for PATCH /api/mindmap/nodes/{id}/label"""
    label: str = Field(..., max_length=2000)


class MoveNodeRequest(BaseModel):
    """Request model for PATCH /api/mindmap/nodes/{id}/position"""
    x: float
    y: float


class SelectRequest(BaseModel):
    """Request model for PUT /api/mindmap/selection"""
    node_id: Optional[str] = None


class GenerateMindMapRequest(BaseModel):
    """Request model for POST /api/mindmap/generate"""
    topic: str = Field(..., min_length=1, max_length=500, description="Topic to map")
    confirm: bool = Field(
        False, description="Required when the current mind map is not empty"
    )


class SaveSnapshotRequest(BaseModel):
    """Request model for POST /api/snapshots"""
    name: str = Field(..., max_length=200)


class UpdateSnapshotRequest(BaseModel):
    """Request model for PUT /api/snapshots/{id}"""
    name: Optional[str] = Field(None, max_length=200)
    from_current: bool = Field(
        False, description="Overwrite the stored nodes/edges with the live graph"
    )


class LoadSnapshotRequest(BaseModel):
    """Request model for POST /api/snapshots/{id}/load"""
    confirm: bool = Field(
        False, description="Required when the current mind map is not empty"
    )
