"""
Response Models
===============

Pydantic models for API response validation and documentation.

Author: lycosa9527
Made by: MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from typing import Optional, Dict, Any, List
from datetime import datetime
from pydantic import BaseModel, Field

from .domain.mindmap import Edge, Node, NodeStyle, Snapshot


class ErrorResponse(BaseModel):
    """Standard error response"""
    error: str = Field(..., description="Error message")
    error_type: Optional[str] = Field(None, description="Type of error")
    context: Optional[Dict[str, Any]] = Field(None, description="Additional error context")

    class Config:
        """Configuration for ErrorResponse JSON schema"""
        json_schema_extra = {
            "example": {
                "error": "Node label must not be empty",
                "error_type": "VALIDATION_ERROR",
            }
        }


class StyledNode(BaseModel):
    """A node as the canvas draws it"""
    node: Node
    style: NodeStyle
    editing: bool = Field(False, description="Inline label editor is open")


class MindMapResponse(BaseModel):
    """Current state of the live mind map"""
    name: Optional[str] = Field(None, description="Mind map title")
    nodes: List[StyledNode] = Field(default_factory=list)
    edges: List[Edge] = Field(default_factory=list)
    selected_id: Optional[str] = Field(None, description="Advisory selection")


class GenerateMindMapResponse(BaseModel):
    """Response model for /api/mindmap/generate"""
    success: bool = Field(..., description="Whether generation succeeded")
    title: Optional[str] = Field(None, description="Title of the generated map")
    node_count: int = Field(0, description="Nodes committed")
    edge_count: int = Field(0, description="Edges committed")
    orphaned: List[str] = Field(
        default_factory=list,
        description="Node ids whose declared parent could not be resolved"
    )


class SnapshotListItem(BaseModel):
    """Snapshot summary for the saved-maps list"""
    id: str
    name: str
    created_at: datetime
    updated_at: datetime
    node_count: int
    edge_count: int

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> "SnapshotListItem":
        """Summarize a stored snapshot."""
        return cls(
            id=snapshot.id,
            name=snapshot.name,
            created_at=snapshot.created_at,
            updated_at=snapshot.updated_at,
            node_count=len(snapshot.nodes),
            edge_count=len(snapshot.edges),
        )


class SnapshotListResponse(BaseModel):
    """Saved mind maps, most recent first"""
    snapshots: List[SnapshotListItem] = Field(default_factory=list)
    total: int = 0


class StatusResponse(BaseModel):
    """Generic status message"""
    status: str = "ok"
    message: Optional[str] = None


class HealthResponse(BaseModel):
    """Basic health check response"""
    status: str = Field(..., description="Health status")
    version: str = Field(..., description="Application version")
    storage_backend: str = Field(..., description="Active snapshot storage backend")
