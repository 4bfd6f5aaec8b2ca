"""Saved Mind Maps API Router.

API endpoints for named snapshots of the live mind map:
- GET /api/snapshots - List saved mind maps, most recent first
- POST /api/snapshots - Save the current mind map under a name
- PUT /api/snapshots/{id} - Rename and/or overwrite with the current map
- DELETE /api/snapshots/{id} - Delete a saved mind map
- POST /api/snapshots/{id}/load - Replace the current map with a saved one

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
import logging

from fastapi import APIRouter, Depends

from models.domain.mindmap import Snapshot
from models.requests.requests_mindmap import (
    LoadSnapshotRequest,
    SaveSnapshotRequest,
    UpdateSnapshotRequest,
)
from models.responses import MindMapResponse, SnapshotListItem, SnapshotListResponse, StatusResponse
from services.mindmap.workspace import MindMapWorkspace, get_workspace

from .mindmap import build_mindmap_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/snapshots", tags=["snapshots"])


@router.get("", response_model=SnapshotListResponse)
async def list_snapshots(workspace: MindMapWorkspace = Depends(get_workspace)):
    """List saved mind maps."""
    snapshots = workspace.list_snapshots()
    return SnapshotListResponse(
        snapshots=[SnapshotListItem.from_snapshot(snapshot) for snapshot in snapshots],
        total=len(snapshots),
    )


@router.post("", response_model=Snapshot)
async def save_snapshot(req: SaveSnapshotRequest, workspace: MindMapWorkspace = Depends(get_workspace)):
    """Save the current mind map. Names need not be unique."""
    return workspace.save_as(req.name)


@router.put("/{snapshot_id}", response_model=Snapshot)
async def update_snapshot(
    snapshot_id: str,
    req: UpdateSnapshotRequest,
    workspace: MindMapWorkspace = Depends(get_workspace)
):
    """Rename a saved mind map and/or overwrite it with the current one."""
    return workspace.update_snapshot(snapshot_id, name=req.name, from_current=req.from_current)


@router.delete("/{snapshot_id}", response_model=StatusResponse)
async def delete_snapshot(snapshot_id: str, workspace: MindMapWorkspace = Depends(get_workspace)):
    """Delete a saved mind map. Unknown ids are a no-op."""
    removed = workspace.delete_snapshot(snapshot_id)
    return StatusResponse(message="Mind map deleted" if removed else "Mind map not found")


@router.post("/{snapshot_id}/load", response_model=MindMapResponse)
async def load_snapshot(
    snapshot_id: str,
    req: LoadSnapshotRequest,
    workspace: MindMapWorkspace = Depends(get_workspace)
):
    """
    Replace the current mind map with a saved one.

    Requires confirm=true when the current map is not empty.
    """
    workspace.load_snapshot(snapshot_id, confirm=req.confirm)
    return build_mindmap_response(workspace.store)
