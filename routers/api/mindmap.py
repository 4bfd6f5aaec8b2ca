"""Mind Map Editing API Router.

Canvas gestures on the live mind map:
- GET /api/mindmap - Current nodes (with style), edges, selection, name
- POST /api/mindmap/nodes - Add a node at a level
- PATCH /api/mindmap/nodes/{id}/label - Commit a label edit
- PATCH /api/mindmap/nodes/{id}/position - Drag a node
- DELETE /api/mindmap/nodes/{id} - Delete a node and its edges
- POST /api/mindmap/nodes/{id}/edit - Open the inline editor
- DELETE /api/mindmap/nodes/{id}/edit - Cancel the inline editor
- POST /api/mindmap/edges - Manual connection
- PUT /api/mindmap/selection - Select a node (or clear with null)
- DELETE /api/mindmap - Clear the canvas
- POST /api/mindmap/generate - Replace the map with an AI generated one

Rejected gestures raise MindMapError subclasses, rendered by the
registered exception handlers.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
import logging

from fastapi import APIRouter, Depends

from models.domain.mindmap import Edge, Node
from models.requests.requests_mindmap import (
    AddEdgeRequest,
    AddNodeRequest,
    GenerateMindMapRequest,
    MoveNodeRequest,
    SelectRequest,
    UpdateLabelRequest,
)
from models.responses import GenerateMindMapResponse, MindMapResponse, StatusResponse, StyledNode
from services.mindmap.graph_store import GraphStore
from services.mindmap.workspace import MindMapWorkspace, get_workspace

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mindmap", tags=["mindmap"])


def build_mindmap_response(store: GraphStore) -> MindMapResponse:
    """Render the live graph the way the canvas draws it."""
    return MindMapResponse(
        name=store.name,
        nodes=[
            StyledNode(node=node, style=style, editing=node.editing)
            for node, style in store.styled_nodes()
        ],
        edges=store.edges,
        selected_id=store.selected_id,
    )


@router.get("", response_model=MindMapResponse)
async def get_mindmap(workspace: MindMapWorkspace = Depends(get_workspace)):
    """Get the current mind map."""
    return build_mindmap_response(workspace.store)


@router.post("/nodes", response_model=Node)
async def add_node(req: AddNodeRequest, workspace: MindMapWorkspace = Depends(get_workspace)):
    """
    Add a node.

    Level 0 needs no parent. Any other level needs the selected node, one
    level above, as its anchor.
    """
    return workspace.store.add_node(req.level, req.label, req.anchor_id)


@router.patch("/nodes/{node_id}/label", response_model=Node)
async def update_label(
    node_id: str,
    req: UpdateLabelRequest,
    workspace: MindMapWorkspace = Depends(get_workspace)
):
    """Commit an edited label. The node is resized, its position kept."""
    return workspace.store.update_label(node_id, req.label)


@router.patch("/nodes/{node_id}/position", response_model=Node)
async def move_node(
    node_id: str,
    req: MoveNodeRequest,
    workspace: MindMapWorkspace = Depends(get_workspace)
):
    """Drag a node."""
    return workspace.store.move_node(node_id, req.x, req.y)


@router.delete("/nodes/{node_id}", response_model=StatusResponse)
async def delete_node(node_id: str, workspace: MindMapWorkspace = Depends(get_workspace)):
    """Delete a node and every edge touching it. Unknown ids are a no-op."""
    removed = workspace.store.delete_node(node_id)
    return StatusResponse(message="Node deleted" if removed else "Node not found")


@router.post("/nodes/{node_id}/edit", response_model=Node)
async def begin_edit(node_id: str, workspace: MindMapWorkspace = Depends(get_workspace)):
    """Open the inline label editor on a node."""
    return workspace.store.begin_edit(node_id)


@router.delete("/nodes/{node_id}/edit", response_model=StatusResponse)
async def cancel_edit(node_id: str, workspace: MindMapWorkspace = Depends(get_workspace)):
    """Close the inline label editor without saving."""
    workspace.store.cancel_edit(node_id)
    return StatusResponse(message="Edit cancelled")


@router.post("/edges", response_model=Edge)
async def add_edge(req: AddEdgeRequest, workspace: MindMapWorkspace = Depends(get_workspace)):
    """Manually connect two nodes. Level rules do not apply."""
    return workspace.store.add_edge(req.source, req.target)


@router.put("/selection", response_model=MindMapResponse)
async def select_node(req: SelectRequest, workspace: MindMapWorkspace = Depends(get_workspace)):
    """Select a node, or clear the selection with null."""
    workspace.store.select(req.node_id)
    return build_mindmap_response(workspace.store)


@router.delete("", response_model=StatusResponse)
async def clear_mindmap(workspace: MindMapWorkspace = Depends(get_workspace)):
    """Clear the canvas. Stored snapshots are not touched."""
    workspace.store.clear()
    return StatusResponse(message="Mind map cleared")


@router.post("/generate", response_model=GenerateMindMapResponse)
async def generate_mindmap(
    req: GenerateMindMapRequest,
    workspace: MindMapWorkspace = Depends(get_workspace)
):
    """
    Replace the mind map with one generated for a topic.

    Requires confirm=true when the current map is not empty. On failure the
    current map is left unchanged.
    """
    result = await workspace.generate(req.topic, confirm=req.confirm)
    return GenerateMindMapResponse(
        success=True,
        title=result.title,
        node_count=len(result.layout.nodes),
        edge_count=len(result.layout.edges),
        orphaned=result.layout.orphaned,
    )
