"""
Mind Map Workspace
==================

The live mind map together with its snapshot collection and generator.
Routers talk to this facade only.

Author: lycosa9527
Made by: MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from typing import List, Optional
import logging

from agents.mind_maps.mind_map_agent import GenerationResult, MindMapAgent
from models.domain.mindmap import Snapshot
from services.mindmap.exceptions import ConfirmationRequiredError, GraphValidationError
from services.mindmap.graph_store import GraphStore
from services.mindmap.snapshot_gateway import SnapshotGateway
from services.mindmap.storage import create_storage

logger = logging.getLogger(__name__)


class MindMapWorkspace:
    """One editor's graph, snapshots and generator."""

    def __init__(
        self,
        store: Optional[GraphStore] = None,
        gateway: Optional[SnapshotGateway] = None,
        agent: Optional[MindMapAgent] = None
    ):
        self.store = store or GraphStore()
        self.gateway = gateway or SnapshotGateway(create_storage())
        self.agent = agent or MindMapAgent()

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    async def generate(self, topic: str, confirm: bool = False) -> GenerationResult:
        """
        Replace the graph with a generated mind map.

        Raises:
            GraphValidationError: blank topic
            ConfirmationRequiredError: graph is not empty and confirm is False
            ImportFailedError: generation failed, graph unchanged
        """
        topic = (topic or '').strip()
        if not topic:
            raise GraphValidationError("Please enter a topic for the mind map")
        self._guard_replace("Generating", confirm)
        return await self.agent.generate_graph(topic, store=self.store)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def list_snapshots(self) -> List[Snapshot]:
        return self.gateway.list()

    def save_as(self, name: str) -> Snapshot:
        """
        Save the current graph as a new snapshot.

        Raises:
            GraphValidationError: blank name or empty graph
        """
        name = (name or '').strip()
        if not name:
            raise GraphValidationError("Please enter a name for the mind map")
        if self.store.is_empty():
            raise GraphValidationError("Cannot save an empty mind map")

        nodes, edges = self.store.export()
        snapshot = self.gateway.save(self.gateway.create(name, nodes, edges))
        self.store.name = snapshot.name
        return snapshot

    def update_snapshot(self, snapshot_id: str, name: Optional[str] = None, from_current: bool = False) -> Snapshot:
        """
        Rename a snapshot and/or overwrite its content with the live graph.

        Raises:
            GraphValidationError: nothing to change, blank name or empty graph
            SnapshotNotFoundError: unknown id
        """
        fields = {}
        if name is not None:
            name = name.strip()
            if not name:
                raise GraphValidationError("Snapshot name must not be empty", {"snapshot_id": snapshot_id})
            fields['name'] = name
        if from_current:
            if self.store.is_empty():
                raise GraphValidationError("Cannot save an empty mind map", {"snapshot_id": snapshot_id})
            fields['nodes'], fields['edges'] = self.store.export()
        if not fields:
            raise GraphValidationError("Nothing to update", {"snapshot_id": snapshot_id})
        return self.gateway.update(snapshot_id, **fields)

    def load_snapshot(self, snapshot_id: str, confirm: bool = False) -> Snapshot:
        """
        Replace the graph with a stored snapshot.

        Raises:
            SnapshotNotFoundError: unknown id, graph unchanged
            ConfirmationRequiredError: graph is not empty and confirm is False
        """
        snapshot = self.gateway.load(snapshot_id)
        self._guard_replace("Loading", confirm)
        self.store.replace(snapshot.nodes, snapshot.edges, name=snapshot.name)
        logger.info("[MindMapWorkspace] Loaded snapshot %s (%r)", snapshot.id, snapshot.name)
        return snapshot

    def delete_snapshot(self, snapshot_id: str) -> bool:
        return self.gateway.delete(snapshot_id)

    def _guard_replace(self, operation: str, confirm: bool) -> None:
        if not confirm and not self.store.is_empty():
            logger.warning("[MindMapWorkspace] %s refused without confirmation", operation)
            raise ConfirmationRequiredError(operation)


_workspace: Optional[MindMapWorkspace] = None


def get_workspace() -> MindMapWorkspace:
    """Process-wide workspace, created on first use. FastAPI dependency."""
    global _workspace
    if _workspace is None:
        _workspace = MindMapWorkspace()
    return _workspace
