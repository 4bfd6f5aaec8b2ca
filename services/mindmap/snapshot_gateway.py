"""
Snapshot Gateway
================

Saves and restores named copies of the mind map. The whole collection is
serialized under one storage key, newest first. Every call reads and
writes the full collection, so the last writer wins.

Author: lycosa9527
Made by: MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from typing import Any, List, Optional, Sequence
import logging

from pydantic import TypeAdapter, ValidationError

from config.settings import config
from models.domain.mindmap import Edge, Node, Snapshot, utc_now
from services.mindmap.exceptions import SnapshotNotFoundError
from services.mindmap.id_generator import IdGenerator, uuid_id_generator
from services.mindmap.storage import KeyValueStorage

logger = logging.getLogger(__name__)

_SNAPSHOT_LIST = TypeAdapter(List[Snapshot])
_UPDATABLE_FIELDS = ('name', 'nodes', 'edges')


def _without_dangling_edges(nodes: Sequence[Node], edges: Sequence[Edge]) -> List[Edge]:
    node_ids = {node.id for node in nodes}
    kept = [edge for edge in edges if edge.source in node_ids and edge.target in node_ids]
    if len(kept) != len(edges):
        logger.warning("[SnapshotGateway] Dropped %s dangling edges", len(edges) - len(kept))
    return kept


class SnapshotGateway:
    """Persistence for named snapshots over a key/value storage."""

    def __init__(
        self,
        storage: KeyValueStorage,
        storage_key: Optional[str] = None,
        id_generator: Optional[IdGenerator] = None
    ):
        self.storage = storage
        self.storage_key = storage_key or config.STORAGE_KEY
        self.id_generator = id_generator or uuid_id_generator("map")

    def create(self, name: str, nodes: Sequence[Node], edges: Sequence[Edge]) -> Snapshot:
        """Build a new, unsaved snapshot with a fresh id."""
        now = utc_now()
        return Snapshot(
            id=self.id_generator(),
            name=name,
            created_at=now,
            updated_at=now,
            nodes=[node.model_copy(deep=True) for node in nodes],
            edges=[edge.model_copy(deep=True) for edge in edges],
        )

    def save(self, snapshot: Snapshot) -> Snapshot:
        """Store a snapshot in front of the others. Names are not deduplicated."""
        stored = snapshot.model_copy(deep=True)
        stored.edges = _without_dangling_edges(stored.nodes, stored.edges)
        snapshots = self._read_all()
        snapshots.insert(0, stored)
        self._write_all(snapshots)
        logger.info("[SnapshotGateway] Saved snapshot %s (%r)", stored.id, stored.name)
        return stored.model_copy(deep=True)

    def update(self, snapshot_id: str, **fields: Any) -> Snapshot:
        """
        Replace fields of a stored snapshot in place and stamp updated_at.

        Args:
            snapshot_id: Snapshot to change
            **fields: Any of name, nodes, edges

        Raises:
            SnapshotNotFoundError: no snapshot with that id
            ValueError: unknown field name
        """
        unknown = set(fields) - set(_UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update snapshot fields: {sorted(unknown)}")

        snapshots = self._read_all()
        for index, current in enumerate(snapshots):
            if current.id != snapshot_id:
                continue
            data = current.model_dump()
            data.update(fields)
            data['updated_at'] = utc_now()
            updated = Snapshot.model_validate(data)
            updated.edges = _without_dangling_edges(updated.nodes, updated.edges)
            snapshots[index] = updated
            self._write_all(snapshots)
            logger.info("[SnapshotGateway] Updated snapshot %s", snapshot_id)
            return updated.model_copy(deep=True)

        raise SnapshotNotFoundError(snapshot_id)

    def list(self) -> List[Snapshot]:
        """All stored snapshots, most recent first."""
        return self._read_all()

    def delete(self, snapshot_id: str) -> bool:
        """Remove a snapshot. Returns False (no error) when absent."""
        snapshots = self._read_all()
        remaining = [snapshot for snapshot in snapshots if snapshot.id != snapshot_id]
        if len(remaining) == len(snapshots):
            return False
        self._write_all(remaining)
        logger.info("[SnapshotGateway] Deleted snapshot %s", snapshot_id)
        return True

    def load(self, snapshot_id: str) -> Snapshot:
        """
        Fetch one snapshot for hydration.

        Raises:
            SnapshotNotFoundError: no snapshot with that id
        """
        for snapshot in self._read_all():
            if snapshot.id == snapshot_id:
                return snapshot
        raise SnapshotNotFoundError(snapshot_id)

    def _read_all(self) -> List[Snapshot]:
        raw = self.storage.read(self.storage_key)
        if not raw:
            return []
        try:
            return _SNAPSHOT_LIST.validate_json(raw)
        except (ValidationError, ValueError) as e:
            logger.error("[SnapshotGateway] Stored snapshots are unreadable, treating as empty: %s", e)
            return []

    def _write_all(self, snapshots: List[Snapshot]) -> None:
        self.storage.write(self.storage_key, _SNAPSHOT_LIST.dump_json(snapshots).decode('utf-8'))
