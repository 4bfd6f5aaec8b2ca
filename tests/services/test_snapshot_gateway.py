"""
Snapshot Gateway Tests
======================

Tests for saving, listing, updating, loading and deleting snapshots.

@author lycosa9527
@made_by MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

import pytest

from models.domain.mindmap import Edge, Node, Size
from services.mindmap.exceptions import SnapshotNotFoundError


def _node(node_id, label, level=0):
    return Node(id=node_id, label=label, level=level, size=Size(width=120, height=50))


@pytest.fixture
def graph():
    nodes = [_node("a", "Motion"), _node("b", "Kinematics", 1)]
    edges = [Edge(id="ea-b", source="a", target="b")]
    return nodes, edges


class TestSaveAndLoad:

    def test_round_trip(self, gateway, graph):
        nodes, edges = graph
        saved = gateway.save(gateway.create("M1", nodes, edges))
        loaded = gateway.load(saved.id)

        key = lambda item: item.id  # noqa: E731
        assert sorted(loaded.nodes, key=key) == sorted(nodes, key=key)
        assert sorted(loaded.edges, key=key) == sorted(edges, key=key)
        assert loaded.name == "M1"

    def test_newest_first_and_no_name_dedupe(self, gateway, graph):
        first = gateway.save(gateway.create("Same", *graph))
        second = gateway.save(gateway.create("Same", *graph))
        assert [s.id for s in gateway.list()] == [second.id, first.id]

    def test_dangling_edges_are_not_stored(self, gateway):
        nodes = [_node("a", "Alone")]
        edges = [Edge(id="e", source="a", target="gone")]
        saved = gateway.save(gateway.create("Orphan edge", nodes, edges))
        assert gateway.load(saved.id).edges == []

    def test_snapshot_is_independent_of_source(self, gateway, graph):
        nodes, edges = graph
        saved = gateway.save(gateway.create("M1", nodes, edges))
        nodes[0].label = "Changed later"
        assert gateway.load(saved.id).nodes[0].label == "Motion"

    def test_load_unknown(self, gateway):
        with pytest.raises(SnapshotNotFoundError) as exc_info:
            gateway.load("nope")
        assert exc_info.value.error_code == "SNAPSHOT_NOT_FOUND"

    def test_edit_state_is_not_persisted(self, gateway, storage):
        node = _node("a", "Motion")
        node.editing = True
        gateway.save(gateway.create("M1", [node], []))
        assert "editing" not in storage.read("test_snapshots")


class TestUpdateAndDelete:

    def test_rename_stamps_updated_at(self, gateway, graph):
        saved = gateway.save(gateway.create("Old", *graph))
        updated = gateway.update(saved.id, name="New")
        assert updated.name == "New"
        assert updated.updated_at >= saved.updated_at
        assert updated.created_at == saved.created_at
        assert gateway.load(saved.id).name == "New"

    def test_replace_content(self, gateway, graph):
        saved = gateway.save(gateway.create("M1", *graph))
        gateway.update(saved.id, nodes=[_node("z", "Only")], edges=[])
        assert [n.label for n in gateway.load(saved.id).nodes] == ["Only"]

    def test_update_unknown(self, gateway):
        with pytest.raises(SnapshotNotFoundError):
            gateway.update("nope", name="X")

    def test_update_rejects_other_fields(self, gateway, graph):
        saved = gateway.save(gateway.create("M1", *graph))
        with pytest.raises(ValueError):
            gateway.update(saved.id, id="hijack")

    def test_delete(self, gateway, graph):
        saved = gateway.save(gateway.create("M1", *graph))
        assert gateway.delete(saved.id) is True
        assert gateway.list() == []

    def test_delete_unknown_is_noop(self, gateway):
        assert gateway.delete("nope") is False


class TestStoredData:

    def test_missing_key_is_empty(self, gateway):
        assert gateway.list() == []

    def test_unreadable_data_is_treated_as_empty(self, gateway, storage):
        storage.write("test_snapshots", "{not json")
        assert gateway.list() == []


class TestMotionScenario:
    """Build, save, clear and restore through the store and gateway."""

    def test_save_clear_load(self, store, gateway):
        root = store.add_node(0, "Motion")
        store.select(root.id)
        store.add_node(1, "Kinematics", anchor_id=root.id)

        snapshot = gateway.save(gateway.create("M1", *store.export()))
        store.clear()
        assert store.is_empty()

        loaded = gateway.load(snapshot.id)
        store.replace(loaded.nodes, loaded.edges, name=loaded.name)

        assert len(store.nodes) == 2
        assert len(store.edges) == 1
        assert sorted(node.label for node in store.nodes) == ["Kinematics", "Motion"]
