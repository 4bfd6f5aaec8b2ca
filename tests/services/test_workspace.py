"""
Mind Map Workspace Tests
========================

Tests for the guards around save, load and generation.

@author lycosa9527
@made_by MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from unittest.mock import AsyncMock, Mock

import pytest

from services.mindmap.exceptions import (
    ConfirmationRequiredError,
    GraphValidationError,
    SnapshotNotFoundError,
)
from services.mindmap.workspace import MindMapWorkspace


@pytest.fixture
def agent():
    mock_agent = Mock()
    mock_agent.generate_graph = AsyncMock(return_value="generated")
    return mock_agent


@pytest.fixture
def workspace(store, gateway, agent):
    return MindMapWorkspace(store=store, gateway=gateway, agent=agent)


def _build_motion(store):
    root = store.add_node(0, "Motion")
    store.select(root.id)
    store.add_node(1, "Kinematics")
    return root


class TestSaveAs:

    def test_save_names_the_map(self, workspace, store):
        _build_motion(store)
        snapshot = workspace.save_as("  M1 ")
        assert snapshot.name == "M1"
        assert store.name == "M1"
        assert len(snapshot.nodes) == 2

    def test_blank_name_rejected(self, workspace, store):
        _build_motion(store)
        with pytest.raises(GraphValidationError):
            workspace.save_as("   ")
        assert workspace.list_snapshots() == []

    def test_empty_graph_rejected(self, workspace):
        with pytest.raises(GraphValidationError):
            workspace.save_as("Empty")


class TestUpdateSnapshot:

    def test_rename(self, workspace, store):
        _build_motion(store)
        snapshot = workspace.save_as("M1")
        assert workspace.update_snapshot(snapshot.id, name="M2").name == "M2"

    def test_overwrite_from_current(self, workspace, store):
        root = _build_motion(store)
        snapshot = workspace.save_as("M1")
        store.add_node(1, "Dynamics", anchor_id=root.id)
        updated = workspace.update_snapshot(snapshot.id, from_current=True)
        assert len(updated.nodes) == 3

    def test_nothing_to_update(self, workspace, store):
        _build_motion(store)
        snapshot = workspace.save_as("M1")
        with pytest.raises(GraphValidationError):
            workspace.update_snapshot(snapshot.id)

    def test_unknown_snapshot(self, workspace):
        with pytest.raises(SnapshotNotFoundError):
            workspace.update_snapshot("nope", name="X")


class TestLoadSnapshot:

    def test_motion_scenario(self, workspace, store):
        _build_motion(store)
        snapshot = workspace.save_as("M1")
        store.clear()

        workspace.load_snapshot(snapshot.id)

        assert len(store.nodes) == 2
        assert len(store.edges) == 1
        assert {node.label for node in store.nodes} == {"Motion", "Kinematics"}
        assert store.name == "M1"

    def test_non_empty_graph_needs_confirmation(self, workspace, store):
        _build_motion(store)
        snapshot = workspace.save_as("M1")
        store.add_node(0, "Unsaved")

        with pytest.raises(ConfirmationRequiredError):
            workspace.load_snapshot(snapshot.id)
        assert len(store.nodes) == 3

        workspace.load_snapshot(snapshot.id, confirm=True)
        assert len(store.nodes) == 2

    def test_unknown_snapshot_leaves_graph(self, workspace, store):
        _build_motion(store)
        with pytest.raises(SnapshotNotFoundError):
            workspace.load_snapshot("nope", confirm=True)
        assert len(store.nodes) == 2

    def test_delete(self, workspace, store):
        _build_motion(store)
        snapshot = workspace.save_as("M1")
        assert workspace.delete_snapshot(snapshot.id) is True
        assert workspace.delete_snapshot(snapshot.id) is False


class TestGenerate:

    @pytest.mark.asyncio
    async def test_empty_graph_generates_without_confirmation(self, workspace, agent, store):
        assert await workspace.generate("Optics") == "generated"
        agent.generate_graph.assert_awaited_once_with("Optics", store=store)

    @pytest.mark.asyncio
    async def test_non_empty_graph_needs_confirmation(self, workspace, agent, store):
        _build_motion(store)
        with pytest.raises(ConfirmationRequiredError):
            await workspace.generate("Optics")
        agent.generate_graph.assert_not_awaited()

        await workspace.generate("Optics", confirm=True)
        agent.generate_graph.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_blank_topic_rejected(self, workspace, agent):
        with pytest.raises(GraphValidationError):
            await workspace.generate("   ")
        agent.generate_graph.assert_not_awaited()
