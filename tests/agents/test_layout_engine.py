"""
Layout Engine Tests
===================

Tests for the hierarchical placement of imported drafts.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

import pytest

from agents.mind_maps.import_parser import DraftNode
from agents.mind_maps.layout_engine import LayoutEngine, centered_offset
from agents.mind_maps.size_estimator import estimate_node_size
from models.common import EdgeStyle
from services.mindmap.id_generator import SequentialIdGenerator


@pytest.fixture
def engine():
    return LayoutEngine(id_generator=SequentialIdGenerator("n"))


def _positions(result):
    return {node.label: (node.position.x, node.position.y) for node in result.nodes}


class TestCenteredOffset:

    def test_single_item_sits_on_center(self):
        assert centered_offset(500, 1, 0, 250) == 500

    def test_row_is_symmetric(self):
        xs = [centered_offset(500, 4, i, 250) for i in range(4)]
        assert xs == [125, 375, 625, 875]


class TestLayoutEngine:
    """Placement, ids and edges."""

    def test_tree_positions(self, engine):
        drafts = [
            DraftNode("1", "Root", 0),
            DraftNode("2", "Left", 1, "1"),
            DraftNode("3", "Right", 1, "1"),
            DraftNode("4", "Concept", 2, "2"),
            DraftNode("5", "Detail A", 3, "4"),
            DraftNode("6", "Detail B", 3, "4"),
        ]
        positions = _positions(engine.layout(drafts))

        assert positions["Root"] == (500, 50)
        assert positions["Left"] == (375, 200)
        assert positions["Right"] == (625, 200)
        assert positions["Concept"] == (375, 500)
        # Level-2 parent x is re-derived as 300 + index * 200
        assert positions["Detail A"] == (210, 650)
        assert positions["Detail B"] == (390, 650)

    def test_level_one_offsets_sum_to_zero(self, engine):
        """Branch row is centered under the root."""
        drafts = [DraftNode("r", "Root", 0)] + [
            DraftNode(str(i), f"Branch {i}", 1, "r") for i in range(5)
        ]
        result = engine.layout(drafts)
        root_x = result.nodes[0].position.x
        offsets = [node.position.x - root_x for node in result.nodes[1:]]
        assert sum(offsets) == pytest.approx(0)

    def test_ids_edges_and_styles(self, engine):
        drafts = [
            DraftNode("a", "Root", 0),
            DraftNode("b", "Branch", 1, "a"),
            DraftNode("c", "Concept", 2, "b"),
        ]
        result = engine.layout(drafts)

        assert result.id_map == {"a": "n_0", "b": "n_1", "c": "n_2"}
        assert [(e.id, e.source, e.target, e.style) for e in result.edges] == [
            ("en_0-n_1", "n_0", "n_1", EdgeStyle.ROOT),
            ("en_1-n_2", "n_1", "n_2", EdgeStyle.BRANCH),
        ]
        assert result.nodes[2].parent_id == "n_1"
        assert result.orphaned == []

    def test_unknown_parent_is_left_unconnected(self, engine):
        drafts = [
            DraftNode("1", "Root", 0),
            DraftNode("2", "Stray", 2, "missing"),
        ]
        result = engine.layout(drafts)

        stray = result.nodes[1]
        assert (stray.position.x, stray.position.y) == (200, 500)
        assert stray.parent_id is None
        assert result.edges == []
        assert result.orphaned == [stray.id]

    def test_level_one_with_unknown_parent_keeps_row_position(self, engine):
        result = engine.layout([DraftNode("2", "Branch", 1, "nowhere")])
        node = result.nodes[0]
        assert (node.position.x, node.position.y) == (500, 200)
        assert result.orphaned == [node.id]

    def test_self_parent_gets_no_edge(self, engine):
        result = engine.layout([DraftNode("x", "Loop", 1, "x")])
        assert result.edges == []
        assert result.orphaned == []

    def test_detail_flag_and_size(self, engine):
        long_text = "Momentum is mass times velocity and is conserved in isolated systems."
        drafts = [
            DraftNode("1", "Short", 3),
            DraftNode("2", long_text, 3),
            DraftNode("3", "Flagged", 2, is_detail=True),
        ]
        nodes = engine.layout(drafts).nodes

        assert nodes[0].is_detail is False
        assert nodes[1].is_detail is True
        assert (nodes[1].size.width, nodes[1].size.height) == estimate_node_size(long_text, True)
        assert nodes[2].is_detail is True

    def test_empty_batch(self, engine):
        result = engine.layout([])
        assert result.nodes == []
        assert result.edges == []
        assert result.id_map == {}
