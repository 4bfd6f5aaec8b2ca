"""
Node Size Estimation Tests
==========================

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from agents.mind_maps.size_estimator import (
    MAX_EXPANDED_WIDTH,
    MAX_WIDTH,
    MIN_HEIGHT,
    MIN_WIDTH,
    estimate_node_size,
)


class TestEstimateNodeSize:
    """Width/height from label length and node kind."""

    def test_empty_label_gets_minimum_box(self):
        assert estimate_node_size("") == (MIN_WIDTH, MIN_HEIGHT)

    def test_short_label_uses_minimum_width(self):
        width, height = estimate_node_size("Hello")
        assert width == MIN_WIDTH
        assert height == MIN_HEIGHT

    def test_width_grows_with_text(self):
        # 20 chars * 8 + 40
        assert estimate_node_size("a" * 20) == (200, 50)

    def test_width_capped_for_regular_nodes(self):
        width, height = estimate_node_size("a" * 50)
        assert width == MAX_WIDTH
        # 32 chars per line -> 2 lines
        assert height == 2 * 20 + 24

    def test_expanded_nodes_grow_wider(self):
        width, height = estimate_node_size("a" * 100, expanded=True)
        assert width == MAX_EXPANDED_WIDTH
        # 45 chars per line -> 3 lines
        assert height == 3 * 20 + 24

    def test_result_is_deterministic(self):
        """Identical inputs always give identical sizes."""
        text = "Force is a push or pull that changes the state of motion."
        assert estimate_node_size(text, True) == estimate_node_size(text, True)
        assert estimate_node_size(text, False) == estimate_node_size(text, False)
