"""
Node size estimation for mind map nodes.

Width grows with the label (8px per character plus padding) between a
minimum and a kind-dependent maximum; height grows with the number of
wrapped lines. Both the import flow and manual label edits use this,
so the result depends only on the inputs.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from functools import lru_cache
from typing import Tuple
import math

CHAR_WIDTH = 8
HORIZONTAL_PADDING = 40
MIN_WIDTH = 120
MAX_WIDTH = 300
MAX_EXPANDED_WIDTH = 400
LINE_HEIGHT = 20
VERTICAL_PADDING = 24
MIN_HEIGHT = 50


@lru_cache(maxsize=1024)
def estimate_node_size(text: str, expanded: bool = False) -> Tuple[int, int]:
    """
    Estimate the rendered box of a node.

    Args:
        text: Node label
        expanded: True for detail nodes, which may grow wider

    Returns:
        (width, height) in pixels
    """
    length = len(text or '')
    max_width = MAX_EXPANDED_WIDTH if expanded else MAX_WIDTH
    width = min(max(length * CHAR_WIDTH + HORIZONTAL_PADDING, MIN_WIDTH), max_width)

    per_line = (width - HORIZONTAL_PADDING) // CHAR_WIDTH
    lines = math.ceil(length / per_line)
    height = max(MIN_HEIGHT, lines * LINE_HEIGHT + VERTICAL_PADDING)
    return width, height
