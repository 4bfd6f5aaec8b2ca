"""
Mind Maps Module

Building blocks for mind maps, which organize ideas around a central topic:
node sizing, import parsing, hierarchical layout and AI generation.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from .mind_map_agent import GenerationResult, MindMapAgent

__all__ = ['GenerationResult', 'MindMapAgent']
