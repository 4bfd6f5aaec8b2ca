"""
Prompt Registry

Central lookup for LLM prompts by name.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from typing import Optional

from .mind_maps import MIND_MAP_PROMPTS

PROMPTS = {
    **MIND_MAP_PROMPTS,
}


def get_prompt(diagram_type: str, language: str = 'en', prompt_type: str = 'generation_system') -> Optional[str]:
    """
    Look up a prompt by diagram type, prompt type and language.

    Returns:
        Prompt text, or None when no such prompt is registered
    """
    return PROMPTS.get(f"{diagram_type}_{prompt_type}_{language}")


__all__ = ['PROMPTS', 'MIND_MAP_PROMPTS', 'get_prompt']
