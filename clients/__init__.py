"""
External API Clients Package

This package contains clients for external services:
- LLM: OpenRouter chat completions client used for mind map generation

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from .llm import BaseLLMClient, OpenRouterClient

__all__ = [
    'BaseLLMClient',
    'OpenRouterClient',
]
