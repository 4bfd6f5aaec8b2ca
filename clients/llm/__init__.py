"""
LLM Clients Package

Provides the LLM client used for mind map generation:
- OpenRouterClient: OpenAI-compatible chat completions via OpenRouter

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from clients.llm.base import BaseLLMClient
from clients.llm.openrouter import OpenRouterClient

__all__ = [
    'BaseLLMClient',
    'OpenRouterClient',
]
