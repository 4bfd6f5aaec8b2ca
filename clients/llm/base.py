"""
Base Classes and Common Utilities for LLM Clients

Provides base classes and shared functionality for all LLM client implementations.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from typing import Dict, List, Optional, Any
from abc import ABC, abstractmethod
import logging

logger = logging.getLogger(__name__)


class BaseLLMClient(ABC):
    """
    Base class for LLM clients.

    Provides common interface and shared functionality.
    """

    def __init__(self, default_temperature: float = 0.7):
        """
        Initialize base LLM client.

        Args:
            default_temperature: Default temperature for sampling
        """
        self.default_temperature = default_temperature

    @abstractmethod
    async def chat_completion(
        self,
        messages: List[Dict],
        temperature: Optional[float] = None,
        max_tokens: int = 1000,
        **kwargs
    ) -> Dict[str, Any]:
        """
        Send chat completion request.

        Args:
            messages: List of message dictionaries
            temperature: Sampling temperature
            max_tokens: Maximum tokens in response
            **kwargs: Additional parameters

        Returns:
            Dict with 'content' and 'usage' keys
        """

    def _get_temperature(self, temperature: Optional[float]) -> float:
        """
        Get temperature value, using default if not specified.

        Args:
            temperature: Optional temperature value

        Returns:
            Temperature value to use
        """
        return temperature if temperature is not None else self.default_temperature
