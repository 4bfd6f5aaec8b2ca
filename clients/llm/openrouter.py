"""
OpenRouter LLM Client

Async client for the OpenRouter chat completions API (OpenAI-compatible),
used to generate mind maps from a topic. Uses httpx with HTTP/2 support.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from typing import Dict, List, Optional, Any
import json
import logging

import httpx

from clients.llm.base import BaseLLMClient
from config.settings import config
from services.infrastructure.http.error_handler import (
    LLMAccessDeniedError,
    LLMProviderError,
    LLMRateLimitError,
    LLMTimeoutError,
    LLMValidationError,
)

logger = logging.getLogger(__name__)


class OpenRouterClient(BaseLLMClient):
    """Async client for OpenRouter chat completions."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize OpenRouterClient.

        Args:
            api_key: Bearer token, defaults to OPENROUTER_API_KEY
            api_url: Chat completions endpoint, defaults to OPENROUTER_API_URL
            model: Model name, defaults to OPENROUTER_MODEL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests)
        """
        super().__init__(default_temperature=config.OPENROUTER_TEMPERATURE)
        self.api_key = api_key if api_key is not None else config.OPENROUTER_API_KEY
        self.api_url = api_url or config.OPENROUTER_API_URL
        self.model = model or config.OPENROUTER_MODEL
        self.timeout = timeout or config.OPENROUTER_TIMEOUT
        self.transport = transport

    async def chat_completion(
        self,
        messages: List[Dict],
        temperature: Optional[float] = None,
        max_tokens: int = 1000,
        **kwargs
    ) -> Dict[str, Any]:
        """
        Send one chat completion request.

        Args:
            messages: List of message dictionaries with 'role' and 'content'
            temperature: Sampling temperature, None uses default
            max_tokens: Maximum tokens in response
            **kwargs: Extra payload fields passed through

        Returns:
            Dict with 'content' and 'usage' keys

        Raises:
            LLMAccessDeniedError: missing key, 401 or 403
            LLMRateLimitError: 429
            LLMTimeoutError: request timed out
            LLMProviderError: transport failure or other non-200 status
            LLMValidationError: 200 response without a message
        """
        if not self.api_key:
            raise LLMAccessDeniedError(
                "OpenRouter API key is not configured",
                provider='openrouter',
                error_code='MissingApiKey'
            )

        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": self._get_temperature(temperature),
            "max_tokens": max_tokens,
            "stream": False,
        }
        if kwargs:
            logger.debug('[OpenRouterClient] Additional kwargs passed through: %s', list(kwargs.keys()))
            payload.update(kwargs)

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "X-Title": config.OPENROUTER_APP_TITLE,
        }
        if config.OPENROUTER_REFERER:
            headers["HTTP-Referer"] = config.OPENROUTER_REFERER

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout, connect=10.0),
                http2=True,
                transport=self.transport
            ) as client:
                response = await client.post(self.api_url, json=payload, headers=headers)
        except httpx.TimeoutException as e:
            logger.error('OpenRouter API timeout')
            raise LLMTimeoutError("OpenRouter API timeout") from e
        except httpx.HTTPError as e:
            logger.error('OpenRouter HTTP error: %s', e)
            raise LLMProviderError(
                f"OpenRouter HTTP error: {e}",
                provider='openrouter',
                error_code='HTTPError'
            ) from e

        if response.status_code != 200:
            self._raise_for_status(response)

        try:
            data = response.json()
            message = data['choices'][0]['message']
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error('OpenRouter returned an unexpected body: %s', response.text[:500])
            raise LLMValidationError("OpenRouter response has no message") from e

        return {
            'content': message.get('content') or '',
            'usage': data.get('usage', {}),
        }

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        """Map a non-200 response to the matching error. Always raises."""
        error_text = response.text
        logger.error('OpenRouter API error %d: %s', response.status_code, error_text[:500])

        detail = error_text
        try:
            error_data = json.loads(error_text)
            detail = error_data.get('error', {}).get('message') or error_text
        except (json.JSONDecodeError, AttributeError):
            pass

        if response.status_code in (401, 403):
            raise LLMAccessDeniedError(
                f"Unauthorized: {detail}",
                provider='openrouter',
                error_code='Unauthorized'
            )
        if response.status_code == 429:
            raise LLMRateLimitError(f"OpenRouter rate limit: {detail}")
        error = LLMProviderError(
            f"OpenRouter API error ({response.status_code}): {detail}",
            provider='openrouter',
            error_code=f'HTTP{response.status_code}'
        )
        error.user_message = f"Error: {detail}"
        raise error
