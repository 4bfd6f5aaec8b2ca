"""
OpenRouter Client Tests
=======================

Tests for request building and status code mapping, using an httpx
mock transport.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

import json

import httpx
import pytest

from clients.llm.openrouter import OpenRouterClient
from services.infrastructure.http.error_handler import (
    LLMAccessDeniedError,
    LLMProviderError,
    LLMRateLimitError,
    LLMTimeoutError,
    LLMValidationError,
)

API_URL = "https://openrouter.test/api/v1/chat/completions"
MESSAGES = [{"role": "user", "content": "Motion"}]


def _client(handler, api_key="test-key"):
    return OpenRouterClient(
        api_key=api_key,
        api_url=API_URL,
        model="test/model",
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


class TestOpenRouterClient:
    """Successful completions."""

    @pytest.mark.asyncio
    async def test_returns_content_and_usage(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={
                "choices": [{"message": {"content": "{\"nodes\": []}"}}],
                "usage": {"total_tokens": 12},
            })

        result = await _client(handler).chat_completion(MESSAGES, max_tokens=300)

        assert result == {"content": "{\"nodes\": []}", "usage": {"total_tokens": 12}}
        assert seen["auth"] == "Bearer test-key"
        assert seen["body"]["model"] == "test/model"
        assert seen["body"]["messages"] == MESSAGES
        assert seen["body"]["max_tokens"] == 300

    @pytest.mark.asyncio
    async def test_missing_key_fails_without_request(self):
        def handler(request):
            raise AssertionError("no request expected")

        with pytest.raises(LLMAccessDeniedError):
            await _client(handler, api_key="").chat_completion(MESSAGES)


class TestOpenRouterErrors:
    """Status codes and transport failures."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status, error_type", [
        (401, LLMAccessDeniedError),
        (403, LLMAccessDeniedError),
        (429, LLMRateLimitError),
        (500, LLMProviderError),
        (502, LLMProviderError),
    ])
    async def test_status_mapping(self, status, error_type):
        def handler(request):
            return httpx.Response(status, json={"error": {"message": "nope"}})

        with pytest.raises(error_type):
            await _client(handler).chat_completion(MESSAGES)

    @pytest.mark.asyncio
    async def test_provider_error_carries_detail(self):
        def handler(request):
            return httpx.Response(500, json={"error": {"message": "upstream down"}})

        with pytest.raises(LLMProviderError) as exc_info:
            await _client(handler).chat_completion(MESSAGES)
        assert exc_info.value.error_code == "HTTP500"
        assert "upstream down" in exc_info.value.user_message

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(LLMTimeoutError):
            await _client(handler).chat_completion(MESSAGES)

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(LLMProviderError) as exc_info:
            await _client(handler).chat_completion(MESSAGES)
        assert exc_info.value.error_code == "HTTPError"

    @pytest.mark.asyncio
    async def test_body_without_message(self):
        def handler(request):
            return httpx.Response(200, json={"choices": []})

        with pytest.raises(LLMValidationError):
            await _client(handler).chat_completion(MESSAGES)
