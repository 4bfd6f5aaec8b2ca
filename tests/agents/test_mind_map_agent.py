"""
Mind Map Agent Tests
====================

Tests for the generate -> parse -> layout -> commit flow with a mocked
LLM client.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from unittest.mock import AsyncMock

import pytest

from agents.mind_maps.layout_engine import LayoutEngine
from agents.mind_maps.mind_map_agent import MindMapAgent
from services.infrastructure.http.error_handler import (
    LLMAccessDeniedError,
    LLMProviderError,
    LLMRateLimitError,
    LLMTimeoutError,
    LLMValidationError,
)
from services.mindmap.exceptions import ImportFailedError, ImportFailureKind
from services.mindmap.id_generator import SequentialIdGenerator


def _agent(client):
    return MindMapAgent(
        client=client,
        layout_engine=LayoutEngine(id_generator=SequentialIdGenerator("gen")),
    )


def _client_returning(content):
    client = AsyncMock()
    client.chat_completion.return_value = {"content": content, "usage": {}}
    return client


class TestMindMapAgentGenerate:
    """Successful generation."""

    @pytest.mark.asyncio
    async def test_generation_replaces_graph(self, store, sample_generation):
        store.add_node(0, "Old root")
        agent = _agent(_client_returning(sample_generation))

        result = await agent.generate_graph("Newton's Laws", store=store)

        assert result.title == "Newton's Laws"
        assert len(store.nodes) == 5
        assert len(store.edges) == 4
        assert store.name == "Newton's Laws"
        assert "Old root" not in [node.label for node in store.nodes]

    @pytest.mark.asyncio
    async def test_prompt_contains_topic(self, store, sample_generation):
        client = _client_returning(sample_generation)
        await _agent(client).generate_graph("Thermodynamics", store=store)

        messages = client.chat_completion.call_args.args[0]
        assert messages[0]["role"] == "system"
        assert messages[1]["role"] == "user"
        assert "Thermodynamics" in messages[1]["content"]

    @pytest.mark.asyncio
    async def test_title_defaults_to_topic(self, store):
        agent = _agent(_client_returning('{"nodes": [{"id": "1", "text": "Root", "level": 0}]}'))
        result = await agent.generate_graph("  Optics  ", store=store)
        assert result.title == "Optics"
        assert store.name == "Optics"

    @pytest.mark.asyncio
    async def test_orphaned_nodes_do_not_fail(self, store):
        content = (
            '{"nodes": [{"id": "1", "text": "Root", "level": 0},'
            ' {"id": "2", "text": "Lost", "parentId": "99", "level": 1}]}'
        )
        result = await _agent(_client_returning(content)).generate_graph("Topic", store=store)

        lost = next(node for node in store.nodes if node.label == "Lost")
        assert not any(edge.target == lost.id for edge in store.edges)
        assert result.layout.orphaned == [lost.id]

    @pytest.mark.asyncio
    async def test_without_store_only_lays_out(self, sample_generation):
        result = await _agent(_client_returning(sample_generation)).generate_graph("Topic")
        assert len(result.layout.nodes) == 5


class TestMindMapAgentFailures:
    """Every failure leaves the graph untouched."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error, kind", [
        (LLMAccessDeniedError("denied", provider="openrouter"), ImportFailureKind.UNAUTHORIZED),
        (LLMRateLimitError("slow down"), ImportFailureKind.RATE_LIMITED),
        (LLMTimeoutError("timeout"), ImportFailureKind.TRANSPORT),
        (LLMProviderError("boom", provider="openrouter", error_code="HTTP500"), ImportFailureKind.TRANSPORT),
        (LLMValidationError("no message"), ImportFailureKind.PARSE_FAILURE),
    ])
    async def test_client_errors_map_to_kinds(self, store, error, kind):
        store.add_node(0, "Keep me")
        client = AsyncMock()
        client.chat_completion.side_effect = error

        with pytest.raises(ImportFailedError) as exc_info:
            await _agent(client).generate_graph("Topic", store=store)

        assert exc_info.value.kind is kind
        assert [node.label for node in store.nodes] == ["Keep me"]

    @pytest.mark.asyncio
    async def test_unparseable_reply(self, store):
        store.add_node(0, "Keep me")
        with pytest.raises(ImportFailedError) as exc_info:
            await _agent(_client_returning("Sorry, I can't do that.")).generate_graph("Topic", store=store)
        assert exc_info.value.kind is ImportFailureKind.PARSE_FAILURE
        assert len(store.nodes) == 1

    @pytest.mark.asyncio
    async def test_reply_without_nodes(self, store):
        with pytest.raises(ImportFailedError) as exc_info:
            await _agent(_client_returning('{"title": "T"}')).generate_graph("Topic", store=store)
        assert exc_info.value.kind is ImportFailureKind.SCHEMA_FAILURE
        assert store.is_empty()
