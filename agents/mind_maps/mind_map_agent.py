"""
Mind Map Agent

Generates a mind map for a topic:

1. One chat completion with the mind map system prompt
2. ImportParser turns the reply into draft nodes
3. LayoutEngine assigns ids, positions and edges
4. A single GraphStore.replace commits the result

Any failure raises ImportFailedError before step 4, leaving the graph as it
was. Nothing is retried automatically.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from dataclasses import dataclass
from typing import Any, Optional, TYPE_CHECKING
import logging

from agents.core.base_agent import BaseAgent
from agents.mind_maps.import_parser import parse_import
from agents.mind_maps.layout_engine import LayoutEngine, LayoutResult
from clients.llm.base import BaseLLMClient
from clients.llm.openrouter import OpenRouterClient
from config.settings import config
from prompts import get_prompt
from services.infrastructure.http.error_handler import (
    LLMAccessDeniedError,
    LLMRateLimitError,
    LLMServiceError,
    LLMValidationError,
)
from services.mindmap.exceptions import ImportFailedError, ImportFailureKind

if TYPE_CHECKING:
    from services.mindmap.graph_store import GraphStore

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """What a successful import committed"""
    title: str
    layout: LayoutResult


class MindMapAgent(BaseAgent):
    """Topic -> positioned mind map, via one LLM call."""

    def __init__(
        self,
        client: Optional[BaseLLMClient] = None,
        layout_engine: Optional[LayoutEngine] = None,
        model: str = 'openrouter'
    ):
        super().__init__(model=model)
        self.diagram_type = "mind_map"
        self.client = client or OpenRouterClient()
        self.layout_engine = layout_engine or LayoutEngine()

    async def generate_graph(self, user_prompt: str, store: Optional["GraphStore"] = None, **kwargs: Any) -> GenerationResult:
        """
        Generate a mind map for a topic and commit it to the store.

        Args:
            user_prompt: The topic
            store: GraphStore to replace on success; None only lays out

        Returns:
            GenerationResult with the title and the committed layout

        Raises:
            ImportFailedError: the reply could not be fetched or imported
        """
        topic = (user_prompt or '').strip()
        content = await self._request_content(topic)

        imported = parse_import(content)
        layout = self.layout_engine.layout(imported.drafts)
        title = imported.title or topic

        if layout.orphaned:
            logger.warning(
                "[MindMapAgent] %s imported nodes reference unknown parents and stay unconnected",
                len(layout.orphaned)
            )

        if store is not None:
            store.replace(layout.nodes, layout.edges, name=title)

        logger.info(
            "[MindMapAgent] Generated %r: %s nodes, %s edges",
            title,
            len(layout.nodes),
            len(layout.edges)
        )
        return GenerationResult(title=title, layout=layout)

    async def _request_content(self, topic: str) -> str:
        messages = [
            {"role": "system", "content": get_prompt("mind_map", self.language, "generation_system")},
            {"role": "user", "content": get_prompt("mind_map", self.language, "generation_user").format(topic=topic)},
        ]
        try:
            response = await self.client.chat_completion(
                messages,
                max_tokens=config.OPENROUTER_MAX_TOKENS
            )
        except LLMAccessDeniedError as e:
            logger.warning("[MindMapAgent] Generation rejected: %s", e)
            raise ImportFailedError(ImportFailureKind.UNAUTHORIZED) from e
        except LLMRateLimitError as e:
            logger.warning("[MindMapAgent] Rate limited: %s", e)
            raise ImportFailedError(ImportFailureKind.RATE_LIMITED) from e
        except LLMValidationError as e:
            logger.warning("[MindMapAgent] Unusable response: %s", e)
            raise ImportFailedError(ImportFailureKind.PARSE_FAILURE) from e
        except LLMServiceError as e:
            logger.error("[MindMapAgent] Generation request failed: %s", e)
            message = getattr(e, 'user_message', None)
            raise ImportFailedError(ImportFailureKind.TRANSPORT, message) from e

        return response.get('content') or ''
