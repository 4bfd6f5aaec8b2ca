"""LLM configuration settings.

This module provides the content-generation service configuration used by
the mind map import flow (OpenRouter chat completions).
"""
import logging
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)


class LLMConfigMixin:
    """Mixin class for LLM configuration properties.

    This mixin expects the class to inherit from BaseConfig or provide
    a _get_cached_value method.
    """

    if TYPE_CHECKING:
        def _get_cached_value(self, _key: str, _default: Any = None) -> Any:
            """Type stub: method provided by BaseConfig."""
            return _default

        def _get_int(self, _key: str, _default: int, _minimum: int = 0) -> int:
            """Type stub: method provided by BaseConfig."""
            return _default

        def _get_float(self, _key: str, _default: float) -> float:
            """Type stub: method provided by BaseConfig."""
            return _default

    @property
    def OPENROUTER_API_KEY(self):
        """Get OpenRouter API key from environment."""
        api_key = self._get_cached_value('OPENROUTER_API_KEY')
        if not api_key or not isinstance(api_key, str):
            logger.warning("Invalid or missing OPENROUTER_API_KEY")
            return None
        return api_key.strip()

    @property
    def OPENROUTER_API_URL(self):
        """Chat completions endpoint."""
        default_url = 'https://openrouter.ai/api/v1/chat/completions'
        return self._get_cached_value('OPENROUTER_API_URL', default_url)

    @property
    def OPENROUTER_MODEL(self):
        """Model used for mind map generation."""
        return self._get_cached_value('OPENROUTER_MODEL', 'meta-llama/llama-3.3-8b-instruct:free')

    @property
    def OPENROUTER_APP_TITLE(self):
        """Value sent in the X-Title header."""
        return self._get_cached_value('OPENROUTER_APP_TITLE', 'Mind Map Studio')

    @property
    def OPENROUTER_REFERER(self):
        """Value sent in the HTTP-Referer header (optional)."""
        return self._get_cached_value('OPENROUTER_REFERER')

    @property
    def OPENROUTER_TIMEOUT(self):
        """Request timeout in seconds."""
        return self._get_float('OPENROUTER_TIMEOUT', 60.0)

    @property
    def OPENROUTER_MAX_TOKENS(self):
        """Maximum tokens requested for one generated mind map."""
        return self._get_int('OPENROUTER_MAX_TOKENS', 3000, minimum=1)

    @property
    def OPENROUTER_TEMPERATURE(self):
        """Sampling temperature for generation."""
        return self._get_float('OPENROUTER_TEMPERATURE', 0.7)
