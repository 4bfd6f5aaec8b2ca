"""
base agent module.
"""
from abc import ABC, abstractmethod
from typing import Any
import logging

from dotenv import load_dotenv



# Load environment variables for logging configuration
load_dotenv()

logger = logging.getLogger(__name__)

class BaseAgent(ABC):
    """
    Abstract base class for LLM-backed diagram agents.

    Subclasses turn a user prompt into a diagram and commit it.
    """

    def __init__(self, model: str = 'openrouter'):
        """
        Initialize the base agent.

        Args:
            model (str): Name of the LLM backend this agent talks to.
        """
        self.language = 'en'
        self.model = model
        self.logger = logger

    @abstractmethod
    async def generate_graph(self, user_prompt: str, **kwargs: Any) -> Any:
        """
        Generate a diagram from a user prompt.

        Args:
            user_prompt: User's input prompt
            **kwargs: Additional parameters for specific agent types
        """

    def set_language(self, language: str) -> None:
        """Set the language for this agent."""
        self.language = language

    def get_language(self) -> str:
        """Get the current language setting."""
        return self.language
