"""Mind Map Studio Configuration Module.

This module provides centralized configuration management for the application.
It handles environment variable loading and provides a clean interface
for accessing configuration values throughout the application.

Features:
- Environment variable loading with .env support
- Property-based configuration access for real-time updates
- Default values for all configuration options

Environment Variables:
- OPENROUTER_API_KEY: Required for AI mind map generation
- STORAGE_BACKEND: memory | file | redis
- LAYOUT_*: canvas coordinates and spacing

Usage:
    from config.settings import config
    api_key = config.OPENROUTER_API_KEY

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
import logging

from dotenv import load_dotenv

from config.base_config import BaseConfig
from config.llm_config import LLMConfigMixin
from config.storage_config import StorageConfigMixin
from config.visualization_config import LayoutConfigMixin

logger = logging.getLogger(__name__)

load_dotenv()  # Load environment variables from .env file


class Config(
    BaseConfig,
    LLMConfigMixin,
    LayoutConfigMixin,
    StorageConfigMixin
):
    """
    Centralized configuration management for Mind Map Studio.

    Combines all configuration mixins to provide a unified interface
    for accessing configuration values throughout the application.
    """


# Create global configuration instance
config = Config()
