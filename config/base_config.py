"""Base configuration class and core settings.

This module provides the base Config class with caching mechanism and core
application settings like version, server configuration, and logging.
"""
import logging
import os
import time
from pathlib import Path

logger = logging.getLogger(__name__)


class BaseConfig:
    """Base configuration class with caching mechanism."""

    def __init__(self):
        self._cache = {}
        self._cache_timestamp = 0
        self._cache_duration = 30
        self._version = None

    def _get_cached_value(self, key: str, default=None):
        """Get cached value from environment."""
        current_time = time.time()
        if current_time - self._cache_timestamp > self._cache_duration:
            self._cache.clear()
            self._cache_timestamp = current_time
        if key not in self._cache:
            self._cache[key] = os.environ.get(key, default)
        return self._cache[key]

    def _get_int(self, key: str, default: int, minimum: int = 0) -> int:
        """Read an integer setting, falling back to default when invalid."""
        try:
            val = int(self._get_cached_value(key, str(default)))
            if val < minimum:
                logger.warning("%s %s out of range, using %s", key, val, default)
                return default
            return val
        except (ValueError, TypeError):
            logger.warning("Invalid %s value, using %s", key, default)
            return default

    def _get_float(self, key: str, default: float) -> float:
        """Read a float setting, falling back to default when invalid."""
        try:
            return float(self._get_cached_value(key, str(default)))
        except (ValueError, TypeError):
            logger.warning("Invalid %s value, using %s", key, default)
            return default

    def refresh(self) -> None:
        """Drop cached environment values so the next read sees fresh ones."""
        self._cache.clear()
        self._cache_timestamp = 0

    @property
    def version(self) -> str:
        """
        Application version - read from VERSION file (single source of truth).
        Cached after first read for performance.
        """
        if self._version is None:
            try:
                version_file = Path(__file__).parent.parent / 'VERSION'
                self._version = version_file.read_text().strip()
            except Exception as e:  # pylint: disable=broad-except
                logger.warning("Failed to read VERSION file: %s", e)
                self._version = "0.0.0"
        return self._version

    @property
    def host(self) -> str:
        """FastAPI application host address."""
        return self._get_cached_value('HOST', '0.0.0.0')

    @property
    def port(self) -> int:
        """FastAPI application port number."""
        try:
            val = int(self._get_cached_value('PORT', '9527'))
            if not 1 <= val <= 65535:
                logger.warning("PORT %s out of range, using 9527", val)
                return 9527
            return val
        except (ValueError, TypeError):
            logger.warning("Invalid PORT value, using 9527")
            return 9527

    @property
    def debug(self) -> bool:
        """FastAPI debug mode setting."""
        return self._get_cached_value('DEBUG', 'False').lower() == 'true'

    @property
    def log_level(self) -> str:
        """Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."""
        level = self._get_cached_value('LOG_LEVEL', 'INFO').upper()
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if level not in valid_levels:
            logger.warning("Invalid LOG_LEVEL '%s', using INFO", level)
            return 'INFO'
        return level

    @property
    def log_file(self) -> str:
        """Path of the rotating application log file."""
        return self._get_cached_value('LOG_FILE', os.path.join('logs', 'app.log'))
