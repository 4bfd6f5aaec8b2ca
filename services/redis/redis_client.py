"""
Redis Client Service
====================

Redis connection management for the redis snapshot storage backend.

Configuration via environment variables:
- REDIS_URL: Redis connection URL (default: redis://localhost:6379/0)
- REDIS_SOCKET_TIMEOUT / REDIS_SOCKET_CONNECT_TIMEOUT: seconds

Author: lycosa9527
Made by: MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

import os
import time
import logging
from functools import wraps
from typing import Optional, Any, Dict, List, Callable, TypeVar

import redis

logger = logging.getLogger(__name__)

# Type variable for generic return type
T = TypeVar('T')


class _RedisState:
    """Manages Redis connection state to avoid global variables."""
    _available = False
    _client: Optional[Any] = None

    @classmethod
    def set_client(cls, client: Any) -> None:
        """Set the Redis client."""
        cls._client = client
        cls._available = True

    @classmethod
    def clear_client(cls) -> None:
        """Clear the Redis client."""
        cls._client = None
        cls._available = False

    @classmethod
    def get_client(cls) -> Optional[Any]:
        """Get the Redis client."""
        return cls._client

    @classmethod
    def is_available(cls) -> bool:
        """Check if Redis is available."""
        return cls._available

# Error message width
_ERROR_WIDTH = 70

# Retry configuration
_RETRY_MAX_ATTEMPTS = 3
_RETRY_BASE_DELAY = 0.1  # seconds


class RedisConnectionError(Exception):
    """Raised when Redis connection fails during operation."""


class RedisStartupError(Exception):
    """
    Raised when Redis connection fails during startup.

    The error message has already been logged with instructions.
    """


def _with_retry(operation_name: str):
    """
    Decorator for Redis operations with retry logic.

    Retries on transient connection/timeout errors with exponential backoff.
    After the last attempt the failure is raised as RedisConnectionError so
    callers never mistake an outage for a missing key.

    Args:
        operation_name: Name for logging (e.g., "SET", "GET")
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs):
            last_error = None
            for attempt in range(_RETRY_MAX_ATTEMPTS):
                try:
                    return func(*args, **kwargs)
                except (redis.ConnectionError, redis.TimeoutError) as e:
                    last_error = e
                    if attempt < _RETRY_MAX_ATTEMPTS - 1:
                        delay = _RETRY_BASE_DELAY * (2 ** attempt)
                        time.sleep(delay)
                        logger.debug(
                            "[Redis] %s retry %d/%d after %.1fs",
                            operation_name,
                            attempt + 1,
                            _RETRY_MAX_ATTEMPTS,
                            delay
                        )

            logger.warning(
                "[Redis] %s failed after %d retries: %s",
                operation_name,
                _RETRY_MAX_ATTEMPTS,
                last_error
            )
            raise RedisConnectionError(f"Redis {operation_name} failed: {last_error}") from last_error
        return wrapper
    return decorator


def _log_redis_error(title: str, details: List[str]) -> None:
    """
    Log a Redis error with clean, professional formatting.

    Args:
        title: Error title (e.g., "REDIS CONNECTION FAILED")
        details: List of detail lines to display
    """
    separator = "=" * _ERROR_WIDTH

    lines = [
        "",
        separator,
        title.center(_ERROR_WIDTH),
        separator,
        "",
    ]
    lines.extend(details)
    lines.extend(["", separator, ""])

    logger.critical("\n".join(lines))


def _get_redis_config(url: Optional[str] = None) -> Dict[str, Any]:
    """Get Redis configuration from environment."""
    return {
        'url': url or os.getenv('REDIS_URL', 'redis://localhost:6379/0'),
        'socket_timeout': int(os.getenv('REDIS_SOCKET_TIMEOUT', '5')),
        'socket_connect_timeout': int(os.getenv('REDIS_SOCKET_CONNECT_TIMEOUT', '5')),
    }


def init_redis_sync(url: Optional[str] = None) -> bool:
    """
    Initialize Redis connection (synchronous version for startup).

    Args:
        url: Connection URL, defaults to REDIS_URL

    Returns:
        True if Redis is available.

    Raises:
        RedisStartupError: connection failed (details already logged)
    """
    redis_config = _get_redis_config(url)
    redis_url = redis_config['url']

    logger.info("[Redis] Connecting to %s...", redis_url)

    try:
        redis_client = redis.from_url(
            redis_url,
            encoding='utf-8',
            decode_responses=True,
            socket_timeout=redis_config['socket_timeout'],
            socket_connect_timeout=redis_config['socket_connect_timeout'],
        )
        redis_client.ping()
        _RedisState.set_client(redis_client)
        logger.info("[Redis] Connected successfully")
        return True

    except Exception as exc:
        _log_redis_error(
            title="REDIS CONNECTION FAILED",
            details=[
                f"Failed to connect to Redis at: {redis_url}",
                f"Error: {exc}",
                "",
                "The redis storage backend needs a running Redis server.",
                "Set REDIS_URL in your .env file, or use STORAGE_BACKEND=file.",
            ]
        )
        raise RedisStartupError(f"Failed to connect to Redis: {exc}") from exc


def close_redis_sync():
    """Close Redis connection gracefully (synchronous)."""
    redis_client = _RedisState.get_client()
    if redis_client:
        try:
            redis_client.close()
            logger.info("[Redis] Connection closed")
        except Exception as e:
            logger.warning("[Redis] Error closing connection: %s", e)

    _RedisState.clear_client()


def is_redis_available() -> bool:
    """Check if Redis is available. True after successful init."""
    return _RedisState.is_available()


def get_redis():
    """
    Get Redis client instance.

    Returns:
        Redis client, or None before init_redis_sync succeeds
    """
    return _RedisState.get_client()


class RedisOperations:
    """
    High-level Redis operations with error handling and retry logic.

    Retry: Transient connection/timeout errors are retried with exponential backoff.
    """

    @staticmethod
    def _client(client: Optional[Any] = None) -> Any:
        redis_client = client or _RedisState.get_client()
        if redis_client is None:
            raise RedisConnectionError("Redis is not initialized")
        return redis_client

    @staticmethod
    @_with_retry("GET")
    def get(key: str, client: Optional[Any] = None) -> Optional[str]:
        """Get a key value. Returns None if not found."""
        return RedisOperations._client(client).get(key)

    @staticmethod
    @_with_retry("SET")
    def set(key: str, value: str, client: Optional[Any] = None) -> bool:
        """Set a key without expiry. Returns True on success."""
        RedisOperations._client(client).set(key, value)
        return True

    @staticmethod
    def ping(client: Optional[Any] = None) -> bool:
        """Check the connection."""
        try:
            return bool(RedisOperations._client(client).ping())
        except Exception as e:  # pylint: disable=broad-except
            logger.debug("[Redis] PING failed: %s", e)
            return False
