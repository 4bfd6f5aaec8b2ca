"""
Health check endpoints for the mind map service.

Provides endpoints to check the health status of system components:
- Basic health check
- Redis health check (when the redis snapshot backend is active)
"""

import asyncio
import logging
from typing import Any, Dict

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from config.settings import config
from models.common import StorageBackend
from models.responses import HealthResponse
from services.redis.redis_client import RedisOperations, is_redis_available

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint"""
    return HealthResponse(
        status="ok",
        version=config.version,
        storage_backend=config.STORAGE_BACKEND,
    )


@router.get("/health/redis")
async def redis_health_check():
    """
    Redis health check endpoint.

    Returns:
        - 200 OK: Redis is not used, or reachable
        - 503 Service Unavailable: Redis backend selected but unreachable
    """
    if config.STORAGE_BACKEND != StorageBackend.REDIS.value:
        return {"status": "skipped", "message": "Redis snapshot storage not enabled"}

    result = await _check_redis_health()
    status_code = 200 if result["status"] == "healthy" else 503
    return JSONResponse(content=result, status_code=status_code)


async def _check_redis_health() -> Dict[str, Any]:
    """Check Redis health status with timeout."""
    if not is_redis_available():
        return {
            "status": "unavailable",
            "message": "Redis not connected"
        }

    try:
        ping_result = await asyncio.wait_for(
            asyncio.to_thread(RedisOperations.ping),
            timeout=2.0
        )
    except asyncio.TimeoutError:
        logger.warning("Redis health check timed out")
        return {
            "status": "error",
            "error": "Health check timed out"
        }

    if ping_result:
        return {"status": "healthy"}
    return {
        "status": "unhealthy",
        "message": "Ping failed"
    }
