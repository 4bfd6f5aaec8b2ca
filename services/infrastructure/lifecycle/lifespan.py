"""
Lifespan management for the mind map service.

Handles FastAPI application startup and shutdown lifecycle:
- Redis initialization when the redis snapshot backend is selected
- Workspace creation (graph store, snapshot storage, generator)
- Resource cleanup on shutdown
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import config
from models.common import StorageBackend
from services.mindmap.workspace import get_workspace
from services.redis.redis_client import close_redis_sync, init_redis_sync

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Raises:
        RedisStartupError: redis backend selected but Redis is unreachable
    """
    fastapi_app.state.start_time = time.time()

    uses_redis = config.STORAGE_BACKEND == StorageBackend.REDIS.value
    if uses_redis:
        logger.debug("[LIFESPAN] Initializing Redis...")
        init_redis_sync(config.REDIS_URL)

    workspace = get_workspace()
    logger.info(
        "[LIFESPAN] Mind map service ready (version %s, %s storage, %s saved maps)",
        config.version,
        config.STORAGE_BACKEND,
        len(workspace.list_snapshots())
    )

    yield

    if uses_redis:
        close_redis_sync()
    logger.info("[LIFESPAN] Shutdown complete")
