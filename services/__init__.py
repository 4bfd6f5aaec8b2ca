"""Services package for Mind Map Studio.

This package contains the service modules:
- Mind map services (graph store, workspace, snapshot storage)
- Infrastructure services (exception handlers, lifespan, logging, server launcher)
- Redis client used by the redis snapshot backend

Import directly from subpackages:
    from services.mindmap.workspace import get_workspace
    from services.redis.redis_client import init_redis_sync
"""

__all__ = []
