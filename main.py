"""
MindMap Studio - Mind Map Editing and Generation Service (FastAPI)
==================================================================

Async web service behind the mind map canvas: manual editing, AI
generation from a topic and named snapshots.

Version: See VERSION file (centralized version management)
Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License

Features:
- FastAPI with Pydantic models for type safety
- Uvicorn ASGI server
- Auto-generated OpenAPI documentation at /docs (DEBUG mode)
- Snapshot storage in memory, a JSON file or Redis
"""

# Third-party imports
from fastapi import FastAPI

# First-party imports
from config.settings import config
from routers.register import register_routers
from services.infrastructure.utils.logging_config import setup_logging
from services.infrastructure.lifecycle.lifespan import lifespan
from services.infrastructure.http.exception_handlers import setup_exception_handlers
from services.infrastructure.process.server_launcher import run_server

# Setup logging (must happen early, before other modules use logger)
logger = setup_logging()

# ============================================================================
# FASTAPI APPLICATION INITIALIZATION
# ============================================================================

app = FastAPI(
    title="MindMap Studio API",
    description="Mind map editing, AI generation and snapshots with FastAPI + Uvicorn",
    version=config.version,
    # Disable Swagger UI in production (only enable in DEBUG mode)
    docs_url="/docs" if config.debug else None,
    redoc_url="/redoc" if config.debug else None,
    lifespan=lifespan
)

# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================

setup_exception_handlers(app)

# ============================================================================
# ROUTER REGISTRATION
# ============================================================================

register_routers(app)

# ============================================================================
# APPLICATION ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    run_server()
