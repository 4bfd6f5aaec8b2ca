"""
API Router Module
=================

Main API router that combines the mind map sub-routers:
- Live mind map editing and AI generation
- Saved mind maps (snapshots)
"""
import logging

from fastapi import APIRouter

from . import mindmap, snapshots

logger = logging.getLogger(__name__)

# Create main router with prefix and tags
router = APIRouter(prefix="/api", tags=["api"])

# Include all sub-routers
router.include_router(mindmap.router)
router.include_router(snapshots.router)

__all__ = ["router"]
