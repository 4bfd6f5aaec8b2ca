"""
Mind Map FastAPI Routers
========================

This package contains all FastAPI route modules organized by functionality.

Routers:
- api/: Main API endpoints package (mind map editing, generation, snapshots)
- core/: Infrastructure endpoints (health checks)

Author: lycosa9527
Made by: MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from . import api
from . import core
