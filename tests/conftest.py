"""
Pytest Configuration
====================

Ensures project root is in Python path for imports and provides shared
mind map fixtures.

@author lycosa9527
@made_by MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent.absolute()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from services.mindmap.graph_store import GraphStore  # noqa: E402
from services.mindmap.id_generator import SequentialIdGenerator  # noqa: E402
from services.mindmap.snapshot_gateway import SnapshotGateway  # noqa: E402
from services.mindmap.storage import MemoryStorage  # noqa: E402


@pytest.fixture
def store():
    """Empty graph store with predictable node ids."""
    return GraphStore(id_generator=SequentialIdGenerator("node"))


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def gateway(storage):
    """Snapshot gateway over in-memory storage."""
    return SnapshotGateway(storage, storage_key="test_snapshots", id_generator=SequentialIdGenerator("map"))


SAMPLE_GENERATION = """Here is your mind map:
```json
{
  "title": "Newton's Laws",
  "nodes": [
    {"id": "1", "text": "Newton's Laws", "parentId": null, "level": 0},
    {"id": "2", "text": "First Law", "parentId": "1", "level": 1},
    {"id": "3", "text": "Second Law", "parentId": "1", "level": 1},
    {"id": "4", "text": "Inertia", "parentId": "2", "level": 2},
    {"id": "5", "text": "A body stays at rest or in uniform motion unless a net external force acts on it.", "parentId": "4", "level": 3, "isDetailNode": true}
  ]
}
```"""


@pytest.fixture
def sample_generation():
    """A fenced LLM reply with five nodes."""
    return SAMPLE_GENERATION
