"""
Mind map services: the live graph, snapshot persistence and their storage.

Import the workspace from services.mindmap.workspace directly.
"""
from services.mindmap.exceptions import (
    ConfirmationRequiredError,
    GraphValidationError,
    ImportFailedError,
    ImportFailureKind,
    MindMapError,
    SnapshotNotFoundError,
)

__all__ = [
    'ConfirmationRequiredError',
    'GraphValidationError',
    'ImportFailedError',
    'ImportFailureKind',
    'MindMapError',
    'SnapshotNotFoundError',
]
