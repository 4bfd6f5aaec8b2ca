"""
Mind map specific exceptions for better error handling.

Provides specific exception types for the error scenarios of the mind map
feature, enabling better error messages and logging. None of them is fatal:
the worst outcome is a rejected operation plus a message.
"""

from enum import Enum
from typing import Optional


class MindMapError(Exception):
    """Base exception for mind map errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, context: Optional[dict] = None):
        """
        Initialize mind map error.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            context: Additional context (node_id, snapshot_id, etc.)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}


class GraphValidationError(MindMapError):
    """Raised when a graph mutation is rejected. The graph is left unchanged."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message, error_code="VALIDATION_ERROR", context=context)


class ImportFailureKind(str, Enum):
    """Why an AI import did not produce a mind map"""
    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    TRANSPORT = "transport"
    PARSE_FAILURE = "parse_failure"
    SCHEMA_FAILURE = "schema_failure"


_DEFAULT_IMPORT_MESSAGES = {
    ImportFailureKind.UNAUTHORIZED: "API key is invalid or missing. Please check OPENROUTER_API_KEY.",
    ImportFailureKind.RATE_LIMITED: "Rate limit exceeded. Please wait a moment and try again.",
    ImportFailureKind.TRANSPORT: "Network error. Please check your internet connection.",
    ImportFailureKind.PARSE_FAILURE: "Failed to parse AI response. Please try again.",
    ImportFailureKind.SCHEMA_FAILURE: "AI response is not a valid mind map. Please try again.",
}


class ImportFailedError(MindMapError):
    """Raised when a generated mind map cannot be imported. The graph is left unchanged."""

    def __init__(self, kind: ImportFailureKind, message: Optional[str] = None, context: Optional[dict] = None):
        super().__init__(
            message or _DEFAULT_IMPORT_MESSAGES[kind],
            error_code=f"IMPORT_{kind.name}",
            context=context
        )
        self.kind = kind


class SnapshotNotFoundError(MindMapError):
    """Raised when a snapshot is not found."""

    def __init__(self, snapshot_id: str, message: Optional[str] = None):
        super().__init__(
            message or f"Snapshot {snapshot_id} not found",
            error_code="SNAPSHOT_NOT_FOUND",
            context={"snapshot_id": snapshot_id}
        )
        self.snapshot_id = snapshot_id


class ConfirmationRequiredError(MindMapError):
    """Raised when an operation would replace a non-empty mind map without confirmation."""

    def __init__(self, operation: str, message: Optional[str] = None):
        super().__init__(
            message or f"{operation} will replace the current mind map. Confirm to continue.",
            error_code="CONFIRMATION_REQUIRED",
            context={"operation": operation}
        )
        self.operation = operation
