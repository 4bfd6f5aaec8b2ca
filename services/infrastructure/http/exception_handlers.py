"""
Exception handlers for the mind map service.

Handles:
- Mind map errors (validation, import, snapshot, confirmation)
- Request validation errors (422)
- HTTP exceptions
- General unhandled exceptions
"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException
from config.settings import config
from services.mindmap.exceptions import (
    ConfirmationRequiredError,
    GraphValidationError,
    ImportFailedError,
    ImportFailureKind,
    MindMapError,
    SnapshotNotFoundError,
)

logger = logging.getLogger(__name__)

IMPORT_FAILURE_STATUS = {
    ImportFailureKind.UNAUTHORIZED: 401,
    ImportFailureKind.RATE_LIMITED: 429,
    ImportFailureKind.TRANSPORT: 502,
    ImportFailureKind.PARSE_FAILURE: 422,
    ImportFailureKind.SCHEMA_FAILURE: 422,
}


def _status_for(exc: MindMapError) -> int:
    if isinstance(exc, ImportFailedError):
        return IMPORT_FAILURE_STATUS[exc.kind]
    if isinstance(exc, SnapshotNotFoundError):
        return 404
    if isinstance(exc, ConfirmationRequiredError):
        return 409
    if isinstance(exc, GraphValidationError):
        return 400
    return 500


async def mindmap_exception_handler(request: Request, exc: MindMapError):
    """
    Handle rejected mind map operations.

    Returns {"error", "error_type", "context"}, the ErrorResponse shape.
    """
    path = getattr(request.url, 'path', '') if request and request.url else ''
    status_code = _status_for(exc)

    if status_code >= 500:
        logger.error("Mind map error on %s: %s", path, exc.message)
    else:
        logger.warning("Mind map operation rejected on %s: [%s] %s", path, exc.error_code, exc.message)

    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.message,
            "error_type": exc.error_code,
            "context": exc.context or None,
        }
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handle request validation errors (422 Unprocessable Entity).

    These occur when request body/parameters don't match the expected schema.
    """
    path = getattr(request.url, 'path', '') if request and request.url else ''

    errors = exc.errors() if hasattr(exc, 'errors') else []
    error_details = []
    for error in errors:
        loc = error.get('loc', [])
        msg = error.get('msg', '')
        error_details.append(f"{'.'.join(str(x) for x in loc)}: {msg}")

    error_summary = '; '.join(error_details[:3])
    if len(error_details) > 3:
        error_summary += f" ... and {len(error_details) - 3} more"

    logger.debug("Request validation error on %s: %s", path, error_summary)

    return JSONResponse(
        status_code=422,
        content={
            "detail": error_details,
            "message": "Request validation failed. Please check your request parameters."
        }
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """
    Handle HTTP exceptions.

    Returns FastAPI-standard format: {"detail": "error message"}
    """
    path = getattr(request.url, 'path', '') if request and request.url else ''
    if exc.status_code in (400, 404):
        logger.debug("HTTP %s on %s: %s", exc.status_code, path, exc.detail)
    else:
        logger.warning("HTTP %s on %s: %s", exc.status_code, path, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions"""
    request_path = getattr(request.url, 'path', '') if request and request.url else ''
    logger.error(
        "Unhandled exception on %s: %s: %s",
        request_path,
        type(exc).__name__,
        exc,
        exc_info=True
    )

    error_response = {"error": "An unexpected error occurred. Please try again later."}

    # Add debug info in development mode
    if config.debug:
        error_response["debug"] = str(exc)

    return JSONResponse(
        status_code=500,
        content=error_response
    )


def setup_exception_handlers(app: FastAPI):
    """
    Register all exception handlers with the FastAPI application.
    """
    app.add_exception_handler(MindMapError, mindmap_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
