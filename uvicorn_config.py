"""
Uvicorn Configuration
=====================

Logging configuration handed to uvicorn.run so server logs share the
application's unified format.

@author lycosa9527
@made_by MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

import sys

from services.infrastructure.utils.logging_config import (
    SafeStreamHandler,
    UnifiedFormatter,
    _is_stream_usable,
)


class SafeStdoutHandler(SafeStreamHandler):
    """SafeStreamHandler that uses stdout, falling back to stderr if stdout is closed."""

    def __init__(self, stream=None):
        """Initialize handler with safe stream selection."""
        if stream is None:
            stream = sys.stdout if _is_stream_usable(sys.stdout) else sys.stderr
        super().__init__(stream)


# Timeouts (seconds)
TIMEOUT_KEEP_ALIVE = 75
TIMEOUT_GRACEFUL_SHUTDOWN = 5

# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "()": UnifiedFormatter,
        },
        "access": {
            "()": UnifiedFormatter,
        },
    },
    "handlers": {
        "default": {
            "()": SafeStdoutHandler,
            "formatter": "default",
        },
        "access": {
            "()": SafeStdoutHandler,
            "formatter": "access",
        },
    },
    "loggers": {
        "uvicorn": {
            "handlers": ["default"],
            "level": "INFO",
            "propagate": False,
        },
        "uvicorn.error": {
            "handlers": ["default"],
            "level": "INFO",
            "propagate": False,
        },
        "uvicorn.access": {
            "handlers": ["access"],
            "level": "WARNING",
            "propagate": False,
        },
    },
}
