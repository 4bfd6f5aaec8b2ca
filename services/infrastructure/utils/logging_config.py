"""
Logging configuration for the mind map service.

Handles:
- Unified formatter with ANSI colors
- Console handler that tolerates closed streams
- Size-based rotating file handler
- Uvicorn and HTTP library logger levels
"""

import os
import sys
import logging
import re
from logging.handlers import RotatingFileHandler
from typing import Literal
from config.settings import config


def _is_stream_usable(stream) -> bool:
    """
    Check if a stream is usable for logging without triggering errors.

    Returns True if stream can be written to, False otherwise.
    """
    if stream is None:
        return False

    try:
        if getattr(stream, 'closed', False):
            return False
        return hasattr(stream, 'write')
    except (AttributeError, ValueError, OSError):
        return False


class SafeStreamHandler(logging.StreamHandler):
    """StreamHandler that gracefully handles closed streams."""

    def emit(self, record):
        """Emit a record, handling closed streams gracefully."""
        if not _is_stream_usable(self.stream):
            return

        try:
            super().emit(record)
        except (ValueError, OSError) as error:
            # Handle "I/O operation on closed file" errors gracefully
            error_str = str(error).lower()
            if any(phrase in error_str for phrase in [
                "closed file", "i/o operation", "bad file descriptor",
                "operation on closed", "stream is closed"
            ]):
                return
            raise


class UnifiedFormatter(logging.Formatter):
    """Unified logging formatter with ANSI color support."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARN': '\033[33m',     # Yellow
        'ERROR': '\033[31m',    # Red
        'CRIT': '\033[35m',     # Magenta
        'RESET': '\033[0m',     # Reset
        'BOLD': '\033[1m',      # Bold
    }

    LEVEL_NAMES = {
        'DEBUG': 'DEBUG',
        'INFO': 'INFO',
        'WARNING': 'WARN',
        'ERROR': 'ERROR',
        'CRITICAL': 'CRIT'
    }

    # Logger name prefix -> four letter source tag
    SOURCES = (
        ('routers', 'API'),
        ('uvicorn', 'SRVR'),
        ('clients', 'CLIE'),
        ('services', 'SERV'),
        ('agents', 'AGNT'),
        ('config', 'CONF'),
    )

    def __init__(self, fmt=None, datefmt=None, style: Literal['%', '{', '$'] = '%', validate=True,
                 use_colors=True, **_kwargs):
        """
        Initialize formatter, accepting Uvicorn's use_colors parameter.
        """
        super().__init__(fmt=fmt, datefmt=datefmt, style=style, validate=validate)
        self.use_colors = use_colors

    def _source(self, name: str) -> str:
        if name == '__main__':
            return 'MAIN'
        for prefix, tag in self.SOURCES:
            if name.startswith(prefix):
                return tag
        return name[:4].upper()

    def format(self, record):
        timestamp = self.formatTime(record, '%H:%M:%S')
        level_name = self.LEVEL_NAMES.get(record.levelname, record.levelname)

        if self.use_colors:
            color = self.COLORS.get(level_name, '')
            reset = self.COLORS['RESET']
            bold = self.COLORS['BOLD'] if level_name == 'CRIT' else ''
            shown_level = f"{bold}{color}{level_name.ljust(5)}{reset}"
        else:
            shown_level = level_name.ljust(5)

        source = self._source(record.name).ljust(4)
        pid = os.getpid()

        # Normalize message spacing
        message = record.getMessage().lstrip()
        message = re.sub(r' +', ' ', message)
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        return f"[{timestamp}] {shown_level} | {source} | [{pid}] {message}"


class UvicornInvalidRequestFilter(logging.Filter):
    """Filter to downgrade uvicorn 'Invalid HTTP request' warnings to DEBUG level."""
    def filter(self, record):
        if record.levelno == logging.WARNING:
            message = record.getMessage()
            if 'Invalid HTTP request' in message or 'invalid request' in message.lower():
                record.levelno = logging.DEBUG
                record.levelname = 'DEBUG'
        return True


def setup_logging(log_file=None, log_level=None):
    """
    Configure all logging for the application.

    Sets up:
    - Console and rotating file handlers with the unified formatter
    - Root level from LOG_LEVEL
    - Uvicorn logger configuration
    - Quiet HTTP client libraries unless HTTP_DEBUG is set

    Args:
        log_file: Log file path, defaults to LOG_FILE
        log_level: Level name, defaults to LOG_LEVEL
    """
    handlers = []

    if _is_stream_usable(sys.stdout):
        console_handler = SafeStreamHandler(sys.stdout)
        console_handler.setFormatter(UnifiedFormatter())
        handlers.append(console_handler)

    log_file = log_file or config.log_file
    try:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=10,
            encoding="utf-8"
        )
        file_handler.setFormatter(UnifiedFormatter(use_colors=False))
        handlers.append(file_handler)
    except OSError:
        # Console only when the log directory is not writable
        if not handlers:
            handlers.append(logging.NullHandler())

    log_level_str = (log_level or config.log_level).upper()
    level = getattr(logging, log_level_str, logging.INFO)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    for uvicorn_logger_name in ['uvicorn', 'uvicorn.error']:
        uvicorn_logger = logging.getLogger(uvicorn_logger_name)
        uvicorn_logger.handlers = []
        for handler in handlers:
            uvicorn_logger.addHandler(handler)
        uvicorn_logger.addFilter(UvicornInvalidRequestFilter())
        uvicorn_logger.propagate = False

    http_debug_enabled = os.getenv('HTTP_DEBUG', '').lower() in ('1', 'true', 'yes')
    http_level = logging.DEBUG if http_debug_enabled else logging.WARNING

    logging.getLogger('httpx').setLevel(http_level)
    logging.getLogger('httpcore').setLevel(http_level)
    # hpack/h2: HTTP/2 HPACK header compression - very verbose at DEBUG
    logging.getLogger('hpack').setLevel(http_level)
    logging.getLogger('h2').setLevel(http_level)

    logger = logging.getLogger(__name__)
    logger.debug("Logging initialized: %s -> %s", log_level_str, log_file)
    return logger
