"""
Server launcher for the mind map FastAPI application.

Starts Uvicorn with the configured host, port and logging.
"""

import os
import sys
import logging

import uvicorn

from config.settings import config
from uvicorn_config import LOGGING_CONFIG, TIMEOUT_GRACEFUL_SHUTDOWN, TIMEOUT_KEEP_ALIVE

logger = logging.getLogger(__name__)


def run_server() -> None:
    """
    Run the application with Uvicorn.

    Auto-reload is enabled in DEBUG mode. A single worker is used because
    the live mind map is held in process memory.
    """
    script_dir = os.path.dirname(
        os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    )
    os.chdir(script_dir)

    host = config.host
    port = config.port
    reload = config.debug
    log_level = config.log_level.lower()

    logger.info(
        "Starting Uvicorn: host=%s, port=%s, reload=%s, storage=%s",
        host, port, reload, config.STORAGE_BACKEND
    )

    try:
        uvicorn.run(
            "main:app",
            host=host,
            port=port,
            workers=1,
            reload=reload,
            log_level=log_level,
            log_config=LOGGING_CONFIG,
            timeout_keep_alive=TIMEOUT_KEEP_ALIVE,
            timeout_graceful_shutdown=TIMEOUT_GRACEFUL_SHUTDOWN,
            access_log=False,
        )
    except OSError as e:
        if e.errno == 98 or "address already in use" in str(e).lower():
            logger.error("Port %s is already in use. Set PORT to another value.", port)
            sys.exit(1)
        raise
