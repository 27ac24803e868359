"""
Logging setup for services reporting errors through this package.

Handlers log recognized client errors at WARNING and server-side or
unexpected failures at ERROR under the ``httperror`` logger.
Never logs request bodies or the payloads written to clients.
"""

import logging
import sys
from typing import Optional, TextIO

from httperror.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PACKAGE_LOGGER = "httperror"
QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error")


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    level: Optional[str] = None, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure logging for an application using this package.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Defaults to ``settings.log_level``; unknown names fall back to INFO.
        stream: Where records are written. Defaults to stdout.

    Returns:
        The package logger the error handlers write to.
    """
    numeric_level = _resolve_level(level or settings.log_level)
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=stream or sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)
    return package_logger
