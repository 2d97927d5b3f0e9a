"""Loguru sink configuration."""

import sys

from loguru import logger

from matka_client.config import settings


def configure_logging() -> None:
    """Replace the default sink with the client's stderr and file sinks."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else "INFO")
    if settings.LOG_FILE:
        settings.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        logger.add(settings.LOG_FILE, rotation="10 MB", retention="7 days", level="INFO")
