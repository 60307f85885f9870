"""
Logging setup (loguru).

The package disables its own "coursepath" namespace on import, so nothing is
emitted until an application calls setup_logger(). Services only log at DEBUG
level: skipped grades, tolerated prerequisite cycles and similar degenerate input.
"""
import os
import sys
from typing import Optional

from loguru import logger

from coursepath.core.config import Settings, get_settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


def setup_logger(settings: Optional[Settings] = None):
    """Configure and setup logging."""
    settings = settings or get_settings()

    logger.remove()  # Remove default handler

    # Add console handler
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=settings.log_level.upper(),
    )

    # Add file handler unless disabled
    if settings.log_dir:
        os.makedirs(settings.log_dir, exist_ok=True)
        logger.add(
            os.path.join(settings.log_dir, "coursepath.log"),
            rotation="1 day",
            retention="7 days",
            format=LOG_FORMAT,
            level="DEBUG",
        )

    logger.enable("coursepath")
    return logger
