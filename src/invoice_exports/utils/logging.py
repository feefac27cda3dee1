"""Logging utilities to configure the project's logger.

This module configures the global `loguru` logger for console and file
output, setting sensible defaults for debugging and runtime verbosity.
"""

from __future__ import annotations

import sys

from loguru import logger

from invoice_exports.config import settings


def configure_logging(level: str = "INFO") -> None:
    """Configure the global Loguru logger for console and rotating-file output.

    This helper removes default handlers and sets up a standard stderr handler
    and a rotating file handler using `settings.log_file`.

    Args:
        level (str): Minimum level for the stderr handler.

    """
    logger.remove()
    log_file = settings.log_file
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.add(sys.stderr, level=level, backtrace=False, diagnose=False)

    # Rotating file log for debugging and persistence
    logger.add(str(log_file), rotation="10 MB", retention="14 days", level="DEBUG")
