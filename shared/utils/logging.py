"""
Logging configuration module.
Provides standardized loguru setup for scripts and applications using the client.
"""

import sys
from typing import Optional

from loguru import logger

DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(
    level: str = "INFO",
    format: str = DEFAULT_FORMAT,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure the loguru logger.

    Existing sinks are removed so repeated calls do not duplicate output.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Log message format
        log_file: Optional file path to write logs, rotated at 10 MB
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format=format,
        level=level.upper(),
        colorize=True,
    )

    if log_file:
        logger.add(
            log_file,
            format=format,
            level=level.upper(),
            rotation="10 MB",
            retention="7 days",
        )
