"""
Logging setup.

Configures the loguru logger for scripts and embedding applications.
Library modules only emit through `from loguru import logger`.
"""

import sys

from loguru import logger

from monadpay.config.settings import settings


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """
    Configure logger with a stderr sink and optional file rotation.

    Args:
        level: Log level (defaults to LOG_LEVEL from settings)
        log_file: Path of a rotating log file (e.g. "logs/monadpay.log")
    """
    level = (level or settings.log_level).upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format="{time:HH:mm:ss} | {level} | {message}")

    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            level=level,
            encoding="utf-8",
        )
