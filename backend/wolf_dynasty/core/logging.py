"""
Logging setup (loguru).
"""

import sys

from loguru import logger

from .config import Settings


def configure_logging(settings: Settings) -> None:
    """Replace loguru's default sink with the configured ones."""
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level.upper())

    if settings.log_file:
        logger.add(
            settings.log_file,
            rotation="1 day",
            retention="30 days",
            level=settings.log_level.upper(),
        )
