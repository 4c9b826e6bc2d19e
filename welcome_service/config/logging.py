"""Logging configuration for the welcome service runtime."""

import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from loguru import Logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def config_configure_logging(log_level: str = "INFO") -> "Logger":
    """Replace loguru's default handler with a single stderr sink.

    Args:
        log_level: Minimum level name accepted by loguru.

    Returns:
        Logger: The configured loguru logger.
    """

    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=log_level, diagnose=False)
    return logger
