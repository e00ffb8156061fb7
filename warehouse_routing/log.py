"""Logging setup shared by the CLI and the serverless handlers."""

import os
import sys

from loguru import logger

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default sink with a single stderr sink.

    Args:
        level: Log level name. Falls back to the LOG_LEVEL env var, then INFO.
    """
    global _configured
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logger.remove()
    logger.add(
        sink=lambda msg: print(msg, end="", file=sys.stderr),
        level=log_level,
        format=_FORMAT,
    )
    _configured = True


def get_logger(name: str | None = None):
    """Return the configured logger, bound to *name* when given."""
    if not _configured:
        configure_logging()
    if name:
        return logger.bind(name=name)
    return logger
