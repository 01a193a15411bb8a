"""Runtime logging helpers."""

from __future__ import annotations

import sys

from loguru import logger

from lispy.config import get_log_level

_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"


def configure_logging(level: str | None = None) -> None:
    """Enable the lispy logger with a single stderr sink.

    The level defaults to LISPY_LOG_LEVEL. Calling this again replaces the sink.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or get_log_level()).upper(),
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    logger.enable("lispy")
