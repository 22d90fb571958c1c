"""Central logging configuration using loguru."""

from __future__ import annotations

import os
import sys

from loguru import logger


def debug_enabled() -> bool:
    return os.getenv("DOCS_REVIEW_DEBUG", "").strip() == "1"


def init_logging(debug: bool | None = None):
    """Configure the loguru logger for CLI runs.

    The log level is controlled by the ``DOCS_REVIEW_DEBUG`` environment
    variable unless ``debug`` is given explicitly.
    """
    if debug is None:
        debug = debug_enabled()
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "INFO",
        format="<level>{level: <8}</level> | {message}",
        backtrace=debug,
        diagnose=debug,
    )
    return logger


__all__ = ["debug_enabled", "init_logging", "logger"]
