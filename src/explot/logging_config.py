"""Logging configuration for the explot CLI."""

from __future__ import annotations

import logging
import sys


LOGGER_NAME = "explot"

VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def level_for_verbosity(verbosity: int) -> int:
    """Map a repeated -v count to a logging level, saturating at DEBUG."""
    index = min(max(verbosity, 0), len(VERBOSITY_LEVELS) - 1)
    return VERBOSITY_LEVELS[index]


def configure_logging(verbosity: int) -> None:
    """Configure the explot logger for the given verbosity.

    Args:
        verbosity: 0 for warnings only, 1 for INFO, 2 or more for DEBUG to stdout
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    level = level_for_verbosity(verbosity)
    logger.setLevel(level)

    if level == logging.WARNING:
        logger.handlers.clear()
        return

    handler = next(
        (item for item in logger.handlers if isinstance(item, logging.StreamHandler)), None
    )
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    else:
        handler.setStream(sys.stdout)
    handler.setLevel(level)
