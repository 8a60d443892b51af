"""Tests for logging configuration."""

from __future__ import annotations

import logging

import pytest

from explot import logging_config


@pytest.mark.parametrize(
    ("verbosity", "level"),
    [
        (-1, logging.WARNING),
        (0, logging.WARNING),
        (1, logging.INFO),
        (2, logging.DEBUG),
        (5, logging.DEBUG),
    ],
)
def test_level_for_verbosity(verbosity: int, level: int) -> None:
    """Verbosity saturates at both ends."""
    assert logging_config.level_for_verbosity(verbosity) == level


def test_configure_logging_verbose_adds_single_handler() -> None:
    """Repeated configuration reuses one stdout handler."""
    logging_config.configure_logging(1)
    logging_config.configure_logging(2)
    logger = logging.getLogger(logging_config.LOGGER_NAME)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.DEBUG
    assert logger.propagate is False


def test_configure_logging_quiet_clears_handlers() -> None:
    """Verbosity 0 drops handlers and logs warnings only."""
    logging_config.configure_logging(1)
    logging_config.configure_logging(0)
    logger = logging.getLogger(logging_config.LOGGER_NAME)

    assert logger.level == logging.WARNING
    assert logger.handlers == []
