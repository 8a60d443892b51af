"""Shared fixtures resetting process-wide CLI state between tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from explot import cli, config, logging_config


@pytest.fixture(autouse=True)
def reset_cli_state() -> Iterator[None]:
    """Restore logger, config defaults and default verbosity after each test."""
    yield
    logging_config.configure_logging(0)
    config.CONFIG_DEFAULTS.clear()
    cli.DEFAULT_VERBOSITY["value"] = 0
