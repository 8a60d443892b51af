#!/usr/bin/env python
"""CLI interface for explot - single-variable expression evaluation."""

from __future__ import annotations

import sys

import typer

from explot import config, logging_config
from explot.commands import evaluate, inspect, sample


app = typer.Typer(
    help="Parse single-variable arithmetic expressions and sample them.",
    no_args_is_help=True,
)


DEFAULT_VERBOSITY: dict[str, int] = {"value": 0}


@app.callback()
def main_callback(
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Enable verbose logging output (repeat for debug output)",
    ),
    config_name: str = typer.Option(
        config.DEFAULT_CONFIG_NAME,
        "--config",
        metavar="FILE",
        help="Config file name to load from current directory",
    ),
) -> None:
    """Global CLI options."""
    del config_name
    verbosity = max(verbose, DEFAULT_VERBOSITY["value"])
    if verbosity == 0:
        return
    logging_config.configure_logging(verbosity)


evaluate.register(app)
sample.register(app)
inspect.register(app)


def main() -> None:
    """Main CLI entry point."""
    loaded_config = config.load_cli_config(sys.argv)
    DEFAULT_VERBOSITY["value"] = loaded_config.verbose
    config.CONFIG_DEFAULTS.clear()
    config.CONFIG_DEFAULTS.update(loaded_config.defaults)

    command = typer.main.get_command(app)
    default_map = (
        config.build_default_map(loaded_config.defaults) if loaded_config.defaults else None
    )
    command.main(
        args=sys.argv[1:],
        prog_name="explot",
        standalone_mode=True,
        default_map=default_map,
    )


if __name__ == "__main__":
    main()
