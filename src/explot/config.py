"""Configuration handling for the explot CLI."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import cast

import typer

from explot.output_format import OutputFormat


DEFAULT_CONFIG_NAME = ".explot.json"

CONFIG_DEFAULTS: dict[str, object] = {}

# Commands each option default applies to.
COMMAND_OPTIONS: dict[str, set[str]] = {
    "eval": {"precision"},
    "sample": {"start", "stop", "count", "out", "precision", "color_flag"},
    "parse": {"color_flag"},
}

DEST_TO_OPTION_NAME: dict[str, str] = {
    "color_flag": "--color/--no-color",
    "count": "--count",
    "out": "--out",
    "precision": "--precision",
    "start": "--start",
    "stop": "--stop",
    "verbose": "--verbose",
}


logger = logging.getLogger("explot")


@dataclass
class ConfigOptions:
    """Config option mapping metadata."""

    float_options: dict[str, str] = field(
        default_factory=lambda: {"--start": "start", "--stop": "stop"}
    )
    int_options: dict[str, tuple[str, int]] = field(
        default_factory=lambda: {
            "--count": ("count", 1),
            "--precision": ("precision", 0),
            "--verbose": ("verbose", 0),
        }
    )
    choice_options: dict[str, tuple[str, frozenset[str]]] = field(
        default_factory=lambda: {
            "--out": ("out", frozenset(item.value for item in OutputFormat)),
        }
    )


@dataclass
class LoadedCliConfig:
    """Fully parsed CLI config payload."""

    defaults: dict[str, object]
    verbose: int


def load_config(filepath: str) -> tuple[dict[str, object], bool]:
    """Load config from JSON file.

    Args:
        filepath: Path to config file

    Returns:
        Tuple of (config dict, malformed flag); a missing file is not malformed
    """
    try:
        with open(filepath, encoding="utf-8") as f:
            config = json.load(f)
    except FileNotFoundError:
        return ({}, False)
    except (OSError, json.JSONDecodeError):
        return ({}, True)

    if not isinstance(config, dict):
        return ({}, True)

    return (config, False)


def parse_color_defaults(config: dict[str, object]) -> tuple[dict[str, object], bool]:
    """Parse color-related config defaults."""
    defaults: dict[str, object] = {}
    color_value = config.get("--color")
    no_color_value = config.get("--no-color")

    if "--color" in config and not isinstance(color_value, bool):
        return ({}, False)
    if "--no-color" in config and not isinstance(no_color_value, bool):
        return ({}, False)
    if color_value is True and no_color_value is True:
        return ({}, False)

    if color_value is True:
        defaults["color_flag"] = True
    if no_color_value is True:
        defaults["color_flag"] = False

    return (defaults, True)


def validate_float_option(value: object) -> float | None:
    """Validate a finite numeric option value."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if not math.isfinite(value):
        return None
    return float(value)


def validate_int_option(value: object, min_value: int) -> int | None:
    """Validate integer option value."""
    if not isinstance(value, int):
        return None
    if value < min_value:
        return None
    return int(value)


def apply_config_entry(
    key: str, value: object, defaults: dict[str, object], options: ConfigOptions
) -> bool:
    """Apply one config entry, returning False when it is invalid."""
    if key in options.float_options:
        float_value = validate_float_option(value)
        if float_value is None:
            return False
        defaults[options.float_options[key]] = float_value
        return True
    if key in options.int_options:
        dest, min_value = options.int_options[key]
        if isinstance(value, bool) and dest != "verbose":
            return False
        int_value = validate_int_option(value, min_value)
        if int_value is None:
            return False
        defaults[dest] = int_value
        return True
    if key in options.choice_options:
        dest, choices = options.choice_options[key]
        if not isinstance(value, str) or value.strip().lower() not in choices:
            return False
        defaults[dest] = value.strip().lower()
        return True
    return False


def build_config_defaults(config: dict[str, object]) -> dict[str, object] | None:
    """Validate config values and build defaults.

    Args:
        config: Raw "defaults" section of the config file

    Returns:
        Defaults keyed by option destination, or None if malformed
    """
    defaults, color_valid = parse_color_defaults(config)
    if not color_valid:
        return None

    options = ConfigOptions()
    for key, value in config.items():
        if key in ("--color", "--no-color"):
            continue
        if not apply_config_entry(key, value, defaults, options):
            return None

    return defaults


def parse_config_sections(raw_config: dict[str, object]) -> dict[str, object] | None:
    """Validate config file structure.

    Expected shape::

      {
        "defaults": {"--start": -10, "--stop": 10, "--count": 21}
      }
    """
    if any(key != "defaults" for key in raw_config):
        return None

    defaults_section = raw_config.get("defaults", {})
    if not isinstance(defaults_section, dict):
        return None

    return cast(dict[str, object], defaults_section)


def parse_config_argument(argv: list[str]) -> str:
    """Parse only the --config argument from argv."""
    for idx, arg in enumerate(argv[1:], start=1):
        if arg == "--config" and idx + 1 < len(argv):
            return argv[idx + 1]
        if arg.startswith("--config="):
            return arg.split("=", 1)[1]
    return DEFAULT_CONFIG_NAME


def load_cli_config(argv: list[str]) -> LoadedCliConfig:
    """Load config defaults from the configured file path.

    Raises:
        typer.BadParameter: If the config file exists but is malformed
    """
    config_name = parse_config_argument(argv)
    config_path = Path(config_name)
    if not config_path.is_absolute():
        config_path = Path.cwd() / config_name
    raw_config, load_error = load_config(str(config_path))

    if load_error:
        raise typer.BadParameter("Malformed config")

    defaults_section = parse_config_sections(raw_config)
    if defaults_section is None:
        raise typer.BadParameter("Malformed config")

    defaults = build_config_defaults(defaults_section)
    if defaults is None:
        raise typer.BadParameter("Malformed config")

    verbose = cast(int, defaults.pop("verbose", 0))
    return LoadedCliConfig(defaults=defaults, verbose=int(verbose))


def build_default_map(defaults: dict[str, object]) -> dict[str, dict[str, object]]:
    """Build Click default_map for Typer commands."""
    return {
        command: {key: value for key, value in defaults.items() if key in names}
        for command, names in COMMAND_OPTIONS.items()
    }


def _format_log_entry(name: str, value: object) -> str:
    """Format one option/value pair for logging."""
    return f"{name}={value!r}"


def log_applied_config_defaults(command_name: str) -> None:
    """Log config defaults loaded from config file that apply to a command."""
    if not logger.isEnabledFor(logging.INFO):
        return

    names = COMMAND_OPTIONS.get(command_name, set())
    entries = [
        _format_log_entry(DEST_TO_OPTION_NAME[dest], value)
        for dest, value in sorted(CONFIG_DEFAULTS.items(), key=lambda item: item[0])
        if dest in names
    ]
    if entries:
        logger.info("Config defaults applied (%s): %s", command_name, ", ".join(entries))


def log_command_arguments(args: object, command_name: str) -> None:
    """Log all final argument values used to run a command."""
    if not logger.isEnabledFor(logging.INFO):
        return

    try:
        arg_items = vars(args).items()
    except TypeError:
        return

    entries = [
        _format_log_entry(arg_name, arg_value)
        for arg_name, arg_value in sorted(arg_items, key=lambda item: item[0])
    ]
    logger.info("Command arguments (%s): %s", command_name, ", ".join(entries))
