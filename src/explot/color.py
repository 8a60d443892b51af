"""Color support for CLI output using Rich markup."""

import math
import sys

from rich.console import Console
from rich.markup import escape


def should_use_color(color_flag: bool | None) -> bool:
    """Determine if color should be used based on flag and TTY detection.

    Args:
        color_flag: Explicit color preference (True/False) or None for auto-detect

    Returns:
        True if colors should be used, False otherwise
    """
    if color_flag is None:
        return sys.stdout.isatty()
    return color_flag


def colorize(text: str, style: str, enabled: bool) -> str:
    """Apply Rich markup style to text if enabled.

    Args:
        text: Text to colorize
        style: Rich style string (e.g., "green", "bold white")
        enabled: Whether coloring is enabled

    Returns:
        Styled text if enabled, original text otherwise
    """
    if not enabled:
        return text
    return f"[{style}]{escape(text)}[/]"


def bright_white(text: str, enabled: bool) -> str:
    """Apply bright white color to text."""
    return colorize(text, "bold white", enabled)


def get_value_style(value: float) -> str:
    """Get style for a sampled value.

    Args:
        value: Expression value at one sample point

    Returns:
        Rich style string: dim for nan, magenta for infinities, empty otherwise
    """
    if math.isnan(value):
        return "dim white"
    if math.isinf(value):
        return "magenta"
    return ""


def style_value(text: str, value: float, enabled: bool) -> str:
    """Color formatted value text according to the value it represents."""
    style = get_value_style(value)
    if not style:
        return escape(text) if enabled else text
    return colorize(text, style, enabled)


def build_console(color_enabled: bool) -> Console:
    """Build console writing to stdout with color forced on or off."""
    if color_enabled:
        return Console(force_terminal=True, highlight=False)
    return Console(no_color=True, highlight=False, soft_wrap=True)
