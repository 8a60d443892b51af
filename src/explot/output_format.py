"""Output format abstraction and format-specific renderers for samples."""

from __future__ import annotations

import csv
import io
import json
import math
from enum import StrEnum

from rich.console import Console
from rich.table import Table

from explot.color import bright_white, style_value
from explot.expression import Expression, Samples


DEFAULT_PRECISION = 6


class OutputFormat(StrEnum):
    """Supported output formats."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"


class OutputFormatError(RuntimeError):
    """Raised when output formatting fails."""


def parse_output_format(value: str) -> OutputFormat:
    """Resolve user-supplied output format name."""
    normalized = value.strip().lower()
    try:
        return OutputFormat(normalized)
    except ValueError as exc:
        available = ", ".join(item.value for item in OutputFormat)
        raise OutputFormatError(
            f"Unsupported output format: {value}. Available formats: {available}"
        ) from exc


def format_value(value: float, precision: int | None = None) -> str:
    """Format one sampled value; non-finite values use inf, -inf and nan."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if precision is None:
        return repr(value)
    return f"{value:.{precision}g}"


def _json_number(value: float) -> float | str:
    """Return value for JSON output, spelling out non-finite numbers."""
    if math.isfinite(value):
        return value
    return format_value(value)


def build_samples_table(
    expression: Expression, samples: Samples, precision: int, color_enabled: bool
) -> Table:
    """Build Rich table with one row per sample point."""
    variable = expression.variable or "x"
    table = Table(
        title=bright_white(f"f({variable}) = {expression.source}", color_enabled),
        show_edge=False,
    )
    table.add_column(variable, justify="right")
    table.add_column("value", justify="right")
    for x, y in samples.rows():
        table.add_row(
            format_value(x, precision),
            style_value(format_value(y, precision), y, color_enabled),
        )
    return table


def samples_to_json(expression: Expression, samples: Samples) -> str:
    """Serialize samples to a JSON document."""
    payload = {
        "expression": expression.source,
        "variable": expression.variable,
        "samples": [{"x": _json_number(x), "y": _json_number(y)} for x, y in samples.rows()],
    }
    return json.dumps(payload, ensure_ascii=True)


def samples_to_csv(expression: Expression, samples: Samples, precision: int | None) -> str:
    """Serialize samples to CSV with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow([expression.variable or "x", "value"])
    for x, y in samples.rows():
        writer.writerow([format_value(x, precision), format_value(y, precision)])
    return buffer.getvalue().rstrip("\n")


def _write_plain_output(console: Console, text: str) -> None:
    """Write plain output directly to console stream."""
    console.file.write(f"{text}\n")
    console.file.flush()


def print_samples(
    console: Console,
    expression: Expression,
    samples: Samples,
    output_format: OutputFormat,
    precision: int,
    color_enabled: bool,
) -> None:
    """Print samples in the selected output format."""
    match output_format:
        case OutputFormat.TABLE:
            console.print(build_samples_table(expression, samples, precision, color_enabled))
        case OutputFormat.JSON:
            _write_plain_output(console, samples_to_json(expression, samples))
        case OutputFormat.CSV:
            _write_plain_output(console, samples_to_csv(expression, samples, precision))
