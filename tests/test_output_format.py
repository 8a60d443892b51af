"""Tests for sample output formatting."""

from __future__ import annotations

import io
import json
import math

import pytest
from rich.console import Console

from explot.expression import parse, sample
from explot.output_format import (
    OutputFormat,
    OutputFormatError,
    build_samples_table,
    format_value,
    parse_output_format,
    print_samples,
    samples_to_csv,
    samples_to_json,
)


@pytest.mark.parametrize(
    ("value", "precision", "expected"),
    [
        (14.0, None, "14.0"),
        (0.1 + 0.2, None, "0.30000000000000004"),
        (0.1 + 0.2, 6, "0.3"),
        (-1.0, 6, "-1"),
        (math.inf, 6, "inf"),
        (-math.inf, None, "-inf"),
        (math.nan, 3, "nan"),
        (123456789.0, 3, "1.23e+08"),
    ],
)
def test_format_value(value: float, precision: int | None, expected: str) -> None:
    """Values are formatted with optional precision and spelled-out non-finites."""
    assert format_value(value, precision) == expected


@pytest.mark.parametrize("value", ["table", "JSON", " csv "])
def test_parse_output_format_accepts_known_formats(value: str) -> None:
    """Output format names are case and whitespace insensitive."""
    assert parse_output_format(value) in set(OutputFormat)


def test_parse_output_format_rejects_unknown() -> None:
    """Unknown formats list the supported ones."""
    with pytest.raises(OutputFormatError) as exc_info:
        parse_output_format("yaml")
    assert "table, json, csv" in str(exc_info.value)


def test_samples_to_json_spells_out_non_finite_values() -> None:
    """JSON output stays strict JSON for inf and nan."""
    expression = parse("1/x")
    payload = json.loads(samples_to_json(expression, sample(expression, -1.0, 1.0, 3)))
    assert payload == {
        "expression": "1/x",
        "variable": "x",
        "samples": [
            {"x": -1.0, "y": -1.0},
            {"x": 0.0, "y": "inf"},
            {"x": 1.0, "y": 1.0},
        ],
    }


def test_samples_to_json_constant_expression() -> None:
    """Constant expressions report a null variable."""
    expression = parse("2")
    payload = json.loads(samples_to_json(expression, sample(expression, 0.0, 0.0, 1)))
    assert payload["variable"] is None


def test_samples_to_csv() -> None:
    """CSV output has a header named after the variable."""
    expression = parse("t^2")
    text = samples_to_csv(expression, sample(expression, 0.0, 2.0, 3), 6)
    assert text.splitlines() == ["t,value", "0,0", "1,1", "2,4"]


def test_build_samples_table_title_and_rows() -> None:
    """Table has one row per sample and a title naming the function."""
    expression = parse("x+1")
    table = build_samples_table(expression, sample(expression, 0.0, 1.0, 2), 6, False)
    assert table.row_count == 2
    assert str(table.title) == "f(x) = x+1"


def test_print_samples_json_writes_plain_text() -> None:
    """JSON output bypasses rich rendering."""
    buffer = io.StringIO()
    console = Console(file=buffer, no_color=True)
    expression = parse("x")
    print_samples(
        console, expression, sample(expression, 0.0, 1.0, 2), OutputFormat.JSON, 6, False
    )
    assert json.loads(buffer.getvalue())["samples"][1] == {"x": 1.0, "y": 1.0}
