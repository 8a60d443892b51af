"""Sample command: tabulate an expression over an interval."""

from __future__ import annotations

from dataclasses import dataclass

import click
import typer

from explot import config as config_module
from explot.color import build_console, should_use_color
from explot.expression import (
    ExpressionParseError,
    SamplingError,
    format_parse_error,
    parse,
    sample,
)
from explot.output_format import (
    DEFAULT_PRECISION,
    OutputFormat,
    OutputFormatError,
    parse_output_format,
    print_samples,
)


@dataclass
class SampleArgs:
    """Arguments for the sample command."""

    expression: str
    start: float
    stop: float
    count: int
    out: str
    precision: int
    color_flag: bool | None


def run_sample(args: SampleArgs) -> None:
    """Run the sample command."""
    if args.precision < 0:
        raise typer.BadParameter("--precision must be non-negative")
    try:
        output_format = parse_output_format(args.out)
    except OutputFormatError as exc:
        raise click.UsageError(str(exc)) from exc

    try:
        expression = parse(args.expression)
    except ExpressionParseError as exc:
        raise click.UsageError(format_parse_error(exc)) from exc

    try:
        samples = sample(expression, args.start, args.stop, args.count)
    except SamplingError as exc:
        raise click.UsageError(str(exc)) from exc

    color_enabled = should_use_color(args.color_flag) and output_format == OutputFormat.TABLE
    console = build_console(color_enabled)
    print_samples(console, expression, samples, output_format, args.precision, color_enabled)


def register(app: typer.Typer) -> None:
    """Register the sample command."""

    @app.command("sample")
    def sample_command(  # noqa: PLR0913
        expression: str = typer.Argument(..., metavar="EXPR", help="Expression to sample"),
        start: float = typer.Option(-10.0, "--start", metavar="X", help="First sample point"),
        stop: float = typer.Option(10.0, "--stop", metavar="X", help="Last sample point"),
        count: int = typer.Option(
            21, "--count", "-n", metavar="N", help="Number of evenly spaced sample points"
        ),
        out: str = typer.Option(
            OutputFormat.TABLE,
            "--out",
            help="Output format: table, json, or csv",
        ),
        precision: int = typer.Option(
            DEFAULT_PRECISION,
            "--precision",
            metavar="N",
            help="Significant digits for table and csv output",
        ),
        color_flag: bool | None = typer.Option(
            None,
            "--color/--no-color",
            help="Force colored output",
        ),
    ) -> None:
        """Sample an expression at evenly spaced points."""
        args = SampleArgs(
            expression=expression,
            start=start,
            stop=stop,
            count=count,
            out=out,
            precision=precision,
            color_flag=color_flag,
        )
        config_module.log_applied_config_defaults("sample")
        config_module.log_command_arguments(args, "sample")
        run_sample(args)
