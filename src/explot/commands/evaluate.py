"""Eval command: evaluate an expression at given points."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import click
import typer

from explot import config as config_module
from explot.color import build_console
from explot.expression import ExpressionParseError, format_parse_error, parse
from explot.output_format import format_value


logger = logging.getLogger("explot")


@dataclass
class EvalArgs:
    """Arguments for the eval command."""

    expression: str
    points: list[float]
    precision: int | None


def run_eval(args: EvalArgs) -> None:
    """Run the eval command."""
    if args.precision is not None and args.precision < 0:
        raise typer.BadParameter("--precision must be non-negative")
    try:
        expression = parse(args.expression)
    except ExpressionParseError as exc:
        raise click.UsageError(format_parse_error(exc)) from exc

    logger.info("Evaluating %r at %d points", expression.source, len(args.points))
    console = build_console(False)
    for point in args.points:
        console.print(format_value(expression.evaluate(point), args.precision), markup=False)


def register(app: typer.Typer) -> None:
    """Register the eval command."""

    @app.command(
        "eval",
        epilog="Put -- before arguments that start with '-', as in: explot eval -- -x 7",
    )
    def eval_command(
        expression: str = typer.Argument(..., metavar="EXPR", help="Expression to evaluate"),
        points: list[float] = typer.Argument(  # noqa: B008
            ..., metavar="X", help="Points to evaluate the expression at"
        ),
        precision: int | None = typer.Option(
            None,
            "--precision",
            metavar="N",
            help="Significant digits to print (default: shortest exact form)",
        ),
    ) -> None:
        """Evaluate an expression at one or more points."""
        args = EvalArgs(expression=expression, points=points, precision=precision)
        config_module.log_applied_config_defaults("eval")
        config_module.log_command_arguments(args, "eval")
        run_eval(args)
