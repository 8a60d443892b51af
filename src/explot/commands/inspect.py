"""Parse command: show how an expression was understood."""

from __future__ import annotations

from dataclasses import dataclass
from typing import assert_never

import click
import typer
from rich.tree import Tree

from explot import config as config_module
from explot.color import bright_white, build_console, colorize, should_use_color
from explot.expression import ExpressionParseError, format_node, format_parse_error, parse
from explot.expression.ast import Node, Number, Power, Product, Sum, UnaryChain, Variable
from explot.expression.limits import recursion_headroom
from explot.output_format import format_value


@dataclass
class ParseArgs:
    """Arguments for the parse command."""

    expression: str
    color_flag: bool | None


def _node_label(node: Node, variable: str, color_enabled: bool) -> str:
    """Build tree label for one node."""
    match node:
        case Number(value=value):
            return f"Number {colorize(format_value(value), 'cyan', color_enabled)}"
        case Variable():
            return f"Variable {colorize(variable, 'green', color_enabled)}"
        case Power(exponent=exponent):
            return "Power" if exponent is not None else "Power (no exponent)"
        case UnaryChain(negate=negate):
            return "UnaryChain (negate)" if negate else "UnaryChain"
        case Product():
            return "Product"
        case Sum():
            return "Sum"
        case _:
            assert_never(node)


def _add_operand(tree: Tree, node: Node, variable: str, color_enabled: bool, prefix: str) -> None:
    branch = tree.add(f"{prefix}{_node_label(node, variable, color_enabled)}")
    _add_children(branch, node, variable, color_enabled)


def _add_children(tree: Tree, node: Node, variable: str, color_enabled: bool) -> None:
    """Attach child nodes of node to tree."""
    match node:
        case Number() | Variable():
            return
        case Power(base=base, exponent=exponent):
            _add_operand(tree, base, variable, color_enabled, "")
            if exponent is not None:
                _add_operand(tree, exponent, variable, color_enabled, "^ ")
        case UnaryChain(inner=inner):
            _add_operand(tree, inner, variable, color_enabled, "")
        case Product(first=first, rest=rest):
            _add_operand(tree, first, variable, color_enabled, "")
            for factor, is_multiply in rest:
                _add_operand(tree, factor, variable, color_enabled, "* " if is_multiply else "/ ")
        case Sum(first=first, rest=rest):
            _add_operand(tree, first, variable, color_enabled, "")
            for term, is_add in rest:
                _add_operand(tree, term, variable, color_enabled, "+ " if is_add else "- ")
        case _:
            assert_never(node)


def build_ast_tree(node: Node, variable: str | None, color_enabled: bool) -> Tree:
    """Build Rich tree rendering of an expression tree."""
    name = variable or "x"
    tree = Tree(_node_label(node, name, color_enabled))
    _add_children(tree, node, name, color_enabled)
    return tree


def run_parse(args: ParseArgs) -> None:
    """Run the parse command."""
    try:
        expression = parse(args.expression)
    except ExpressionParseError as exc:
        raise click.UsageError(format_parse_error(exc)) from exc

    color_enabled = should_use_color(args.color_flag)
    console = build_console(color_enabled)
    variable = expression.variable if expression.variable is not None else "none"
    console.print(f"{bright_white('Expression:', color_enabled)} {expression.source}")
    console.print(f"{bright_white('Variable:', color_enabled)} {variable}")
    with recursion_headroom(len(expression.source)):
        canonical = format_node(expression.root, expression.variable)
        tree = build_ast_tree(expression.root, expression.variable, color_enabled)
    console.print(f"{bright_white('Canonical:', color_enabled)} {canonical}")
    console.print(tree)


def register(app: typer.Typer) -> None:
    """Register the parse command."""

    @app.command("parse")
    def parse_command(
        expression: str = typer.Argument(..., metavar="EXPR", help="Expression to parse"),
        color_flag: bool | None = typer.Option(
            None,
            "--color/--no-color",
            help="Force colored output",
        ),
    ) -> None:
        """Show the parsed structure of an expression."""
        args = ParseArgs(expression=expression, color_flag=color_flag)
        config_module.log_applied_config_defaults("parse")
        config_module.log_command_arguments(args, "parse")
        run_parse(args)
