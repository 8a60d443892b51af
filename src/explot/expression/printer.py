"""Render expression trees back to canonical text."""

from __future__ import annotations

import math
from typing import assert_never

import numpy as np

from explot.expression.ast import Node, Number, Power, Product, Sum, UnaryChain, Variable


# Literal text for overflowed numbers; it overflows to inf again when reparsed.
OVERFLOW_DIGITS = "1" + "0" * 309


def _format_number(value: float) -> str:
    # Positional notation only; the grammar has no exponent syntax.
    if math.isinf(value):
        return OVERFLOW_DIGITS
    return np.format_float_positional(value, trim="-")


def format_node(node: Node, variable: str | None = None) -> str:
    """Render a node as explicit expression text.

    Implicit products are written with `*` and every parenthesized group is
    kept, so parsing the result yields an equal tree.
    """
    name = variable or "x"
    match node:
        case Number(value=value):
            return _format_number(value)
        case Variable():
            return name
        case Power(base=base, exponent=exponent):
            text = format_node(base, variable)
            if isinstance(base, Sum):
                text = f"({text})"
            if exponent is not None:
                text = f"{text}^{format_node(exponent, variable)}"
            return text
        case UnaryChain(negate=negate, inner=inner):
            text = format_node(inner, variable)
            return f"-{text}" if negate else text
        case Product(first=first, rest=rest):
            parts = [format_node(first, variable)]
            for factor, is_multiply in rest:
                parts.append("*" if is_multiply else "/")
                parts.append(format_node(factor, variable))
            return "".join(parts)
        case Sum(first=first, rest=rest):
            parts = [format_node(first, variable)]
            for term, is_add in rest:
                parts.append("+" if is_add else "-")
                parts.append(format_node(term, variable))
            return "".join(parts)
        case _:
            assert_never(node)
