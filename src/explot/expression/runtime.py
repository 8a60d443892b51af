"""Runtime evaluation for expression trees.

Arithmetic is carried out on numpy float64 values with floating-point warnings
silenced, so division by zero, overflow and negative bases raised to fractional
powers produce inf or nan instead of raising. Evaluation never fails once a
tree has been built.
"""

from __future__ import annotations

from typing import TypeAlias, assert_never

import numpy as np
import numpy.typing as npt

from explot.expression.ast import Node, Number, Power, Product, Sum, UnaryChain, Variable


Value: TypeAlias = np.float64 | npt.NDArray[np.float64]


def evaluate_node(node: Node, x: Value) -> Value:
    """Evaluate a node at x, which may be a scalar or an array of points."""
    match node:
        case Number(value=value):
            return np.float64(value)
        case Variable():
            return x
        case Power(base=base, exponent=None):
            return evaluate_node(base, x)
        case Power(base=base, exponent=exponent):
            return np.power(evaluate_node(base, x), evaluate_node(exponent, x))
        case UnaryChain(negate=negate, inner=inner):
            value = evaluate_node(inner, x)
            return -value if negate else value
        case Product(first=first, rest=rest):
            result = evaluate_node(first, x)
            for factor, is_multiply in rest:
                operand = evaluate_node(factor, x)
                result = result * operand if is_multiply else result / operand
            return result
        case Sum(first=first, rest=rest):
            total = evaluate_node(first, x)
            for term, is_add in rest:
                operand = evaluate_node(term, x)
                total = total + operand if is_add else total - operand
            return total
        case _:
            assert_never(node)


def evaluate_scalar(node: Node, x: float) -> float:
    """Evaluate a node at a single point with IEEE-754 semantics."""
    with np.errstate(all="ignore"):
        return float(evaluate_node(node, np.float64(x)))


def evaluate_array(node: Node, xs: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Evaluate a node at every point of xs, preserving its shape."""
    points = np.asarray(xs, dtype=np.float64)
    with np.errstate(all="ignore"):
        values = evaluate_node(node, points)
    return np.array(np.broadcast_to(values, points.shape), dtype=np.float64)
