"""Compiler entrypoints for plotted expressions."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from explot.expression.ast import Node
from explot.expression.limits import recursion_headroom
from explot.expression.parser import parse_ast
from explot.expression.runtime import evaluate_array, evaluate_scalar


@dataclass(frozen=True, slots=True)
class Expression:
    """Parsed expression ready to be sampled.

    Instances are immutable: the same expression may be evaluated any number
    of times, from any thread, and always gives bit-identical results.

    Attributes:
        root: Root node of the expression tree
        variable: Letter bound as the input variable, None for constants
        source: Expression text with whitespace removed
    """

    root: Node
    variable: str | None = None
    source: str = ""

    def evaluate(self, x: float) -> float:
        """Evaluate the expression at x; never raises."""
        with recursion_headroom(len(self.source)):
            return evaluate_scalar(self.root, x)

    def evaluate_many(self, xs: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Evaluate the expression at every point of xs."""
        with recursion_headroom(len(self.source)):
            return evaluate_array(self.root, xs)

    def __call__(self, x: float) -> float:
        return self.evaluate(x)


def compile_expression(root: Node, variable: str | None = None, source: str = "") -> Expression:
    """Wrap an expression tree into an evaluable handle."""
    return Expression(root, variable, source)


def parse(text: str) -> Expression:
    """Parse expression text into an evaluable expression.

    Raises:
        ExpressionParseError: If the text is not a well-formed expression
    """
    root, variable, source = parse_ast(text)
    return compile_expression(root, variable, source)
