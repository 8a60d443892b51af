"""Public API for expression parsing, evaluation and sampling."""

from explot.expression.compiler import Expression, compile_expression, parse
from explot.expression.errors import (
    ExpressionError,
    ExpressionParseError,
    SamplingError,
    format_parse_error,
)
from explot.expression.parser import parse_ast
from explot.expression.printer import format_node
from explot.expression.runtime import evaluate_array, evaluate_node, evaluate_scalar
from explot.expression.sampling import Samples, sample


__all__ = [
    "Expression",
    "ExpressionError",
    "ExpressionParseError",
    "Samples",
    "SamplingError",
    "compile_expression",
    "evaluate_array",
    "evaluate_node",
    "evaluate_scalar",
    "format_node",
    "format_parse_error",
    "parse",
    "parse_ast",
    "sample",
]
