"""explot - Parse single-variable arithmetic expressions and sample them."""

from explot.cli import main
from explot.expression import (
    Expression,
    ExpressionError,
    ExpressionParseError,
    Samples,
    SamplingError,
    parse,
    sample,
)


__version__ = "0.1.0"

__all__ = [
    "Expression",
    "ExpressionError",
    "ExpressionParseError",
    "Samples",
    "SamplingError",
    "__version__",
    "main",
    "parse",
    "sample",
]
