"""Errors for expression parsing and sampling."""

from __future__ import annotations


END_OF_INPUT = "end of input"

SHALLOWER_NESTING = "shallower nesting"


class ExpressionError(Exception):
    """Base exception for expression failures."""


class ExpressionParseError(ExpressionError):
    """Raised when expression text cannot be parsed.

    Attributes:
        expected: Description of the token the failing rule required
        found: Character found at the failure position, or None at end of input
        rule: Name of the grammar rule that failed
        position: Index of the failure in the whitespace-stripped text
        text: Whitespace-stripped expression text
    """

    def __init__(
        self,
        expected: str,
        found: str | None,
        rule: str,
        position: int,
        text: str,
    ) -> None:
        self.expected = expected
        self.found = found
        self.rule = rule
        self.position = position
        self.text = text
        super().__init__(
            f"Expected {expected} but found {describe_found(found)} "
            f"in {rule} at position {position}"
        )


class SamplingError(ExpressionError):
    """Raised when a sampling request is invalid."""


def describe_found(found: str | None) -> str:
    """Describe the character found at a failure position."""
    if found is None:
        return END_OF_INPUT
    return repr(found)


def format_parse_error(exc: ExpressionParseError) -> str:
    """Build parse error message with a pointer under the failing character."""
    pointer = " " * max(exc.position, 0) + "^"
    return f"Invalid expression: {exc}\n\n{exc.text}\n{pointer}"
