"""Character classes and single-character parser primitives.

The grammar has no tokenizer: every rule consumes the whitespace-free input one
character at a time through the primitives below. Peek and check primitives
always succeed and leave no failure position behind, so the only failures a
parse can report come from the `require_*` primitives.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from parsy import Parser, Result

from explot.expression.errors import END_OF_INPUT


@dataclass(frozen=True, slots=True)
class CharClass:
    """Single-character class with a human readable description."""

    description: str
    pattern: re.Pattern[str]

    def matches(self, char: str | None) -> bool:
        """Return whether char belongs to this class; end of input never does."""
        if char is None:
            return False
        return self.pattern.fullmatch(char) is not None


@dataclass(frozen=True, slots=True)
class Expectation:
    """What a failing rule required at the failure position."""

    expected: str
    rule: str


def literal(char: str) -> CharClass:
    """Build a class matching exactly one given character."""
    return CharClass(repr(char), re.compile(re.escape(char)))


DIGIT = CharClass("digit", re.compile(r"[0-9]"))
LETTER = CharClass("letter", re.compile(r"[a-zA-Z]"))
PLUS = literal("+")
MINUS = literal("-")
TIMES = literal("*")
DIVIDE = literal("/")
CARET = literal("^")
OPEN_PAREN = literal("(")
CLOSE_PAREN = literal(")")
DECIMAL_POINT = literal(".")


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character from text."""
    return "".join(text.split())


def char_at(stream: str, index: int) -> str | None:
    """Return the character at index, or None at end of input."""
    if index < len(stream):
        return stream[index]
    return None


def next_is(*classes: CharClass) -> Parser:
    """Peek: succeed with whether the next character matches any class."""

    @Parser
    def parser(stream: str, index: int) -> Result:
        char = char_at(stream, index)
        return Result.success(index, any(cls.matches(char) for cls in classes))

    return parser


def check_spit(cls: CharClass) -> Parser:
    """Consume and return the next character if it matches, else None."""

    @Parser
    def parser(stream: str, index: int) -> Result:
        char = char_at(stream, index)
        if cls.matches(char):
            return Result.success(index + 1, char)
        return Result.success(index, None)

    return parser


def check_eat(cls: CharClass) -> Parser:
    """Consume the next character if it matches; succeed with whether it did."""
    return check_spit(cls).map(lambda char: char is not None)


def spit_many(cls: CharClass) -> Parser:
    """Consume a possibly empty run of matching characters."""

    @Parser
    def parser(stream: str, index: int) -> Result:
        end = index
        while cls.matches(char_at(stream, end)):
            end += 1
        return Result.success(end, stream[index:end])

    return parser


def require_spit(cls: CharClass, rule: str) -> Parser:
    """Consume and return the next character, failing the parse if it does not match."""

    @Parser
    def parser(stream: str, index: int) -> Result:
        char = char_at(stream, index)
        if cls.matches(char):
            return Result.success(index + 1, char)
        return Result.failure(index, Expectation(cls.description, rule))

    return parser


def require_eat(cls: CharClass, rule: str) -> Parser:
    """Consume the next character, failing the parse if it does not match."""
    return require_spit(cls, rule).result(None)


def require_end(rule: str) -> Parser:
    """Succeed only when the whole input has been consumed."""

    @Parser
    def parser(stream: str, index: int) -> Result:
        if index >= len(stream):
            return Result.success(index, None)
        return Result.failure(index, Expectation(END_OF_INPUT, rule))

    return parser
