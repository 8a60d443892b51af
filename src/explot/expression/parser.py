"""Recursive-descent parser for single-variable arithmetic expressions.

Grammar, loosest binding first::

    sum      := term (('+' | '-') term)*
    term     := factor (('*' | peek '(' | peek letter) factor | '/' factor)*
    factor   := '-'* base
    base     := primary ('^' factor)?
    primary  := variable | number | '(' sum ')'
    number   := digit+ ('.' digit+)?

Each choice commits on a single character of lookahead. A failed rule fails
the whole parse; its parsy result is returned up through every enclosing rule
and turned into an `ExpressionParseError` once, in `parse_ast`.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from dataclasses import dataclass
from typing import cast

from parsy import ParseError, Parser, forward_declaration, generate

from explot.expression.ast import Node, Number, Power, Product, Sum, UnaryChain, Variable
from explot.expression.errors import SHALLOWER_NESTING, ExpressionParseError
from explot.expression.lexical import (
    CARET,
    CLOSE_PAREN,
    DECIMAL_POINT,
    DIGIT,
    DIVIDE,
    LETTER,
    MINUS,
    OPEN_PAREN,
    PLUS,
    TIMES,
    Expectation,
    char_at,
    check_eat,
    check_spit,
    literal,
    next_is,
    require_eat,
    require_end,
    require_spit,
    spit_many,
    strip_whitespace,
)
from explot.expression.limits import recursion_headroom


logger = logging.getLogger("explot")


@dataclass(slots=True)
class ParseSession:
    """Mutable state of one top-level parse.

    Attributes:
        variable: Letter bound by the first variable token, None until then
    """

    variable: str | None = None


def _make_parser(session: ParseSession) -> Parser:
    """Create the expression parser bound to one parse session."""
    sum_rule = forward_declaration()

    @generate
    def variable() -> Generator[Parser, object, Variable]:
        if session.variable is None:
            name = yield require_spit(LETTER, "variable")
            session.variable = str(name)
        else:
            yield require_eat(literal(session.variable), "variable")
        return Variable()

    @generate
    def number() -> Generator[Parser, object, Number]:
        digits = yield require_spit(DIGIT, "number")
        digits += yield spit_many(DIGIT)
        point = yield check_spit(DECIMAL_POINT)
        if point is not None:
            fraction = yield require_spit(DIGIT, "number")
            fraction += yield spit_many(DIGIT)
            digits += f"{point}{fraction}"
        return Number(float(digits))

    @generate
    def primary() -> Generator[Parser, object, Node]:
        if (yield next_is(LETTER)):
            return (yield variable)
        if (yield next_is(DIGIT)):
            return (yield number)
        yield require_eat(OPEN_PAREN, "primary")
        inner = yield sum_rule
        yield require_eat(CLOSE_PAREN, "primary")
        return inner

    @generate
    def base() -> Generator[Parser, object, Power]:
        operand = yield primary
        exponent = None
        if (yield check_eat(CARET)):
            exponent = yield factor
        return Power(operand, exponent)

    @generate
    def factor() -> Generator[Parser, object, UnaryChain]:
        negate = False
        while (yield check_eat(MINUS)):
            negate = not negate
        inner = yield base
        return UnaryChain(negate, inner)

    @generate
    def term() -> Generator[Parser, object, Product]:
        first = yield factor
        rest: list[tuple[UnaryChain, bool]] = []
        while True:
            multiply = yield check_eat(TIMES)
            if not multiply:
                # Implicit multiplication before '(' or a letter, never a digit.
                multiply = yield next_is(OPEN_PAREN, LETTER)
            if multiply:
                rest.append(((yield factor), True))
            elif (yield check_eat(DIVIDE)):
                rest.append(((yield factor), False))
            else:
                break
        return Product(first, tuple(rest))

    @generate
    def expression() -> Generator[Parser, object, Sum]:
        first = yield term
        rest: list[tuple[Product, bool]] = []
        while True:
            if (yield check_eat(PLUS)):
                rest.append(((yield term), True))
            elif (yield check_eat(MINUS)):
                rest.append(((yield term), False))
            else:
                break
        return Sum(first, tuple(rest))

    sum_rule.become(expression)
    return sum_rule << require_end("expression")


def _to_parse_error(text: str, exc: ParseError) -> ExpressionParseError:
    """Convert a parsy failure into a structured parse error."""
    expectations = sorted(
        (item for item in exc.expected if isinstance(item, Expectation)),
        key=lambda item: (item.rule, item.expected),
    )
    found = char_at(text, exc.index)
    if not expectations:
        return ExpressionParseError(
            ", ".join(sorted(str(item) for item in exc.expected)),
            found,
            "expression",
            exc.index,
            text,
        )
    first = expectations[0]
    return ExpressionParseError(first.expected, found, first.rule, exc.index, text)


def parse_session(text: str, session: ParseSession) -> Sum:
    """Parse whitespace-free text using the given session."""
    try:
        with recursion_headroom(len(text)):
            root, _remainder = _make_parser(session).parse_partial(text)
    except ParseError as exc:
        raise _to_parse_error(text, exc) from exc
    except RecursionError as exc:
        found = char_at(text, 0)
        raise ExpressionParseError(SHALLOWER_NESTING, found, "expression", 0, text) from exc
    return cast(Sum, root)


def parse_ast(text: str) -> tuple[Sum, str | None, str]:
    """Parse expression text into an AST.

    Args:
        text: Raw expression text; whitespace anywhere is ignored

    Returns:
        Tuple of (root node, bound variable letter or None, stripped text)

    Raises:
        ExpressionParseError: If the text is not a well-formed expression
    """
    stripped = strip_whitespace(text)
    session = ParseSession()
    root = parse_session(stripped, session)
    logger.debug("Parsed expression %r (variable: %s)", stripped, session.variable)
    return (root, session.variable, stripped)
