"""AST nodes for plotted expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Number:
    """Numeric literal."""

    value: float


@dataclass(frozen=True, slots=True)
class Variable:
    """Reference to the single bound input variable."""


@dataclass(frozen=True, slots=True)
class Power:
    """Primary raised to an optional right-associative exponent."""

    base: Node
    exponent: UnaryChain | None


@dataclass(frozen=True, slots=True)
class UnaryChain:
    """Leading minus signs collapsed into a single negation flag."""

    negate: bool
    inner: Power


@dataclass(frozen=True, slots=True)
class Product:
    """Left-to-right fold of factors.

    Each entry of `rest` pairs a factor with True to multiply or False to divide.
    """

    first: UnaryChain
    rest: tuple[tuple[UnaryChain, bool], ...] = ()


@dataclass(frozen=True, slots=True)
class Sum:
    """Left-to-right fold of terms.

    Each entry of `rest` pairs a term with True to add or False to subtract.
    """

    first: Product
    rest: tuple[tuple[Product, bool], ...] = ()


Node: TypeAlias = Number | Variable | Power | UnaryChain | Product | Sum
