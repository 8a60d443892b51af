"""Tests for recursion headroom around deep expressions."""

from __future__ import annotations

import sys

import pytest

from explot.expression.limits import FRAMES_PER_CHARACTER, recursion_headroom


def test_recursion_headroom_raises_and_restores_limit() -> None:
    """The limit grows with the text length and is restored on exit."""
    original = sys.getrecursionlimit()

    with recursion_headroom(100):
        assert sys.getrecursionlimit() == original + 100 * FRAMES_PER_CHARACTER

    assert sys.getrecursionlimit() == original


def test_recursion_headroom_nested_uses_never_lower_limit() -> None:
    """An inner, smaller request keeps the larger outer limit."""
    original = sys.getrecursionlimit()

    with recursion_headroom(200):
        with recursion_headroom(10):
            assert sys.getrecursionlimit() == original + 200 * FRAMES_PER_CHARACTER
        assert sys.getrecursionlimit() == original + 200 * FRAMES_PER_CHARACTER

    assert sys.getrecursionlimit() == original


def test_recursion_headroom_restores_limit_on_error() -> None:
    """The limit is restored even when the body raises."""
    original = sys.getrecursionlimit()

    with pytest.raises(ValueError), recursion_headroom(50):
        raise ValueError("boom")

    assert sys.getrecursionlimit() == original
