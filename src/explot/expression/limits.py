"""Recursion headroom for parsing and walking deeply nested expressions.

Each nesting level of an expression costs a fixed number of Python frames in
the parser and in the tree walkers. Nesting depth is bounded by the length of
the expression text, so raising the interpreter recursion limit in proportion
to that length lets any well-formed expression be parsed and evaluated.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager


# Frames used per character of input, with margin for the parser's
# parenthesis path, which is the deepest one.
FRAMES_PER_CHARACTER = 16

_LOCK = threading.Lock()
_HEADROOM: dict[str, int] = {"active": 0, "saved_limit": 0}


@contextmanager
def recursion_headroom(length: int) -> Iterator[None]:
    """Raise the recursion limit for work on text of the given length.

    Nested and concurrent uses only ever raise the limit; the original limit is
    restored when the last one exits.
    """
    with _LOCK:
        if _HEADROOM["active"] == 0:
            _HEADROOM["saved_limit"] = sys.getrecursionlimit()
        _HEADROOM["active"] += 1
        needed = _HEADROOM["saved_limit"] + max(length, 0) * FRAMES_PER_CHARACTER
        if needed > sys.getrecursionlimit():
            sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        with _LOCK:
            _HEADROOM["active"] -= 1
            if _HEADROOM["active"] == 0:
                sys.setrecursionlimit(_HEADROOM["saved_limit"])
