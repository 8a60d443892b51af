"""Sampling of expressions over evenly spaced points."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from explot.expression.compiler import Expression
from explot.expression.errors import SamplingError


logger = logging.getLogger("explot")


@dataclass(frozen=True)
class Samples:
    """Sample points and the expression values at those points."""

    xs: npt.NDArray[np.float64]
    ys: npt.NDArray[np.float64]

    def __len__(self) -> int:
        return len(self.xs)

    def rows(self) -> Iterator[tuple[float, float]]:
        """Yield (x, y) pairs as plain floats."""
        for x, y in zip(self.xs, self.ys, strict=True):
            yield (float(x), float(y))


def sample_points(start: float, stop: float, count: int) -> npt.NDArray[np.float64]:
    """Build count evenly spaced points from start to stop, both included.

    Raises:
        SamplingError: If the bounds are not finite, count is below 1, or more
            than one point is requested over an empty interval
    """
    if count < 1:
        raise SamplingError(f"Sample count must be at least 1, got {count}")
    if not math.isfinite(start) or not math.isfinite(stop):
        raise SamplingError(f"Sample bounds must be finite, got {start} and {stop}")
    if count > 1 and start == stop:
        raise SamplingError(f"Cannot take {count} samples over the empty interval at {start}")
    return np.linspace(start, stop, num=count, dtype=np.float64)


def sample(expression: Expression, start: float, stop: float, count: int) -> Samples:
    """Evaluate expression at count evenly spaced points from start to stop."""
    xs = sample_points(start, stop, count)
    logger.info("Sampling %r at %d points in [%s, %s]", expression.source, count, start, stop)
    return Samples(xs, expression.evaluate_many(xs))
