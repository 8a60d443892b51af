"""Tests for sampling expressions over an interval."""

from __future__ import annotations

import math

import pytest

from explot.expression import SamplingError, parse, sample
from explot.expression.sampling import sample_points


def test_sample_includes_both_ends() -> None:
    """Samples are evenly spaced and include start and stop."""
    samples = sample(parse("x^2"), 0.0, 2.0, 5)
    assert samples.xs.tolist() == [0.0, 0.5, 1.0, 1.5, 2.0]
    assert samples.ys.tolist() == [0.0, 0.25, 1.0, 2.25, 4.0]
    assert len(samples) == 5


def test_sample_single_point() -> None:
    """A single sample is taken at start."""
    samples = sample(parse("x+1"), 3.0, 3.0, 1)
    assert list(samples.rows()) == [(3.0, 4.0)]


def test_sample_descending_interval() -> None:
    """Stop may be below start."""
    samples = sample(parse("x"), 1.0, -1.0, 3)
    assert samples.xs.tolist() == [1.0, 0.0, -1.0]


def test_sample_keeps_poles_as_data() -> None:
    """Non-finite values are part of the samples."""
    samples = sample(parse("1/x"), -1.0, 1.0, 3)
    rows = list(samples.rows())
    assert rows[0] == (-1.0, -1.0)
    assert rows[1] == (0.0, math.inf)
    assert rows[2] == (1.0, 1.0)


def test_sample_rows_are_python_floats() -> None:
    """Row values are plain floats."""
    x, y = next(sample(parse("x"), 0.0, 1.0, 2).rows())
    assert type(x) is float
    assert type(y) is float


@pytest.mark.parametrize(
    ("start", "stop", "count"),
    [
        (0.0, 1.0, 0),
        (0.0, 1.0, -3),
        (math.nan, 1.0, 3),
        (0.0, math.inf, 3),
        (2.0, 2.0, 3),
    ],
)
def test_sample_points_rejects_invalid_requests(start: float, stop: float, count: int) -> None:
    """Invalid sampling requests raise SamplingError."""
    with pytest.raises(SamplingError):
        sample_points(start, stop, count)
