"""
Single-pass aggregations: range, mean and covariance.

Each is one left-to-right fold in the sample's own arithmetic. NaN is never
special-cased as an error; it flows through the arithmetic (or, for range,
short-circuits to a NaN interval).
"""

from __future__ import annotations

import math
from typing import Any, Sequence

from pyexactstats.core.arithmetic import Arithmetic
from pyexactstats.descriptive._interval import EMPTY_INTERVAL, EmptyInterval, Interval


def fold_range(values: Sequence[Any], arithmetic: Arithmetic) -> Interval | EmptyInterval:
    """
    Smallest interval containing every sample.

    Seeded by the first sample. Empty input gives EMPTY_INTERVAL; a NaN
    sample gives Interval(nan, nan).
    """
    if not values:
        return EMPTY_INTERVAL

    lower = upper = values[0]
    if arithmetic.is_nan(lower):
        return Interval(lower, lower)

    for x in values[1:]:
        if arithmetic.is_nan(x):
            return Interval(x, x)
        if arithmetic.less(x, lower):
            lower = x
        elif arithmetic.less(upper, x):
            upper = x

    return Interval(lower, upper)


def fold_sum(values: Sequence[Any], arithmetic: Arithmetic) -> tuple[Any, Any]:
    """(count, sum) of the samples, both in the sample arithmetic."""
    n = arithmetic.zero
    total = arithmetic.zero
    for x in values:
        n = arithmetic.add(arithmetic.one, n)
        total = arithmetic.add(total, x)
    return n, total


def fold_mean(values: Sequence[Any], arithmetic: Arithmetic) -> Any:
    """
    Arithmetic mean, sum / count.

    Empty input divides zero by zero and so returns whatever the arithmetic
    defines for that (NaN for floats and decimals).
    """
    n, total = fold_sum(values, arithmetic)
    return arithmetic.divide(total, n)


def fold_covariance(
    x: Sequence[Any],
    y: Sequence[Any],
    arithmetic: Arithmetic,
    *,
    ddof: int,
) -> float:
    """
    Covariance of two equal-length samples.

    sum((x_i - mean(x)) * (y_i - mean(y))) / (n - ddof), accumulated in the
    sample arithmetic and returned as a float. ddof=0 gives the population
    estimator, ddof=1 the Bessel-corrected sample estimator.

    Returns NaN when n - ddof <= 0 (including empty input) or when any
    observation is NaN.
    """
    n = len(x)
    if n - ddof <= 0:
        return math.nan

    mean_x = fold_mean(x, arithmetic)
    mean_y = fold_mean(y, arithmetic)

    cross = arithmetic.zero
    for xi, yi in zip(x, y):
        dx = arithmetic.subtract(xi, mean_x)
        dy = arithmetic.subtract(yi, mean_y)
        cross = arithmetic.add(cross, arithmetic.multiply(dx, dy))

    result = arithmetic.divide(cross, n - ddof)
    if arithmetic.is_nan(result):
        return math.nan
    return float(result)
