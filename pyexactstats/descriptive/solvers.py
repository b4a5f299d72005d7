"""
Public entry points for descriptive statistics.

Scalar functions return the statistic directly:
    range_(), mean(), median(), cov(), cov_population() and their
    *_of_pairs() / *_by() variants.

describe() and describe_pairs() run several statistics through a backend and
return a DescriptiveSolution carrying timing, warnings and provenance.

Scalar functions always propagate NaN. describe() and describe_pairs() can
drop NaN first with use='complete.obs'.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Literal

from pyexactstats.core.arithmetic import Arithmetic, resolve_arithmetic
from pyexactstats.core.exceptions import EmptyInputError, ValidationError
from pyexactstats.core.validation import check_sample
from pyexactstats.descriptive._aggregates import fold_covariance, fold_mean, fold_range
from pyexactstats.descriptive._interval import EmptyInterval, Interval
from pyexactstats.descriptive._pairs import project, unzip, zip_samples
from pyexactstats.descriptive._selection import select_median
from pyexactstats.descriptive.backends.cpu import CPUDescriptiveBackend
from pyexactstats.descriptive.design import PairedDesign, SampleDesign
from pyexactstats.descriptive.solution import DescriptiveSolution


UseMethod = Literal['everything', 'complete.obs']
BackendChoice = Literal['auto', 'cpu']


def _snapshot(
    values: Iterable[Any],
    arithmetic: Arithmetic | None,
) -> tuple[tuple[Any, ...], Arithmetic]:
    sample = check_sample(values, 'values')
    if arithmetic is None:
        arithmetic = resolve_arithmetic(sample)
    return sample, arithmetic


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUDescriptiveBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


# --- Univariate ---

def range_(
    values: Iterable[Any],
    *,
    arithmetic: Arithmetic | None = None,
) -> Interval | EmptyInterval:
    """
    Smallest interval containing every sample.

    Parameters
    ----------
    values : iterable
        Samples.
    arithmetic : Arithmetic, optional
        Override the arithmetic resolved from the sample types.

    Returns
    -------
    Interval(min, max), EMPTY_INTERVAL for empty input, or Interval(nan, nan)
    if any sample is NaN.
    """
    sample, arithmetic = _snapshot(values, arithmetic)
    return fold_range(sample, arithmetic)


value_range = range_


def mean(
    values: Iterable[Any],
    *,
    arithmetic: Arithmetic | None = None,
):
    """
    Arithmetic mean.

    Empty input returns the arithmetic's 0/0 result: NaN for floats and
    decimals. Fractions have no NaN and raise ZeroDivisionError instead.
    """
    sample, arithmetic = _snapshot(values, arithmetic)
    return fold_mean(sample, arithmetic)


def median(
    values: Iterable[Any],
    *,
    arithmetic: Arithmetic | None = None,
):
    """
    Exact median by three-way selection, without sorting.

    Odd length returns the middle sample; even length returns the mean of
    the two central samples, computed in the sample's own arithmetic
    (so Fractions stay exact). Any NaN sample makes the result NaN.

    Parameters
    ----------
    values : iterable
        Samples. Never modified.
    arithmetic : Arithmetic, optional
        Override the arithmetic resolved from the sample types.

    Raises
    ------
    EmptyInputError
        If values is empty.

    Examples
    --------
    >>> median([3, 1, 2])
    2
    >>> median([1, 2, 3, 4])
    2.5
    """
    sample, arithmetic = _snapshot(values, arithmetic)
    if not sample:
        raise EmptyInputError(
            "median of an empty sequence is undefined", operation='median'
        )
    return select_median(sample, arithmetic)


# --- Bivariate ---

def _covariance(
    x: tuple[Any, ...],
    y: tuple[Any, ...],
    arithmetic: Arithmetic | None,
    ddof: int,
) -> float:
    if arithmetic is None:
        arithmetic = resolve_arithmetic(x + y)
    return fold_covariance(x, y, arithmetic, ddof=ddof)


def cov_population(
    x: Iterable[Any],
    y: Iterable[Any],
    *,
    arithmetic: Arithmetic | None = None,
) -> float:
    """
    Population covariance of two paired samples (denominator n).

    Returns NaN if the samples are empty or any observation is NaN.

    Raises
    ------
    DimensionError
        If x and y differ in length.

    Examples
    --------
    >>> round(cov_population([5, 12, 18, -23, 45], [2, 8, 18, -20, 28]), 2)
    347.92
    """
    xs, ys = zip_samples(x, y)
    return _covariance(xs, ys, arithmetic, ddof=0)


def cov_population_of_pairs(
    pairs: Iterable[Any],
    *,
    arithmetic: Arithmetic | None = None,
) -> float:
    """Population covariance of a sequence of (x, y) pairs."""
    xs, ys = unzip(pairs)
    return _covariance(xs, ys, arithmetic, ddof=0)


def cov_population_by(
    f: Callable[[Any], Any],
    items: Iterable[Any],
    *,
    arithmetic: Arithmetic | None = None,
) -> float:
    """Population covariance of the (x, y) pairs obtained by applying f to each item."""
    xs, ys = unzip(project(f, items))
    return _covariance(xs, ys, arithmetic, ddof=0)


def cov(
    x: Iterable[Any],
    y: Iterable[Any],
    *,
    arithmetic: Arithmetic | None = None,
) -> float:
    """
    Sample covariance of two paired samples (Bessel-corrected, n-1).

    Returns NaN if fewer than two observations or any observation is NaN.

    Raises
    ------
    DimensionError
        If x and y differ in length.

    Examples
    --------
    >>> round(cov([5, 12, 18, -23, 45], [2, 8, 18, -20, 28]), 2)
    434.9
    """
    xs, ys = zip_samples(x, y)
    return _covariance(xs, ys, arithmetic, ddof=1)


def cov_of_pairs(
    pairs: Iterable[Any],
    *,
    arithmetic: Arithmetic | None = None,
) -> float:
    """Sample covariance of a sequence of (x, y) pairs."""
    xs, ys = unzip(pairs)
    return _covariance(xs, ys, arithmetic, ddof=1)


def cov_by(
    f: Callable[[Any], Any],
    items: Iterable[Any],
    *,
    arithmetic: Arithmetic | None = None,
) -> float:
    """Sample covariance of the (x, y) pairs obtained by applying f to each item."""
    xs, ys = unzip(project(f, items))
    return _covariance(xs, ys, arithmetic, ddof=1)


# --- Solution-returning entry points ---

def describe(
    values: Iterable[Any] | SampleDesign,
    *,
    use: UseMethod = 'everything',
    arithmetic: Arithmetic | None = None,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """
    Compute range, mean and median together.

    Unlike median(), an empty sample is not an error here: median is None
    and a warning is recorded. The mean of an empty sample is NaN, or None
    with a warning when the arithmetic has no NaN (Fractions).

    Parameters
    ----------
    values : iterable or SampleDesign
        Samples.
    use : str
        Missing data handling. 'everything' (propagate NaN) or
        'complete.obs' (drop NaN samples).
    arithmetic : Arithmetic, optional
        Override the arithmetic resolved from the sample types. Ignored
        when a SampleDesign is passed.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    DescriptiveSolution with range, mean and median populated.
    """
    if isinstance(values, SampleDesign):
        design = values
    else:
        design = SampleDesign.from_sequence(values, arithmetic=arithmetic)

    be = _get_backend(backend)
    result = be.solve(design, compute={'range', 'mean', 'median'}, use=use)

    return DescriptiveSolution(_result=result, _design=design)


def describe_pairs(
    x: Iterable[Any] | PairedDesign,
    y: Iterable[Any] | None = None,
    *,
    use: UseMethod = 'everything',
    arithmetic: Arithmetic | None = None,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """
    Compute sample and population covariance together.

    Parameters
    ----------
    x : iterable or PairedDesign
        First sample, or a sequence of (x, y) pairs when y is omitted.
    y : iterable, optional
        Second sample.
    use : str
        'everything' or 'complete.obs' (drop pairs with NaN on either side).
    arithmetic : Arithmetic, optional
        Override the arithmetic resolved from the sample types.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    DescriptiveSolution with covariance and covariance_population populated.
    """
    if isinstance(x, PairedDesign):
        design = x
    elif y is None:
        design = PairedDesign.from_pairs(x, arithmetic=arithmetic)
    else:
        design = PairedDesign.from_sequences(x, y, arithmetic=arithmetic)

    be = _get_backend(backend)
    result = be.solve(design, compute={'cov', 'cov_population'}, use=use)

    return DescriptiveSolution(_result=result, _design=design)
