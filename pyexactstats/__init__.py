"""
PyExactStats: exact descriptive statistics for Python.

Range, mean, median and covariance computed in the samples' own arithmetic
(float, Fraction or Decimal). The median is found by selection, never by
sorting, and NaN anywhere in the input propagates to the result.

Submodules:
    core: Arithmetic capability sets, Result envelope, exceptions
    descriptive: The statistics themselves
"""

__version__ = "0.1.0"

from pyexactstats import descriptive
from pyexactstats.core.exceptions import EmptyInputError
from pyexactstats.descriptive import (
    EMPTY_INTERVAL,
    Interval,
    cov,
    cov_by,
    cov_of_pairs,
    cov_population,
    cov_population_by,
    cov_population_of_pairs,
    describe,
    describe_pairs,
    mean,
    median,
    range_,
)

__all__ = [
    "__version__",
    "descriptive",
    "EmptyInputError",
    "EMPTY_INTERVAL",
    "Interval",
    "median",
    "mean",
    "range_",
    "cov",
    "cov_by",
    "cov_of_pairs",
    "cov_population",
    "cov_population_by",
    "cov_population_of_pairs",
    "describe",
    "describe_pairs",
]
