"""
Descriptive statistics module.

Exact range, mean, median and covariance over sequences of floats,
Fractions or Decimals. The median is found by three-way selection without
sorting or modifying the input.

Public API:
    median(x)                 - Exact median; EmptyInputError on empty input
    mean(x)                   - Arithmetic mean
    range_(x)                 - Interval(min, max) or EMPTY_INTERVAL
    cov(x, y)                 - Sample covariance (Bessel-corrected, n-1)
    cov_population(x, y)      - Population covariance (denominator n)
    cov_of_pairs, cov_by,
    cov_population_of_pairs,
    cov_population_by         - Pair-sequence and projection variants
    describe(x)               - range, mean, median as a DescriptiveSolution
    describe_pairs(x, y)      - both covariances as a DescriptiveSolution
"""

from pyexactstats.descriptive._interval import EMPTY_INTERVAL, EmptyInterval, Interval
from pyexactstats.descriptive.design import PairedDesign, SampleDesign
from pyexactstats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pyexactstats.descriptive.solvers import (
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
    value_range,
)

__all__ = [
    "median",
    "mean",
    "range_",
    "value_range",
    "cov",
    "cov_by",
    "cov_of_pairs",
    "cov_population",
    "cov_population_by",
    "cov_population_of_pairs",
    "describe",
    "describe_pairs",
    "Interval",
    "EmptyInterval",
    "EMPTY_INTERVAL",
    "SampleDesign",
    "PairedDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]
