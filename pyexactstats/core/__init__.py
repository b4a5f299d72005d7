"""
Core infrastructure for PyExactStats.

This module provides shared abstractions and utilities used by the
domain-specific submodules.

Key components:
    arithmetic: Numeric capability sets (float, Fraction, Decimal)
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from pyexactstats.core.arithmetic import (
    Arithmetic,
    DECIMAL,
    FLOAT,
    FRACTION,
    resolve_arithmetic,
)
from pyexactstats.core.result import Result
from pyexactstats.core.exceptions import (
    PyExactStatsError,
    ValidationError,
    DimensionError,
    EmptyInputError,
    NumericalError,
    SelectionInvariantError,
)

__all__ = [
    # Arithmetic
    "Arithmetic",
    "FLOAT",
    "FRACTION",
    "DECIMAL",
    "resolve_arithmetic",
    # Result
    "Result",
    # Exceptions
    "PyExactStatsError",
    "ValidationError",
    "DimensionError",
    "EmptyInputError",
    "NumericalError",
    "SelectionInvariantError",
]
