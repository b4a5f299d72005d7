"""
Exception hierarchy for PyExactStats.

All exceptions inherit from PyExactStatsError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
    - NaN in the input is a numeric outcome, never an exception
"""


class PyExactStatsError(Exception):
    """Base exception for all PyExactStats errors."""
    pass


class ValidationError(PyExactStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Sequence dimensions are incorrect or inconsistent.

    Raised when paired sequences differ in length or when an array
    argument is not one-dimensional.
    """
    pass


class EmptyInputError(ValidationError):
    """
    Operation requires at least one sample but received none.

    This is a precondition violation: the median of an empty sequence
    is undefined, and the caller is expected to guard against it.

    Attributes:
        operation: Name of the operation that rejected the input
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class NumericalError(PyExactStatsError):
    """
    Numerical computation failed.

    Base class for errors arising during computation rather than from
    the user's input.
    """
    pass


class SelectionInvariantError(NumericalError):
    """
    The order-statistic selector reached an inconsistent state.

    The selector tracks how many samples rank below (``before``) and above
    (``after``) the sublist it is currently searching. Running out of
    candidates, or counters that no longer add up to the input length,
    means the bookkeeping is broken. A well-formed non-empty input never
    triggers this.

    Attributes:
        before: Samples known to rank below the active sublist
        after: Samples known to rank above the active sublist
        expected_total: Length of the original input
    """

    def __init__(
        self,
        message: str,
        before: int | None = None,
        after: int | None = None,
        expected_total: int | None = None
    ):
        super().__init__(message)
        self.before = before
        self.after = after
        self.expected_total = expected_total
