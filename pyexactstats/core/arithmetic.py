"""
Numeric capability sets for PyExactStats.

Every statistic in this package is written against the Arithmetic protocol
rather than against Python operators directly, so the same selector and folds
run exactly over floats, fractions and decimals. An Arithmetic bundles the
handful of operations the statistics need:

    zero, one           additive / multiplicative identities
    add, subtract       sums and deviations
    multiply, divide    cross products and the final normalisation
    less, equal         the total order used by selection
    is_nan, nan         the not-a-number sentinel, where the type has one

Three implementations are provided:

    FLOAT     Python int/float/bool and NumPy real scalars (IEEE-754 division)
    FRACTION  fractions.Fraction (exact, no NaN)
    DECIMAL   decimal.Decimal (NaN-aware, IEEE-style division by zero)

resolve_arithmetic() picks the implementation from the values themselves.
Integers are accepted by every family and resolve to FLOAT on their own,
so the median of [1, 2, 3, 4] is 2.5 rather than an integer.
"""

from __future__ import annotations

import math
from decimal import Decimal, DivisionByZero, InvalidOperation, getcontext, localcontext
from fractions import Fraction
from typing import Any, Iterable, Protocol, TypeVar, runtime_checkable

import numpy as np

from pyexactstats.core.exceptions import ValidationError

T = TypeVar('T')


@runtime_checkable
class Arithmetic(Protocol[T]):
    """
    Structural interface for a numeric type usable by the statistics.

    Implementations are stateless; a single shared instance per type is
    enough and is safe to use from concurrent callers.
    """

    @property
    def name(self) -> str:
        """Identifier, e.g. 'float', 'fraction', 'decimal'."""
        ...

    @property
    def zero(self) -> T:
        ...

    @property
    def one(self) -> T:
        ...

    @property
    def nan(self) -> T | None:
        """The NaN sentinel, or None if the type cannot represent one."""
        ...

    def accepts(self, value: Any) -> bool:
        """Whether value belongs to this numeric family."""
        ...

    def add(self, a: T, b: T) -> T:
        ...

    def subtract(self, a: T, b: T) -> T:
        ...

    def multiply(self, a: T, b: T) -> T:
        ...

    def divide(self, a: T, b: T) -> T:
        """Divide, returning the type's own division-by-zero result."""
        ...

    def less(self, a: T, b: T) -> bool:
        ...

    def equal(self, a: T, b: T) -> bool:
        ...

    def is_nan(self, value: T) -> bool:
        ...


class _OperatorArithmetic:
    """Shared operator-based implementation of the ring operations."""

    def add(self, a, b):
        return a + b

    def subtract(self, a, b):
        return a - b

    def multiply(self, a, b):
        return a * b

    def less(self, a, b) -> bool:
        return bool(a < b)

    def equal(self, a, b) -> bool:
        return bool(a == b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FloatArithmetic(_OperatorArithmetic):
    """
    IEEE-754 arithmetic over Python and NumPy real numbers.

    Identities are the integers 0 and 1 so that sums of integers stay exact
    until the final true division.
    """

    name = 'float'
    zero = 0
    one = 1
    nan = math.nan

    def accepts(self, value: Any) -> bool:
        return isinstance(value, (int, float, np.integer, np.floating))

    def divide(self, a, b):
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            try:
                return a / b
            except ZeroDivisionError:
                pass
            except OverflowError:
                # Exact integer quotient beyond float range
                return math.inf if (a > 0) == (b > 0) else -math.inf
        if a != a or a == 0:
            return math.nan
        sign = 1.0 if a > 0 else -1.0
        return sign * math.copysign(math.inf, b)

    def is_nan(self, value) -> bool:
        return value != value


class FractionArithmetic(_OperatorArithmetic):
    """
    Exact rational arithmetic.

    Fractions have no NaN; dividing by zero raises ZeroDivisionError, which
    is the type's own division-by-zero result.
    """

    name = 'fraction'
    zero = Fraction(0)
    one = Fraction(1)
    nan = None

    def accepts(self, value: Any) -> bool:
        return isinstance(value, (int, Fraction, np.integer))

    def divide(self, a, b):
        return Fraction(a) / Fraction(b)

    def is_nan(self, value) -> bool:
        return False


class DecimalArithmetic(_OperatorArithmetic):
    """
    Decimal arithmetic with NaN support.

    No operation traps: 0/0 gives Decimal('NaN'), x/0 gives a signed
    Infinity, Infinity - Infinity gives NaN and a signaling NaN operand
    gives a quiet NaN, mirroring IEEE floats.
    """

    name = 'decimal'
    zero = Decimal(0)
    one = Decimal(1)
    nan = Decimal('NaN')

    def accepts(self, value: Any) -> bool:
        return isinstance(value, (int, Decimal, np.integer))

    @staticmethod
    def _quiet():
        ctx = getcontext().copy()
        ctx.traps[DivisionByZero] = False
        ctx.traps[InvalidOperation] = False
        return localcontext(ctx)

    def add(self, a, b):
        with self._quiet():
            return a + b

    def subtract(self, a, b):
        with self._quiet():
            return a - b

    def multiply(self, a, b):
        with self._quiet():
            return a * b

    def divide(self, a, b):
        with self._quiet():
            return Decimal(a) / Decimal(b)

    def less(self, a, b) -> bool:
        with self._quiet():
            return bool(a < b)

    def equal(self, a, b) -> bool:
        with self._quiet():
            return bool(a == b)

    def is_nan(self, value) -> bool:
        return isinstance(value, Decimal) and value.is_nan()


FLOAT = FloatArithmetic()
FRACTION = FractionArithmetic()
DECIMAL = DecimalArithmetic()

# Order matters: the first family that accepts a non-integer sample wins.
_FAMILIES: tuple[Arithmetic, ...] = (FLOAT, FRACTION, DECIMAL)


def _is_integral(value: Any) -> bool:
    return isinstance(value, (int, np.integer))


def resolve_arithmetic(values: Iterable[Any]) -> Arithmetic:
    """
    Pick the Arithmetic for a collection of samples.

    The first non-integer sample selects the family; every other sample must
    belong to the same family. Empty or all-integer input resolves to FLOAT.

    Args:
        values: Samples to inspect (not consumed if a sequence)

    Returns:
        The shared Arithmetic instance for the family

    Raises:
        ValidationError: If a sample has an unsupported type, or samples mix
            incompatible families (e.g. float and Fraction)
    """
    values = tuple(values)
    chosen: Arithmetic | None = None

    for i, value in enumerate(values):
        if _is_integral(value):
            continue
        for family in _FAMILIES:
            if family.accepts(value):
                chosen = family
                break
        else:
            raise ValidationError(
                f"values[{i}]: unsupported type {type(value).__name__}, "
                f"expected a real number, Fraction or Decimal"
            )
        break

    if chosen is None:
        return FLOAT

    for i, value in enumerate(values):
        if not chosen.accepts(value):
            raise ValidationError(
                f"values[{i}]: type {type(value).__name__} cannot be mixed with "
                f"{chosen.name} samples"
            )

    return chosen
