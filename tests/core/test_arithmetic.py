"""
Tests for the numeric capability sets.

Validates:
    - resolve_arithmetic picks the family from sample types
    - Mixed and unsupported types are rejected
    - Division by zero follows each type's own rules
    - NaN detection per family
"""

import math
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pyexactstats.core.arithmetic import (
    Arithmetic,
    DECIMAL,
    FLOAT,
    FRACTION,
    resolve_arithmetic,
)
from pyexactstats.core.exceptions import ValidationError


class TestResolveArithmetic:

    def test_floats(self):
        assert resolve_arithmetic([1.0, 2.5]) is FLOAT

    def test_integers_resolve_to_float(self):
        assert resolve_arithmetic([1, 2, 3]) is FLOAT

    def test_empty_resolves_to_float(self):
        assert resolve_arithmetic([]) is FLOAT

    def test_numpy_scalars(self):
        assert resolve_arithmetic([np.float32(1.0), np.int64(2)]) is FLOAT

    def test_fractions(self):
        assert resolve_arithmetic([Fraction(1, 3), 2]) is FRACTION

    def test_integer_before_fraction(self):
        """Leading integers do not decide the family."""
        assert resolve_arithmetic([1, 2, Fraction(1, 2)]) is FRACTION

    def test_decimals(self):
        assert resolve_arithmetic([Decimal("1.5"), 3]) is DECIMAL

    def test_mixed_float_and_fraction_rejected(self):
        with pytest.raises(ValidationError, match="cannot be mixed"):
            resolve_arithmetic([1.5, Fraction(1, 2)])

    def test_unsupported_type_rejected(self):
        with pytest.raises(ValidationError, match="unsupported type str"):
            resolve_arithmetic([1.0, "2"])

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="unsupported type complex"):
            resolve_arithmetic([1j])


class TestProtocol:

    @pytest.mark.parametrize("arithmetic", [FLOAT, FRACTION, DECIMAL])
    def test_implementations_satisfy_protocol(self, arithmetic):
        assert isinstance(arithmetic, Arithmetic)

    @pytest.mark.parametrize("arithmetic", [FLOAT, FRACTION, DECIMAL])
    def test_identities(self, arithmetic):
        assert arithmetic.add(arithmetic.zero, arithmetic.one) == 1
        assert arithmetic.multiply(arithmetic.one, arithmetic.one) == 1


class TestFloatArithmetic:

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(FLOAT.divide(0, 0))

    def test_positive_over_zero_is_inf(self):
        assert FLOAT.divide(1.0, 0) == math.inf

    def test_negative_over_zero_is_negative_inf(self):
        assert FLOAT.divide(-2, 0) == -math.inf

    def test_numpy_zero_division(self):
        assert math.isnan(FLOAT.divide(np.float64(0.0), np.float64(0.0)))

    def test_integer_true_division(self):
        assert FLOAT.divide(5, 2) == 2.5

    def test_integer_quotient_beyond_float_range_is_inf(self):
        assert FLOAT.divide(10**400, 2) == math.inf
        assert FLOAT.divide(-(10**400), 2) == -math.inf
        assert FLOAT.divide(10**400, -2) == -math.inf

    def test_huge_integer_over_zero(self):
        assert FLOAT.divide(10**400, 0) == math.inf

    def test_signed_zero_divisor(self):
        assert FLOAT.divide(1.0, -0.0) == -math.inf

    def test_is_nan(self):
        assert FLOAT.is_nan(math.nan)
        assert FLOAT.is_nan(np.float32("nan"))
        assert not FLOAT.is_nan(1.0)
        assert not FLOAT.is_nan(3)


class TestFractionArithmetic:

    def test_exact_division(self):
        assert FRACTION.divide(Fraction(1), 3) == Fraction(1, 3)

    def test_division_by_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            FRACTION.divide(FRACTION.zero, FRACTION.zero)

    def test_has_no_nan(self):
        assert FRACTION.nan is None
        assert not FRACTION.is_nan(Fraction(1, 2))


class TestDecimalArithmetic:

    def test_zero_over_zero_is_nan(self):
        assert DECIMAL.divide(Decimal(0), Decimal(0)).is_nan()

    def test_positive_over_zero_is_infinity(self):
        assert DECIMAL.divide(Decimal(1), 0) == Decimal("Infinity")

    def test_is_nan(self):
        assert DECIMAL.is_nan(Decimal("NaN"))
        assert not DECIMAL.is_nan(Decimal("1.5"))
        assert not DECIMAL.is_nan(2)
        assert DECIMAL.is_nan(Decimal("sNaN"))

    def test_signaling_nan_operands_do_not_trap(self):
        snan = Decimal("sNaN")
        assert DECIMAL.add(Decimal(1), snan).is_qnan()
        assert DECIMAL.subtract(snan, Decimal(1)).is_qnan()
        assert DECIMAL.multiply(Decimal(2), snan).is_qnan()
        assert DECIMAL.divide(snan, Decimal(2)).is_qnan()

    def test_opposite_infinities_sum_to_nan(self):
        inf = Decimal("Infinity")
        assert DECIMAL.add(inf, -inf).is_nan()
        assert DECIMAL.subtract(inf, inf).is_nan()
        assert DECIMAL.multiply(inf, Decimal(0)).is_nan()

    def test_comparisons_with_nan_are_false(self):
        assert not DECIMAL.less(Decimal("NaN"), Decimal(1))
        assert not DECIMAL.equal(Decimal("sNaN"), Decimal(1))
