"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_sample: snapshotting, array conversion, rejection of bad input
    - check_1d: dimensionality
    - check_consistent_length: paired sample lengths
    - check_pairs: pair shape
"""

import math

import numpy as np
import pytest

from pyexactstats.core.exceptions import DimensionError, ValidationError
from pyexactstats.core.validation import (
    check_1d,
    check_consistent_length,
    check_pairs,
    check_sample,
)


# ═══════════════════════════════════════════════════════════════════════
# check_sample
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSample:
    """check_sample snapshots input into a tuple."""

    def test_list_to_tuple(self):
        assert check_sample([3, 1, 2], "x") == (3, 1, 2)

    def test_snapshot_is_independent(self):
        data = [1.0, 2.0]
        snapshot = check_sample(data, "x")
        data.append(3.0)
        assert snapshot == (1.0, 2.0)

    def test_generator_consumed(self):
        assert check_sample((i * 2 for i in range(3)), "x") == (0, 2, 4)

    def test_numpy_array_to_python_scalars(self):
        result = check_sample(np.array([1.5, 2.5]), "x")
        assert result == (1.5, 2.5)
        assert all(type(v) is float for v in result)

    def test_numpy_nan_preserved(self):
        result = check_sample(np.array([1.0, np.nan]), "x")
        assert math.isnan(result[1])

    def test_values_attribute_used(self):
        class Column:
            values = np.array([4.0, 5.0])

        assert check_sample(Column(), "x") == (4.0, 5.0)

    def test_2d_array_rejected(self):
        with pytest.raises(DimensionError, match="x: expected 1D array, got 2D"):
            check_sample(np.zeros((2, 2)), "x")

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="expected a sequence of numbers"):
            check_sample("123", "x")

    def test_non_numeric_dtype_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_sample(np.array(["a", "b"]), "x")

    def test_complex_dtype_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_sample(np.array([1 + 2j]), "x")

    def test_non_iterable_rejected(self):
        with pytest.raises(ValidationError, match="x: cannot convert"):
            check_sample(5, "x")


# ═══════════════════════════════════════════════════════════════════════
# check_1d / check_consistent_length / check_pairs
# ═══════════════════════════════════════════════════════════════════════


class TestCheck1d:

    def test_1d_passes(self):
        check_1d(np.array([1.0]), "x")

    def test_0d_fails(self):
        with pytest.raises(DimensionError):
            check_1d(np.array(1.0), "x")


class TestCheckConsistentLength:

    def test_same_length_passes(self):
        check_consistent_length((1, 2), (3, 4), names=("x", "y"))

    def test_different_length_fails(self):
        with pytest.raises(DimensionError, match="x=2, y=3"):
            check_consistent_length((1, 2), (3, 4, 5), names=("x", "y"))

    def test_names_mismatch_is_programming_error(self):
        with pytest.raises(ValueError):
            check_consistent_length((1,), (2,), names=("x",))

    def test_single_sample_passes(self):
        check_consistent_length((1, 2, 3), names=("x",))


class TestCheckPairs:

    def test_pairs_pass(self):
        check_pairs(((1, 2), [3, 4]), "pairs")

    def test_triple_rejected(self):
        with pytest.raises(ValidationError, match=r"pairs\[1\]: expected a pair, got 3 items"):
            check_pairs(((1, 2), (1, 2, 3)), "pairs")

    def test_scalar_rejected(self):
        with pytest.raises(ValidationError, match=r"pairs\[0\]: expected a pair, got int"):
            check_pairs((1,), "pairs")
