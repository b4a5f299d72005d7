"""
Tests for the three-way partition and selection loop internals.
"""

import math

import pytest

from pyexactstats.core.arithmetic import FLOAT
from pyexactstats.core.exceptions import SelectionInvariantError
from pyexactstats.descriptive._selection import _NaNFound, partition, select_median


class TestPartition:

    def test_three_piles(self):
        piles = partition(5, [7, 1, 5, 9, 3], FLOAT)
        assert piles.less == [1, 3]
        assert piles.equal == [5, 5]
        assert piles.greater == [7, 9]
        assert (piles.numlt, piles.numeq, piles.numgt) == (2, 2, 2)

    def test_pivot_alone_in_equal_pile(self):
        piles = partition(4, [], FLOAT)
        assert piles.equal == [4]
        assert piles.less == []
        assert piles.greater == []

    def test_scan_order_kept_within_piles(self):
        piles = partition(0, [3, -1, 2, -5, 1], FLOAT)
        assert piles.less == [-1, -5]
        assert piles.greater == [3, 2, 1]

    def test_equal_sample_becomes_pivot(self):
        """-0.0 == 0.0, so the last equal sample seen becomes the pivot."""
        piles = partition(0.0, [-0.0], FLOAT)
        assert piles.equal == [0.0, -0.0]
        assert math.copysign(1.0, piles.pivot) == -1.0

    def test_input_not_modified(self):
        rest = [3, 1, 2]
        partition(2, rest, FLOAT)
        assert rest == [3, 1, 2]

    def test_nan_stops_scan(self):
        nan = float("nan")
        with pytest.raises(_NaNFound) as exc_info:
            partition(1.0, [2.0, nan, 0.5], FLOAT)
        assert exc_info.value.value is nan


class TestSelectMedian:

    def test_odd(self):
        assert select_median([9, 2, 4], FLOAT) == 4

    def test_even(self):
        assert select_median([9, 2, 4, 6], FLOAT) == 5.0

    def test_head_nan_returned(self):
        nan = float("nan")
        assert select_median([nan, 1.0], FLOAT) is nan

    def test_empty_is_invariant_failure(self):
        with pytest.raises(SelectionInvariantError) as exc_info:
            select_median([], FLOAT)
        assert exc_info.value.expected_total == 0
        assert exc_info.value.before == 0
        assert exc_info.value.after == 0
