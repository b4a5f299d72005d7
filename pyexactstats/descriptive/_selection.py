"""
Exact median by three-way selection.

The median is found without sorting: the active sublist is split around its
first element into less / equal / greater piles, and only the pile that must
contain the median is searched further. Two counters record how many samples
of the full input are already known to rank below (``before``) and above
(``after``) the active sublist, so the position of the median can be decided
from pile sizes alone.

Properties:
    - Exact: no interpolation other than averaging two adjacent order
      statistics for even-length input, done in the sample's own arithmetic.
    - Non-mutating: piles are fresh lists, the input is only read.
    - NaN-poisoning: any NaN anywhere makes the result that NaN.
    - Head pivot: expected linear time, quadratic worst case (e.g. sorted
      input). The loop is iterative, so worst-case input cannot exhaust the
      interpreter's recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from pyexactstats.core.arithmetic import Arithmetic
from pyexactstats.core.exceptions import SelectionInvariantError


@dataclass
class Partition:
    """
    Result of splitting a sublist around a pivot.

    ``pivot`` is the last member of ``equal`` discovered during the scan;
    every member of ``equal`` compares equal to it.
    """
    less: list[Any]
    equal: list[Any]
    greater: list[Any]
    pivot: Any

    @property
    def numlt(self) -> int:
        return len(self.less)

    @property
    def numeq(self) -> int:
        return len(self.equal)

    @property
    def numgt(self) -> int:
        return len(self.greater)


class _NaNFound(Exception):
    """Internal signal: a NaN was met while scanning."""

    def __init__(self, value: Any):
        super().__init__()
        self.value = value


def partition(pivot: Any, rest: Sequence[Any], arithmetic: Arithmetic) -> Partition:
    """
    Split ``rest`` into piles strictly less than, equal to and strictly
    greater than ``pivot``. The pivot itself goes to the equal pile.

    Each sample found equal to the current pivot joins the equal pile and
    becomes the pivot for the remainder of the scan, so duplicates keep their
    scan order.

    Raises:
        _NaNFound: On the first NaN in ``rest``; scanning stops there.
    """
    less: list[Any] = []
    equal: list[Any] = [pivot]
    greater: list[Any] = []

    for y in rest:
        if arithmetic.is_nan(y):
            raise _NaNFound(y)
        if arithmetic.less(y, pivot):
            less.append(y)
        elif arithmetic.equal(y, pivot):
            equal.append(y)
            pivot = y
        else:
            greater.append(y)

    return Partition(less=less, equal=equal, greater=greater, pivot=pivot)


def _pile_max(pile: Sequence[Any], arithmetic: Arithmetic) -> Any:
    best = pile[0]
    for y in pile[1:]:
        if arithmetic.less(best, y):
            best = y
    return best


def _pile_min(pile: Sequence[Any], arithmetic: Arithmetic) -> Any:
    best = pile[0]
    for y in pile[1:]:
        if arithmetic.less(y, best):
            best = y
    return best


def _midpoint(a: Any, b: Any, arithmetic: Arithmetic) -> Any:
    two = arithmetic.add(arithmetic.one, arithmetic.one)
    return arithmetic.divide(arithmetic.add(a, b), two)


def select_median(values: Sequence[Any], arithmetic: Arithmetic) -> Any:
    """
    Median of a non-empty sequence.

    Odd length gives the middle order statistic; even length gives the mean
    of the two central order statistics. A NaN anywhere gives that NaN.

    Args:
        values: Samples, read but never modified
        arithmetic: Capability set for the sample type

    Returns:
        The median, in the sample type's arithmetic

    Raises:
        SelectionInvariantError: If the active sublist runs empty or the
            position counters stop adding up to the input length. Callers
            must reject empty input beforehand.
    """
    total = len(values)
    before = 0
    after = 0
    xs: Sequence[Any] = values

    while True:
        if not xs:
            raise SelectionInvariantError(
                "Median selection ran out of candidates",
                before=before, after=after, expected_total=total,
            )
        if before + len(xs) + after != total:
            raise SelectionInvariantError(
                f"Position counters out of step: before={before} + "
                f"active={len(xs)} + after={after} != {total}",
                before=before, after=after, expected_total=total,
            )

        x = xs[0]
        if arithmetic.is_nan(x):
            return x

        try:
            piles = partition(x, xs[1:], arithmetic)
        except _NaNFound as found:
            return found.value

        numlt, numeq, numgt = piles.numlt, piles.numeq, piles.numgt
        below = before + numlt
        above = numeq + numgt + after

        if below > above:
            # Median lies entirely in the less pile
            xs = piles.less
            after += numeq + numgt
        elif below == above:
            # Split between the largest smaller sample and the pivot value
            return _midpoint(_pile_max(piles.less, arithmetic), x, arithmetic)
        elif below + numeq > numgt + after:
            return x
        elif below + numeq == numgt + after:
            # Split between the pivot value and the smallest larger sample
            return _midpoint(x, _pile_min(piles.greater, arithmetic), arithmetic)
        else:
            xs = piles.greater
            before += numlt + numeq
