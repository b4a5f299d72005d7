"""
Pairing utilities for the bivariate statistics.

Paired observations arrive in three shapes: two equal-length sequences, one
sequence of (x, y) pairs, or one sequence of items mapped to pairs by a
projection. Everything is reduced to the first shape here.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

import numpy as np

from pyexactstats.core.exceptions import DimensionError
from pyexactstats.core.validation import (
    check_consistent_length, check_pairs, check_sample,
)


def unzip(pairs: Iterable[Any], name: str = 'pairs') -> tuple[tuple[Any, ...], tuple[Any, ...]]:
    """
    Split a sequence of (x, y) pairs into an x sample and a y sample.

    An (n, 2) numpy array is accepted as n pairs.

    Raises:
        DimensionError: If an array argument is not of shape (n, 2)
        ValidationError: If an element is not a pair
    """
    if isinstance(pairs, np.ndarray):
        if pairs.ndim != 2 or pairs.shape[1] != 2:
            raise DimensionError(
                f"{name}: expected array of shape (n, 2), got {pairs.shape}"
            )
        return check_sample(pairs[:, 0], f"{name}[:, 0]"), check_sample(pairs[:, 1], f"{name}[:, 1]")

    snapshot = check_sample(pairs, name)
    check_pairs(snapshot, name)
    xs = tuple(p[0] for p in snapshot)
    ys = tuple(p[1] for p in snapshot)
    return xs, ys


def project(f: Callable[[Any], Any], items: Iterable[Any]) -> list[Any]:
    """Apply f to every item, producing the pairs to unzip."""
    return [f(item) for item in items]


def zip_samples(
    x: Iterable[Any],
    y: Iterable[Any],
) -> tuple[tuple[Any, ...], tuple[Any, ...]]:
    """
    Snapshot two paired samples and check they have the same length.

    Raises:
        DimensionError: If the samples differ in length
    """
    xs = check_sample(x, 'x')
    ys = check_sample(y, 'y')
    check_consistent_length(xs, ys, names=('x', 'y'))
    return xs, ys
