"""
Input validation utilities for PyExactStats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (1-D arrays become tuples of Python scalars)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
    - NaN is data, not an error: nothing here rejects it
"""

from __future__ import annotations

from typing import Any, Iterable

import numpy as np

from pyexactstats.core.exceptions import DimensionError, ValidationError


def check_sample(values: Iterable[Any], name: str) -> tuple[Any, ...]:
    """
    Validate and snapshot a one-dimensional sample.

    Accepts any iterable of scalars, a 1-D numpy array, or a pandas-like
    object exposing ``.values``. The result is a tuple owned by the caller of
    this function, so later mutation of the input cannot affect a computation.

    Args:
        values: Input to validate
        name: Parameter name for error messages

    Returns:
        tuple of samples

    Raises:
        ValidationError: If input is a string/bytes, a non-numeric array, or
            not iterable
        DimensionError: If an array input is not 1-dimensional
    """
    if isinstance(values, (str, bytes)):
        raise ValidationError(f"{name}: expected a sequence of numbers, got {type(values).__name__}")

    if hasattr(values, 'values') and not isinstance(values, (dict, np.ndarray)):
        values = values.values

    if isinstance(values, np.ndarray):
        check_1d(values, name)
        if values.dtype == object:
            return tuple(values)
        if not np.issubdtype(values.dtype, np.number) or np.issubdtype(values.dtype, np.complexfloating):
            raise ValidationError(
                f"{name}: non-numeric dtype {values.dtype}, expected real numeric data"
            )
        return tuple(values.tolist())

    try:
        return tuple(values)
    except TypeError as e:
        raise ValidationError(f"{name}: cannot convert to sequence: {e}") from e


def check_1d(array: np.ndarray, name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_consistent_length(
    *samples: tuple[Any, ...],
    names: tuple[str, ...]
) -> None:
    """
    Verify all samples have the same length.

    Args:
        *samples: Samples to check
        names: Parameter names for error messages (must match number of samples)

    Raises:
        ValueError: If number of names doesn't match number of samples
        DimensionError: If samples have inconsistent lengths
    """
    if len(samples) != len(names):
        raise ValueError(
            f"Number of samples ({len(samples)}) must match number of names ({len(names)})"
        )

    if len(samples) < 2:
        return

    lengths = [len(s) for s in samples]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_pairs(pairs: tuple[Any, ...], name: str) -> None:
    """
    Verify every element is a 2-item pair.

    Args:
        pairs: Snapshot produced by check_sample
        name: Parameter name for error messages

    Raises:
        ValidationError: If an element is not a sequence of exactly two items
    """
    for i, item in enumerate(pairs):
        try:
            size = len(item)
        except TypeError:
            raise ValidationError(
                f"{name}[{i}]: expected a pair, got {type(item).__name__}"
            ) from None
        if size != 2:
            raise ValidationError(
                f"{name}[{i}]: expected a pair, got {size} items"
            )

