"""
Missing data handling for describe() and describe_pairs().

NaN marks a missing sample. Two policies are supported:
- 'everything': keep NaN, so it propagates into every statistic (default)
- 'complete.obs': drop NaN samples, or pairs with NaN on either side
"""

from __future__ import annotations

from typing import Any

from pyexactstats.core.arithmetic import Arithmetic
from pyexactstats.core.exceptions import ValidationError

USE_POLICIES = ('everything', 'complete.obs')


def check_use(use: str) -> None:
    """
    Raises:
        ValidationError: If use is not a known policy
    """
    if use not in USE_POLICIES:
        raise ValidationError(
            f"Invalid use= parameter: {use!r}. "
            f"Must be 'everything' or 'complete.obs'."
        )


def apply_use_policy(
    values: tuple[Any, ...],
    use: str,
    arithmetic: Arithmetic,
) -> tuple[tuple[Any, ...], int]:
    """
    Apply missing data policy to a single sample.

    Parameters
    ----------
    values : tuple
        Samples, may contain NaN.
    use : str
        'everything' or 'complete.obs'.
    arithmetic : Arithmetic
        Used to recognise NaN.

    Returns
    -------
    clean : tuple
        For 'everything' the input unchanged; for 'complete.obs' the input
        without NaN samples.
    n_complete : int
        Number of non-NaN samples.
    """
    check_use(use)
    complete = tuple(v for v in values if not arithmetic.is_nan(v))
    if use == 'everything':
        return values, len(complete)
    if values and not complete:
        raise ValidationError(
            "No complete observations (every sample is NaN). "
            "Consider using use='everything'."
        )
    return complete, len(complete)


def apply_pairwise_policy(
    x: tuple[Any, ...],
    y: tuple[Any, ...],
    use: str,
    arithmetic: Arithmetic,
) -> tuple[tuple[Any, ...], tuple[Any, ...], int]:
    """
    Apply missing data policy to paired samples.

    Returns
    -------
    x_clean, y_clean : tuple
        Under 'complete.obs', only pairs with neither side NaN survive.
    n_complete : int
        Number of pairs with neither side NaN.
    """
    check_use(use)
    mask = [
        not (arithmetic.is_nan(xi) or arithmetic.is_nan(yi))
        for xi, yi in zip(x, y)
    ]
    n_complete = sum(mask)
    if use == 'everything':
        return x, y, n_complete
    if x and n_complete < 1:
        raise ValidationError(
            "No complete observations (every pair contains NaN). "
            "Consider using use='everything'."
        )
    x_clean = tuple(xi for xi, keep in zip(x, mask) if keep)
    y_clean = tuple(yi for yi, keep in zip(y, mask) if keep)
    return x_clean, y_clean, n_complete
