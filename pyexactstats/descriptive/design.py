"""
Designs: immutable input wrappers for descriptive statistics.

SampleDesign wraps one sample; PairedDesign wraps two equal-length samples of
paired observations. Both snapshot the caller's data into tuples and resolve
the Arithmetic once, so backends never touch caller-owned objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from pyexactstats.core.arithmetic import Arithmetic, resolve_arithmetic
from pyexactstats.core.validation import check_sample
from pyexactstats.descriptive._pairs import project, unzip, zip_samples


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for univariate statistics (range, mean, median).

    May contain NaN. May be empty: the median backend reports that case
    rather than the design rejecting it.

    Construction:
        SampleDesign.from_sequence([3, 1, 2])
        SampleDesign.from_array(np.array([3.0, 1.0, 2.0]))
    """
    _values: tuple[Any, ...]
    _arithmetic: Arithmetic

    @classmethod
    def from_sequence(
        cls,
        values: Iterable[Any],
        *,
        arithmetic: Arithmetic | None = None,
    ) -> SampleDesign:
        """
        Build SampleDesign from any iterable of numbers.

        Parameters
        ----------
        values : iterable
            Samples. numpy arrays must be 1D; pandas-like objects are read
            through ``.values``.
        arithmetic : Arithmetic, optional
            Override the arithmetic resolved from the sample types.
        """
        snapshot = check_sample(values, 'values')
        if arithmetic is None:
            arithmetic = resolve_arithmetic(snapshot)
        return cls(_values=snapshot, _arithmetic=arithmetic)

    from_array = from_sequence

    @property
    def values(self) -> tuple[Any, ...]:
        """Samples in input order."""
        return self._values

    @property
    def arithmetic(self) -> Arithmetic:
        return self._arithmetic

    @property
    def n(self) -> int:
        """Number of samples."""
        return len(self._values)

    @property
    def n_missing(self) -> int:
        """Number of NaN samples."""
        return sum(1 for v in self._values if self._arithmetic.is_nan(v))

    @property
    def has_missing(self) -> bool:
        return any(self._arithmetic.is_nan(v) for v in self._values)

    def __repr__(self) -> str:
        missing = f", missing={self.n_missing}" if self.has_missing else ""
        return f"SampleDesign(n={self.n}, arithmetic={self._arithmetic.name}{missing})"


@dataclass(frozen=True)
class PairedDesign:
    """
    Design for bivariate statistics (covariance).

    Construction:
        PairedDesign.from_sequences(x, y)
        PairedDesign.from_pairs([(5, 2), (12, 8)])
        PairedDesign.from_projection(lambda r: (r.x, r.y), records)
    """
    _x: tuple[Any, ...]
    _y: tuple[Any, ...]
    _arithmetic: Arithmetic

    @classmethod
    def from_sequences(
        cls,
        x: Iterable[Any],
        y: Iterable[Any],
        *,
        arithmetic: Arithmetic | None = None,
    ) -> PairedDesign:
        """
        Build PairedDesign from two equal-length samples.

        Raises
        ------
        DimensionError
            If x and y differ in length.
        """
        xs, ys = zip_samples(x, y)
        return cls._build(xs, ys, arithmetic)

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Any],
        *,
        arithmetic: Arithmetic | None = None,
    ) -> PairedDesign:
        """Build PairedDesign from a sequence of (x, y) pairs or an (n, 2) array."""
        xs, ys = unzip(pairs)
        return cls._build(xs, ys, arithmetic)

    @classmethod
    def from_projection(
        cls,
        f: Callable[[Any], Any],
        items: Iterable[Any],
        *,
        arithmetic: Arithmetic | None = None,
    ) -> PairedDesign:
        """Build PairedDesign by mapping each item to an (x, y) pair with f."""
        xs, ys = unzip(project(f, items))
        return cls._build(xs, ys, arithmetic)

    @classmethod
    def _build(
        cls,
        xs: tuple[Any, ...],
        ys: tuple[Any, ...],
        arithmetic: Arithmetic | None,
    ) -> PairedDesign:
        if arithmetic is None:
            arithmetic = resolve_arithmetic(xs + ys)
        return cls(_x=xs, _y=ys, _arithmetic=arithmetic)

    @property
    def x(self) -> tuple[Any, ...]:
        return self._x

    @property
    def y(self) -> tuple[Any, ...]:
        return self._y

    @property
    def arithmetic(self) -> Arithmetic:
        return self._arithmetic

    @property
    def n(self) -> int:
        """Number of paired observations."""
        return len(self._x)

    @property
    def n_missing(self) -> int:
        """Number of pairs with NaN on either side."""
        is_nan = self._arithmetic.is_nan
        return sum(1 for xi, yi in zip(self._x, self._y) if is_nan(xi) or is_nan(yi))

    @property
    def has_missing(self) -> bool:
        return self.n_missing > 0

    def __repr__(self) -> str:
        missing = f", missing={self.n_missing}" if self.has_missing else ""
        return f"PairedDesign(n={self.n}, arithmetic={self._arithmetic.name}{missing})"
