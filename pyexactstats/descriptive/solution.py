"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pyexactstats.core.result import Result
from pyexactstats.descriptive._interval import EmptyInterval, Interval

if TYPE_CHECKING:
    from pyexactstats.descriptive.design import PairedDesign, SampleDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    All fields are optional (None if not computed). Values keep the sample
    type (float, Fraction, Decimal), except covariances which are floats.
    """
    # Univariate
    range: Interval | EmptyInterval | None = None
    mean: Any = None
    median: Any = None

    # Bivariate
    covariance: float | None = None
    covariance_population: float | None = None

    # Missing data bookkeeping
    n: int | None = None
    n_complete: int | None = None


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'SampleDesign | PairedDesign'

    @property
    def range(self) -> Interval | EmptyInterval | None:
        """Interval spanned by the sample, or EMPTY_INTERVAL."""
        return self._result.params.range

    @property
    def mean(self) -> Any:
        return self._result.params.mean

    @property
    def median(self) -> Any:
        """Median, or None if the sample was empty."""
        return self._result.params.median

    @property
    def covariance(self) -> float | None:
        """Sample covariance (Bessel-corrected, n-1)."""
        return self._result.params.covariance

    @property
    def covariance_population(self) -> float | None:
        """Population covariance (denominator n)."""
        return self._result.params.covariance_population

    @property
    def n(self) -> int | None:
        """Number of samples (or pairs) in the design."""
        return self._result.params.n

    @property
    def n_complete(self) -> int | None:
        """Number of samples (or pairs) free of NaN."""
        return self._result.params.n_complete

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, Any]:
        return self._result.provenance

    def summary(self) -> str:
        """Plain-text listing of every computed statistic."""
        params = self._result.params
        lines = [f"Descriptive Statistics (n={params.n}, n_complete={params.n_complete}):"]

        if params.range is not None:
            if params.range.is_empty:
                lines.append("  range: empty")
            else:
                lines.append(f"  min: {params.range.lower}")
                lines.append(f"  max: {params.range.upper}")
        if params.mean is not None:
            lines.append(f"  mean: {params.mean}")
        if params.median is not None:
            lines.append(f"  median: {params.median}")
        if params.covariance is not None:
            lines.append(f"  cov: {params.covariance:.6f}")
        if params.covariance_population is not None:
            lines.append(f"  cov (population): {params.covariance_population:.6f}")

        for w in self.warnings:
            lines.append(f"  warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        params = self._result.params
        computed = [
            name for name in ('range', 'mean', 'median', 'covariance', 'covariance_population')
            if getattr(params, name) is not None
        ]
        stats_str = ", ".join(computed) if computed else "none"
        return f"DescriptiveSolution(n={params.n}, computed=[{stats_str}])"
