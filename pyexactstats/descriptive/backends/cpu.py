"""
CPU reference backend for descriptive statistics.

Computes exactly in the sample's own arithmetic; only covariances are
converted to float at the end.
"""

from __future__ import annotations

from pyexactstats.core.compute.timing import Timer
from pyexactstats.core.exceptions import ValidationError
from pyexactstats.core.result import Result, _default_provenance
from pyexactstats.descriptive._aggregates import fold_covariance, fold_mean, fold_range
from pyexactstats.descriptive._missing import apply_pairwise_policy, apply_use_policy
from pyexactstats.descriptive._selection import select_median
from pyexactstats.descriptive.design import PairedDesign, SampleDesign
from pyexactstats.descriptive.solution import DescriptiveParams

SAMPLE_STATISTICS = frozenset({'range', 'mean', 'median'})
PAIRED_STATISTICS = frozenset({'cov', 'cov_population'})
ALGORITHM = 'three-way selection (head pivot)'


class CPUDescriptiveBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(
        self,
        design: SampleDesign | PairedDesign,
        *,
        compute: set[str],
        use: str = 'everything',
    ) -> Result[DescriptiveParams]:
        """
        Compute requested descriptive statistics.

        Parameters
        ----------
        design : SampleDesign or PairedDesign
        compute : set of str
            Which statistics to compute. 'range', 'mean', 'median' for a
            SampleDesign; 'cov', 'cov_population' for a PairedDesign.
        use : str
            Missing data policy, 'everything' or 'complete.obs'.

        Raises
        ------
        ValidationError
            If a requested statistic does not apply to the design type, or
            the missing data policy is unknown.
        """
        allowed = PAIRED_STATISTICS if isinstance(design, PairedDesign) else SAMPLE_STATISTICS
        unknown = set(compute) - allowed
        if unknown:
            raise ValidationError(
                f"Cannot compute {sorted(unknown)} for {type(design).__name__}. "
                f"Valid statistics: {sorted(allowed)}"
            )

        timer = Timer()
        timer.start()

        if isinstance(design, PairedDesign):
            params, warnings_list = self._solve_paired(design, compute, use, timer)
        else:
            params, warnings_list = self._solve_sample(design, compute, use, timer)

        timer.stop()

        return Result(
            params=params,
            info={'use': use, 'computed': sorted(compute), 'arithmetic': design.arithmetic.name},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
            provenance={**_default_provenance(), 'algorithm': ALGORITHM},
        )

    def _solve_sample(
        self,
        design: SampleDesign,
        compute: set[str],
        use: str,
        timer: Timer,
    ) -> tuple[DescriptiveParams, list[str]]:
        arithmetic = design.arithmetic
        warnings_list: list[str] = []

        with timer.section('missing_data'):
            values, n_complete = apply_use_policy(design.values, use, arithmetic)

        n_missing = design.n - n_complete
        if n_missing:
            if use == 'everything':
                warnings_list.append(
                    f"{n_missing} NaN sample(s) present; statistics propagate NaN"
                )
            else:
                warnings_list.append(
                    f"dropped {n_missing} NaN sample(s) under use='complete.obs'"
                )

        value_range = None
        mean = None
        median = None

        if 'range' in compute:
            with timer.section('range'):
                value_range = fold_range(values, arithmetic)

        if 'mean' in compute:
            if values or arithmetic.nan is not None:
                with timer.section('mean'):
                    mean = fold_mean(values, arithmetic)
            else:
                # 0/0 has no value in an arithmetic without NaN
                warnings_list.append(
                    f"mean is undefined for an empty {arithmetic.name} sample"
                )

        if 'median' in compute:
            if values:
                with timer.section('median'):
                    median = select_median(values, arithmetic)
            else:
                warnings_list.append("median is undefined for an empty sample")

        params = DescriptiveParams(
            range=value_range,
            mean=mean,
            median=median,
            n=design.n,
            n_complete=n_complete,
        )
        return params, warnings_list

    def _solve_paired(
        self,
        design: PairedDesign,
        compute: set[str],
        use: str,
        timer: Timer,
    ) -> tuple[DescriptiveParams, list[str]]:
        arithmetic = design.arithmetic
        warnings_list: list[str] = []

        with timer.section('missing_data'):
            x, y, n_complete = apply_pairwise_policy(design.x, design.y, use, arithmetic)

        n_missing = design.n - n_complete
        if n_missing:
            if use == 'everything':
                warnings_list.append(
                    f"{n_missing} pair(s) contain NaN; covariance propagates NaN"
                )
            else:
                warnings_list.append(
                    f"dropped {n_missing} pair(s) containing NaN under use='complete.obs'"
                )

        if 'cov' in compute and len(x) < 2:
            warnings_list.append(
                f"sample covariance needs at least 2 pairs, got {len(x)}"
            )

        covariance = None
        covariance_population = None

        if 'cov' in compute:
            with timer.section('cov'):
                covariance = fold_covariance(x, y, arithmetic, ddof=1)

        if 'cov_population' in compute:
            with timer.section('cov_population'):
                covariance_population = fold_covariance(x, y, arithmetic, ddof=0)

        params = DescriptiveParams(
            covariance=covariance,
            covariance_population=covariance_population,
            n=design.n,
            n_complete=n_complete,
        )
        return params, warnings_list
