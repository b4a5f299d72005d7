"""
Generic result container for all PyExactStats computations.

The Result class provides a standardized envelope that all domain-specific
results use. This enables shared tooling for timing, diagnostics and
reproducibility while allowing domains to define their own parameter structures.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (statistics computed, missing-data policy)
    - timing is optional (don't burden unit tests)
    - provenance for reproducibility (versions, algorithm)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, Any]:
    """Generate minimal provenance metadata."""
    import pyexactstats
    provenance = {
        'pyexactstats_version': pyexactstats.__version__,
    }
    try:
        import numpy as np
        provenance['numpy_version'] = np.__version__
    except ImportError:
        pass
    return provenance


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (median, mean, covariance, etc.)
        info: Structured metadata (statistics computed, use= policy)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Reproducibility metadata (versions, algorithm)

    Examples:
        >>> Result(
        ...     params=DescriptiveParams(median=2.5),
        ...     info={'computed': ['median'], 'use': 'everything'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_descriptive'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
