"""
Shared compute infrastructure for PyExactStats.

Domain-specific backends live in {domain}/backends/; this module only holds
infrastructure they share.

Submodules:
    timing: Execution timing utilities
"""

from pyexactstats.core.compute.timing import Timer

__all__ = [
    "Timer",
]
