"""
Descriptive statistics backends.

Available backends:
    CPUDescriptiveBackend: exact reference implementation in the sample arithmetic
"""

from pyexactstats.descriptive.backends.cpu import CPUDescriptiveBackend

__all__ = [
    "CPUDescriptiveBackend",
]
