"""
Interval value types returned by range_().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Interval:
    """Closed interval [lower, upper] spanned by a sample."""
    lower: Any
    upper: Any

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def width(self) -> Any:
        """upper - lower, in the bounds' own arithmetic."""
        return self.upper - self.lower

    def contains(self, value: Any) -> bool:
        return bool(self.lower <= value <= self.upper)

    def __repr__(self) -> str:
        return f"Interval({self.lower!r}, {self.upper!r})"


class EmptyInterval:
    """
    The range of an empty sample.

    There is a single instance, EMPTY_INTERVAL; compare with ``is``.
    """

    _instance: EmptyInterval | None = None

    def __new__(cls) -> EmptyInterval:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_empty(self) -> bool:
        return True

    def contains(self, value: Any) -> bool:
        return False

    def __repr__(self) -> str:
        return "EmptyInterval()"


EMPTY_INTERVAL = EmptyInterval()
