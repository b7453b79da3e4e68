"""Endpoint modes for numeric range checks."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decimal import Decimal

    type Bound = float | Decimal


class RangeEndPoints(Enum):
    """Which bounds of a ``[lower, upper]`` range are part of the range."""

    INCLUSIVE = 0
    LOWER_EXCLUSIVE = 1
    UPPER_EXCLUSIVE = 2
    EXCLUSIVE = 3

    def contains(self, value: Bound, lower: Bound, upper: Bound) -> bool:
        """Return True when ``value`` lies inside the range under this mode."""
        match self:
            case RangeEndPoints.INCLUSIVE:
                return lower <= value <= upper
            case RangeEndPoints.LOWER_EXCLUSIVE:
                return lower < value <= upper
            case RangeEndPoints.UPPER_EXCLUSIVE:
                return lower <= value < upper
            case RangeEndPoints.EXCLUSIVE:
                return lower < value < upper

    def notation(self, lower: Bound, upper: Bound) -> str:
        """Render the range in interval notation, e.g. ``(0, 3]``."""
        left = "(" if self in _LOWER_OPEN else "["
        right = ")" if self in _UPPER_OPEN else "]"
        return f"{left}{lower}, {upper}{right}"


_LOWER_OPEN = frozenset({RangeEndPoints.LOWER_EXCLUSIVE, RangeEndPoints.EXCLUSIVE})
_UPPER_OPEN = frozenset({RangeEndPoints.UPPER_EXCLUSIVE, RangeEndPoints.EXCLUSIVE})
