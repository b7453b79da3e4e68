"""Decimal precision helpers."""

from __future__ import annotations

from decimal import Decimal

from resultwise.validation import validate


def decimal_places(value: Decimal) -> int:
    """Return how many digits ``value`` carries after the decimal point.

    Trailing zeros count (``Decimal("1.50")`` has two places), matching the
    scale the value was written with.
    """
    validate.not_invalid_number(value, "value")
    exponent = value.as_tuple().exponent
    return -exponent if isinstance(exponent, int) and exponent < 0 else 0


def to_tick_size(places: int) -> Decimal:
    """Return the smallest increment with ``places`` decimal places.

    ``to_tick_size(3) == Decimal("0.001")``; ``to_tick_size(0) == Decimal(1)``.
    """
    validate.true(places >= 0, "places")
    return Decimal(1).scaleb(-places)
