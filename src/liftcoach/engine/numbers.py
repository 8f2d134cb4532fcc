"""Numeric helpers shared by the metric calculators."""

import math
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal


def mean(values: Iterable[float]) -> float | None:
    """Arithmetic mean, or None for no values."""
    values = list(values)
    if not values:
        return None
    return sum(values) / len(values)


def percent_change(current: float | None, previous: float | None) -> float | None:
    """Percentage change from ``previous`` to ``current``.

    None when either side is missing or the baseline is not positive.
    """
    if current is None or previous is None or previous <= 0:
        return None
    return (current - previous) / previous * 100


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return math.floor(value + 0.5)


def as_percent(ratio: float) -> int:
    """A 0-1 ratio as a whole percentage (0.875 -> 88)."""
    return round_half_up(ratio * 100)


def fixed(value: float, digits: int = 1) -> str:
    """Format with ``digits`` decimals, rounding halves away from zero (8.25 -> "8.3")."""
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def signed(value: float, digits: int = 1) -> str:
    """Format with an explicit plus sign for positive values."""
    text = fixed(value, digits)
    return f"+{text}" if value > 0 else text


def ratio(completed: int, planned: int) -> float:
    """Completed over planned, 0 when nothing was planned and capped at 1."""
    if planned <= 0:
        return 0.0
    return min(completed / planned, 1.0)
