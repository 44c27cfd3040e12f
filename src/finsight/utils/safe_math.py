"""Numeric helpers shared by the analyzers."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide, returning ``default`` when the denominator is zero."""
    if denominator == 0:
        return default
    return numerator / denominator


def percentage(part: float, whole: float) -> float:
    """Return ``part`` as a percentage of ``whole``, 0 when ``whole`` is 0."""
    return safe_divide(part, whole) * 100


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def trend_slope(values: Sequence[float]) -> float:
    """Ordinary least-squares slope of ``values`` against index 0..n-1.

    Fewer than two points have no slope and return 0.
    """
    n = len(values)
    if n < 2:
        return 0.0
    sum_x = sum(range(n))
    sum_y = sum(values)
    sum_xy = sum(x * y for x, y in enumerate(values))
    sum_xx = sum(x * x for x in range(n))
    return safe_divide(n * sum_xy - sum_x * sum_y, n * sum_xx - sum_x * sum_x)
