"""Responsibility weighting: keep the percentages of one position description at or below 100."""

import math
from collections.abc import Iterable

TOTAL_PERCENTAGE = 100.0


def max_allowed_percentage(other_values: Iterable[float | None]) -> float:
    """Largest value a row may take given the other rows of the same PD (never below 0)."""
    others_total = sum(v or 0.0 for v in other_values)
    return max(0.0, TOTAL_PERCENTAGE - others_total)


def clamp_percentage(requested: float, others_total: float) -> float:
    """Clamp requested into [0, 100 - others_total]."""
    return min(max(requested, 0.0), max_allowed_percentage([others_total]))


def redistribute(values: list[float]) -> list[float]:
    """
    Scale values proportionally so their sum is at most 100.

    Negative entries count as 0. Lists already within the limit come back
    unchanged (apart from that floor). Scaled values are truncated to
    hundredths, never rounded up, so the result cannot exceed 100.
    """
    floored = [max(v, 0.0) for v in values]
    total = sum(floored)
    if total <= TOTAL_PERCENTAGE:
        return floored
    hundredths = [math.floor(v * TOTAL_PERCENTAGE * 100 / total) for v in floored]
    return [h / 100 for h in hundredths]
