from __future__ import annotations

import math
from typing import Iterable


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up.

    Scores are compared against integer thresholds, so ``round(62.5)`` must be
    63 rather than Python's banker's-rounded 62.
    """
    return int(math.floor(value + 0.5))


def clamp_score(value: float, lower: float = 0, upper: float = 100) -> float:
    return max(lower, min(upper, value))


def safe_mean(values: Iterable[float]) -> float | None:
    items = list(values)
    if not items:
        return None
    return sum(items) / len(items)

