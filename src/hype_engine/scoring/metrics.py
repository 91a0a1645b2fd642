"""Volatility and growth-rate metrics over metric histories."""
from __future__ import annotations

import math
from typing import Sequence

from ..core.series import MetricPoint, mean, std_dev


def calculate_volatility(history: Sequence[MetricPoint]) -> float:
    """Coefficient of variation of the values, capped at 1.

    Returns 0 below two points or when the mean is not positive.
    """

    if len(history) < 2:
        return 0.0
    avg = mean(history)
    if avg <= 0:
        return 0.0
    return min(1.0, std_dev(history) / avg)


def calculate_growth_rate(current_value: float, previous_value: float) -> float:
    """Percentage change from ``previous_value``, rounded to one decimal.

    A zero previous value yields 100 for any positive current value and 0
    otherwise.
    """

    if previous_value == 0:
        return 100.0 if current_value > 0 else 0.0
    growth = (current_value - previous_value) / previous_value * 100
    return math.floor(growth * 10 + 0.5) / 10


def window_growth(history: Sequence[MetricPoint], days: int) -> float:
    """Growth rate of the last point against the point ``days`` steps earlier."""

    if len(history) < 2:
        return 0.0
    start = history[max(0, len(history) - 1 - days)]
    return calculate_growth_rate(history[-1].value, start.value)


__all__ = ["calculate_volatility", "calculate_growth_rate", "window_growth"]
