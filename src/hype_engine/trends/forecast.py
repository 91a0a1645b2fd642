"""Linear-regression projection of a metric history."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from ..core.series import MetricPoint, TrendDirection, round_half_up

MIN_POINTS = 7
# raw value-per-day slope separating "stable" from a direction
SLOPE_TOLERANCE = 0.05


@dataclass(frozen=True)
class ForecastResult:
    forecast: int
    confidence: float
    trend: TrendDirection


def fit_linear(history: Sequence[MetricPoint]) -> Tuple[float, float, float]:
    """Least-squares fit of value against index position.

    Returns ``(slope, intercept, r_squared)``.  A history with no variance is
    fitted exactly, so its r² is 1.
    """

    n = len(history)
    if n < 2:
        raise ValueError("at least two points are required for a linear fit")
    ys = [p.value for p in history]
    sum_x = sum(range(n))
    sum_y = sum(ys)
    sum_xy = sum(x * y for x, y in enumerate(ys))
    sum_x2 = sum(x * x for x in range(n))

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_x2 - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n

    y_mean = sum_y / n
    ss_total = sum((y - y_mean) ** 2 for y in ys)
    ss_residual = sum((y - (slope * x + intercept)) ** 2 for x, y in enumerate(ys))
    if ss_total == 0:
        return slope, intercept, 1.0
    return slope, intercept, 1 - ss_residual / ss_total


def classify_slope(slope: float) -> TrendDirection:
    if slope > SLOPE_TOLERANCE:
        return TrendDirection.UP
    if slope < -SLOPE_TOLERANCE:
        return TrendDirection.DOWN
    return TrendDirection.STABLE


def forecast_trend(history: Sequence[MetricPoint], days_ahead: int = 30) -> ForecastResult:
    """Project the history ``days_ahead`` days past its end.

    Histories shorter than 7 points give a zero forecast with no confidence.
    """

    if days_ahead < 0:
        raise ValueError("days_ahead must be non-negative")
    if len(history) < MIN_POINTS:
        return ForecastResult(forecast=0, confidence=0.0, trend=TrendDirection.STABLE)

    slope, intercept, r2 = fit_linear(history)
    projected = slope * (len(history) + days_ahead) + intercept
    return ForecastResult(
        forecast=max(0, round_half_up(projected)),
        confidence=max(0.0, min(1.0, r2)),
        trend=classify_slope(slope),
    )
