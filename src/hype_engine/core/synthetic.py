"""Synthetic metric histories for demos and tests."""
from __future__ import annotations

from datetime import date, timedelta
from typing import Literal, Optional, Tuple

import numpy as np

from .series import MetricPoint, round_half_up


def generate_history(
    base_value: float,
    days: int,
    volatility: float = 0.1,
    trend: Literal["up", "down", "stable"] = "up",
    today: Optional[date] = None,
    seed: Optional[int] = None,
) -> Tuple[MetricPoint, ...]:
    """Return ``days + 1`` daily points ending at ``today``.

    Each step compounds the trend (up to +5% a day for ``"up"``, down to -3%
    for ``"down"``) and then adds uniform noise scaled by ``volatility``.
    Pass ``seed`` for a reproducible series.
    """

    if days < 0:
        raise ValueError("days must be non-negative")
    if today is None:
        today = date.today()
    rng = np.random.default_rng(seed)
    value = float(base_value)
    points = []
    for offset in range(days, -1, -1):
        if trend == "up":
            value *= 1 + rng.random() * 0.05
        elif trend == "down":
            value *= 1 - rng.random() * 0.03
        noise = (rng.random() - 0.5) * volatility * value
        points.append(
            MetricPoint(
                date=today - timedelta(days=offset),
                value=float(max(0, round_half_up(value + noise))),
            )
        )
    return tuple(points)
