"""Composite 0-100 hype score.

The score is the sum of four capped sub-scores whose caps add up to 100:

* growth (40): ``growth_7d * 2 + growth_30d * 0.5``, may be negative
* review velocity (25): ``reviews_per_day * 5``
* social buzz (20): ``log10(mentions + 1) * 5``
* volatility (15): ``volatility * 15``

Only the final sum is clamped to ``[0, 100]``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.series import round_half_up

GROWTH_CAP = 40.0
VELOCITY_CAP = 25.0
SOCIAL_CAP = 20.0
VOLATILITY_CAP = 15.0


@dataclass(frozen=True)
class HypeBreakdown:
    growth: float
    velocity: float
    social: float
    volatility: float
    total: int


def hype_breakdown(
    growth_rate_30d: float,
    growth_rate_7d: float,
    review_velocity: float,
    social_mentions: float,
    volatility: float,
) -> HypeBreakdown:
    """Return the four sub-scores together with the clamped total."""

    if social_mentions < 0:
        raise ValueError("social_mentions must be non-negative")

    growth = min(GROWTH_CAP, growth_rate_7d * 2 + growth_rate_30d * 0.5)
    velocity = min(VELOCITY_CAP, review_velocity * 5)
    social = min(SOCIAL_CAP, math.log10(social_mentions + 1) * 5)
    vol = min(VOLATILITY_CAP, volatility * 15)
    total = round_half_up(min(100.0, max(0.0, growth + velocity + social + vol)))
    return HypeBreakdown(
        growth=growth,
        velocity=velocity,
        social=social,
        volatility=vol,
        total=total,
    )


def calculate_hype_score(
    growth_rate_30d: float,
    growth_rate_7d: float,
    review_velocity: float,
    social_mentions: float,
    volatility: float,
) -> int:
    return hype_breakdown(
        growth_rate_30d, growth_rate_7d, review_velocity, social_mentions, volatility
    ).total
