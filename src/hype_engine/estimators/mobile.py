"""Download and revenue estimators for mobile apps."""
from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping

from ..core.series import round_half_up

DEFAULT_CATEGORY = "default"

CATEGORY_ARPU: Mapping[str, float] = MappingProxyType(
    {
        "Finance": 15,
        "Business": 12,
        "Productivity": 8,
        "Health & Fitness": 10,
        "Education": 7,
        "Entertainment": 5,
        "Games": 3,
        "Social": 2,
        "Utilities": 6,
        DEFAULT_CATEGORY: 5,
    }
)

# share of downloads active in a month
ACTIVE_USER_RATIO = 0.3
REVIEW_DOWNLOADS = 250


def _check_rating(rating: float) -> None:
    if not 0 <= rating <= 5:
        raise ValueError("rating must be within [0, 5]")


def arpu_for(category: str) -> float:
    """Return the ARPU for ``category``, falling back to the default entry."""

    return CATEGORY_ARPU.get(category, CATEGORY_ARPU[DEFAULT_CATEGORY])


def estimate_downloads(
    category_rank: int,
    review_count: int,
    rating: float,
    days_since_launch: int,
) -> int:
    """Estimate cumulative downloads from rank, reviews, rating and age.

    Rank, review and age factors are summed and the total is scaled by
    ``(rating / 5) ** 2``; a rating of 0 yields 0.
    """

    if category_rank <= 0:
        raise ValueError("category_rank must be strictly positive")
    if review_count < 0:
        raise ValueError("review_count must be non-negative")
    if days_since_launch < 0:
        raise ValueError("days_since_launch must be non-negative")
    _check_rating(rating)

    rank_factor = max(1.0, 10_000_000 / category_rank ** 1.5)
    review_factor = review_count * REVIEW_DOWNLOADS
    age_factor = math.sqrt(days_since_launch) * 100
    rating_multiplier = (rating / 5) ** 2
    return round_half_up((rank_factor + review_factor + age_factor) * rating_multiplier)


def estimate_revenue(
    estimated_downloads: float,
    category: str,
    rating: float,
    has_in_app_purchases: bool = True,
) -> int:
    """Estimate monthly revenue from downloads, category ARPU and rating."""

    if estimated_downloads < 0:
        raise ValueError("estimated_downloads must be non-negative")
    _check_rating(rating)

    conversion_rate = 0.03 if has_in_app_purchases else 0.01
    rating_multiplier = (rating / 5) ** 1.5
    active_users = estimated_downloads * ACTIVE_USER_RATIO
    paying_users = active_users * conversion_rate
    return round_half_up(paying_users * arpu_for(category) * rating_multiplier)


__all__ = [
    "CATEGORY_ARPU",
    "DEFAULT_CATEGORY",
    "arpu_for",
    "estimate_downloads",
    "estimate_revenue",
]
