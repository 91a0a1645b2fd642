"""Review sentiment score in ``[-1, 1]``."""
from __future__ import annotations

from typing import Optional, Sequence


def calculate_sentiment_score(
    rating: float,
    review_count: int = 0,
    rating_distribution: Optional[Sequence[int]] = None,
) -> float:
    """Map the average rating onto ``[-1, 1]`` and damp it by polarization.

    ``rating_distribution`` holds the 1 to 5 star counts.  When present, the
    share of 1 and 5 star reviews lowers the score by up to 30%.  An
    all-zero distribution leaves the base score unchanged.  ``review_count``
    does not affect the result.

    A distribution that does not hold exactly 5 counts, or holds a negative
    count, is a caller error and raises ``ValueError`` rather than falling
    back to the base score.
    """

    if not 0 <= rating <= 5:
        raise ValueError("rating must be within [0, 5]")
    base = (rating - 3) / 2
    if rating_distribution is None:
        return base

    if len(rating_distribution) != 5:
        raise ValueError("rating_distribution must hold exactly 5 counts")
    if any(count < 0 for count in rating_distribution):
        raise ValueError("rating_distribution counts must be non-negative")
    total = sum(rating_distribution)
    if total == 0:
        return base
    polarization = (rating_distribution[0] + rating_distribution[4]) / total
    return base * (1 - polarization * 0.3)
