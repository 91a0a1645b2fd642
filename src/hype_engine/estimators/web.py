"""Monthly traffic estimator for web products."""
from __future__ import annotations

import math

from ..core.series import round_half_up

MIN_MONTHLY_VISITS = 1000


def estimate_web_traffic(
    backlinks: int,
    referring_domains: int,
    top_keywords: int,
    github_stars: int = 0,
    product_hunt_votes: int = 0,
    technologies: int = 0,
) -> int:
    """Estimate monthly visits as a sum of independent factors.

    The factors do not interact; the total is floored at
    ``MIN_MONTHLY_VISITS``.
    """

    counts = {
        "backlinks": backlinks,
        "referring_domains": referring_domains,
        "top_keywords": top_keywords,
        "github_stars": github_stars,
        "product_hunt_votes": product_hunt_votes,
        "technologies": technologies,
    }
    negative = [name for name, count in counts.items() if count < 0]
    if negative:
        raise ValueError(f"counts must be non-negative: {', '.join(negative)}")

    backlink_factor = math.sqrt(backlinks) * 500
    domain_factor = referring_domains * 1000
    keyword_factor = top_keywords * 800
    community_factor = github_stars * 50 + product_hunt_votes * 200
    tech_factor = technologies * 500
    visits = backlink_factor + domain_factor + keyword_factor + community_factor + tech_factor
    return round_half_up(max(MIN_MONTHLY_VISITS, visits))
