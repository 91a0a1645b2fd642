"""Composite scorers: hype, sentiment, volatility and growth."""
from __future__ import annotations

from .hype import HypeBreakdown, calculate_hype_score, hype_breakdown
from .metrics import calculate_growth_rate, calculate_volatility, window_growth
from .sentiment import calculate_sentiment_score

__all__ = [
    "HypeBreakdown",
    "calculate_hype_score",
    "hype_breakdown",
    "calculate_growth_rate",
    "calculate_volatility",
    "window_growth",
    "calculate_sentiment_score",
]
