"""Popularity ("hype") estimation and forecasting from indirect signals."""
from __future__ import annotations

from .core.series import MetricPoint, TrendDirection
from .estimators import (
    CATEGORY_ARPU,
    arpu_for,
    estimate_downloads,
    estimate_revenue,
    estimate_web_traffic,
)
from .scoring import (
    calculate_growth_rate,
    calculate_hype_score,
    calculate_sentiment_score,
    calculate_volatility,
    hype_breakdown,
)
from .trends import (
    AdoptionStage,
    ForecastResult,
    HypeSpike,
    detect_hype_spike,
    forecast_trend,
    identify_adoption_stage,
)

__version__ = "0.1.0"

__all__ = [
    "MetricPoint",
    "TrendDirection",
    "CATEGORY_ARPU",
    "arpu_for",
    "estimate_downloads",
    "estimate_revenue",
    "estimate_web_traffic",
    "calculate_growth_rate",
    "calculate_hype_score",
    "calculate_sentiment_score",
    "calculate_volatility",
    "hype_breakdown",
    "AdoptionStage",
    "ForecastResult",
    "HypeSpike",
    "detect_hype_spike",
    "forecast_trend",
    "identify_adoption_stage",
]
