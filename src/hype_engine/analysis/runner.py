"""Thread the pure estimators and analyzers into per-product reports."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence, Union

from ..api import schemas
from ..config import get_settings
from ..core.series import MetricPoint, validate_history
from ..estimators.mobile import estimate_downloads, estimate_revenue
from ..estimators.web import estimate_web_traffic
from ..scoring.hype import hype_breakdown
from ..scoring.metrics import calculate_volatility, window_growth
from ..scoring.sentiment import calculate_sentiment_score
from ..trends.adoption import identify_adoption_stage
from ..trends.forecast import forecast_trend
from ..trends.spikes import HypeSpike, detect_hype_spike

logger = logging.getLogger(__name__)


def spike_model(spike: Optional[HypeSpike]) -> Optional[schemas.HypeSpikeModel]:
    if spike is None:
        return None
    return schemas.HypeSpikeModel(
        detected_at=spike.detected_at,
        magnitude=spike.magnitude,
        duration=spike.duration,
        reason=spike.reason,
    )


def trend_analysis(history: Sequence[MetricPoint]) -> schemas.TrendAnalysis:
    """Summarise current level, past change and 30/90 day projections."""

    short = forecast_trend(history, 30)
    long = forecast_trend(history, 90)
    return schemas.TrendAnalysis(
        current=history[-1].value if history else 0.0,
        change_30d=window_growth(history, 30),
        change_90d=window_growth(history, 90),
        prediction_30d=short.forecast,
        prediction_90d=long.forecast,
        volatility=calculate_volatility(history),
        confidence=short.confidence,
    )


def forecast_data(metric: str, history: Sequence[MetricPoint]) -> schemas.ForecastData:
    short = forecast_trend(history, 30)
    long = forecast_trend(history, 90)
    return schemas.ForecastData(
        metric=metric,
        current=history[-1].value if history else 0.0,
        forecast_30d=short.forecast,
        forecast_90d=long.forecast,
        trend=short.trend,
        confidence=short.confidence,
        data_points=[schemas.MetricPointModel.from_point(p) for p in history],
    )


def _common_report(
    name: str,
    category: str,
    metric: str,
    history: Sequence[MetricPoint],
    review_velocity: float,
    social_mentions: float,
    threshold: Optional[float],
) -> Dict[str, Any]:
    settings = get_settings()
    if threshold is None:
        threshold = settings.spike_threshold

    growth_30d = window_growth(history, 30)
    growth_7d = window_growth(history, 7)
    volatility = calculate_volatility(history)
    breakdown = hype_breakdown(growth_30d, growth_7d, review_velocity, social_mentions, volatility)
    projection = forecast_trend(history, settings.forecast_days)
    spike = detect_hype_spike(history, threshold)
    if spike is not None:
        logger.info(
            "%s: %s spike (%.2fx) detected at %s", name, metric, spike.magnitude, spike.detected_at
        )
    if len(history) < 7:
        logger.debug("%s: %d %s points, trend defaults to stable", name, len(history), metric)

    return {
        "name": name,
        "category": category,
        "hype_score": breakdown.total,
        "hype_breakdown": schemas.HypeBreakdownModel(
            growth=breakdown.growth,
            velocity=breakdown.velocity,
            social=breakdown.social,
            volatility=breakdown.volatility,
            total=breakdown.total,
        ),
        "trend_direction": projection.trend,
        "growth_rate": growth_30d,
        "adoption_stage": identify_adoption_stage(history, growth_30d),
        "spike": spike_model(spike),
        "trend": trend_analysis(history),
        "forecast": forecast_data(metric, history),
    }


def analyze_mobile_app(
    signals: schemas.MobileAppSignals, threshold: Optional[float] = None
) -> schemas.MobileAppReport:
    history = validate_history(schemas.to_points(signals.download_history))
    downloads = estimate_downloads(
        signals.category_rank,
        signals.review_count,
        signals.rating,
        signals.days_since_launch,
    )
    revenue = estimate_revenue(
        downloads, signals.category, signals.rating, signals.has_in_app_purchases
    )
    sentiment = calculate_sentiment_score(
        signals.rating, signals.review_count, signals.rating_distribution
    )
    common = _common_report(
        signals.name,
        signals.category,
        "downloads",
        history,
        signals.review_velocity,
        signals.social_mentions,
        threshold,
    )
    return schemas.MobileAppReport(
        **common,
        estimated_downloads=downloads,
        estimated_revenue=revenue,
        sentiment_score=sentiment,
    )


def analyze_web_app(
    signals: schemas.WebAppSignals, threshold: Optional[float] = None
) -> schemas.WebAppReport:
    history = validate_history(schemas.to_points(signals.traffic_history))
    traffic = estimate_web_traffic(
        signals.backlinks,
        signals.referring_domains,
        signals.top_keywords,
        signals.github_stars,
        signals.product_hunt_votes,
        signals.technologies,
    )
    # web products have no review stream; community counts stand in for buzz
    mentions = signals.social_mentions + signals.github_stars + signals.product_hunt_votes
    common = _common_report(
        signals.name, signals.category, "traffic", history, 0.0, mentions, threshold
    )
    return schemas.WebAppReport(**common, estimated_traffic=traffic)


def analyze_product(
    signals: Union[schemas.MobileAppSignals, schemas.WebAppSignals],
    threshold: Optional[float] = None,
) -> Union[schemas.MobileAppReport, schemas.WebAppReport]:
    if isinstance(signals, schemas.MobileAppSignals):
        return analyze_mobile_app(signals, threshold)
    return analyze_web_app(signals, threshold)


__all__ = [
    "trend_analysis",
    "forecast_data",
    "analyze_mobile_app",
    "analyze_web_app",
    "analyze_product",
]
