from datetime import date, timedelta

import pytest
from pydantic import TypeAdapter, ValidationError

from hype_engine.analysis import insights, runner
from hype_engine.api import schemas
from hype_engine.config import get_settings, reset_settings_cache
from hype_engine.core.series import TrendDirection
from hype_engine.estimators import estimate_downloads, estimate_revenue, estimate_web_traffic
from hype_engine.trends import AdoptionStage


def make_points(values, start=date(2024, 1, 1)):
    return [
        {"date": (start + timedelta(days=i)).isoformat(), "value": v}
        for i, v in enumerate(values)
    ]


def mobile_signals(**overrides):
    raw = {
        "platform": "mobile",
        "name": "BudgetBuddy",
        "category": "Finance",
        "category_rank": 5,
        "review_count": 15230,
        "rating": 4.8,
        "days_since_launch": 500,
        "review_velocity": 2.0,
        "social_mentions": 99,
        "download_history": make_points([1000] * 23 + [3000] * 7),
    }
    raw.update(overrides)
    return schemas.MobileAppSignals.model_validate(raw)


def web_signals(**overrides):
    raw = {
        "platform": "web",
        "name": "Linear",
        "category": "Developer Tools",
        "backlinks": 10_000,
        "referring_domains": 10,
        "top_keywords": 5,
        "github_stars": 99,
        "traffic_history": make_points([500] * 28),
    }
    raw.update(overrides)
    return schemas.WebAppSignals.model_validate(raw)


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()


def test_mobile_report():
    signals = mobile_signals()
    report = runner.analyze_mobile_app(signals)
    downloads = estimate_downloads(5, 15230, 4.8, 500)
    assert report.platform == "mobile"
    assert report.estimated_downloads == downloads
    assert report.estimated_revenue == estimate_revenue(downloads, "Finance", 4.8)
    assert report.sentiment_score == pytest.approx(0.9)
    assert report.growth_rate == 200.0
    assert report.hype_breakdown.growth == 40
    assert report.hype_breakdown.velocity == 10
    assert 0 <= report.hype_score <= 100
    assert report.trend_direction == TrendDirection.UP
    assert report.adoption_stage == AdoptionStage.EARLY
    assert report.spike is not None
    assert report.spike.reason == "Strong momentum"
    assert report.trend.current == 3000.0
    assert report.forecast.metric == "downloads"
    assert len(report.forecast.data_points) == 30


def test_web_report():
    report = runner.analyze_web_app(web_signals())
    assert report.platform == "web"
    assert report.estimated_traffic == estimate_web_traffic(10_000, 10, 5, 99)
    assert report.hype_score == 10
    assert report.growth_rate == 0.0
    assert report.trend.volatility == 0.0
    assert report.trend_direction == TrendDirection.STABLE
    assert report.adoption_stage == AdoptionStage.MATURITY
    assert report.spike is None


def test_short_history_report():
    report = runner.analyze_mobile_app(mobile_signals(download_history=make_points([10, 12])))
    assert report.trend.prediction_30d == 0
    assert report.trend.confidence == 0.0
    assert report.forecast.trend == TrendDirection.STABLE
    assert report.adoption_stage == AdoptionStage.EARLY
    assert report.spike is None


def test_empty_history_report():
    report = runner.analyze_web_app(web_signals(traffic_history=[]))
    assert report.trend.current == 0.0
    assert report.hype_score == 10


def test_analyze_rejects_gaps():
    points = make_points([1] * 10)
    points[5]["date"] = "2024-03-01"
    with pytest.raises(ValueError):
        runner.analyze_mobile_app(mobile_signals(download_history=points))


def test_trend_analysis():
    history = schemas.to_points(
        [schemas.MetricPointModel.model_validate(p) for p in make_points([10, 20, 30, 40, 50, 60, 70])]
    )
    ta = runner.trend_analysis(history)
    assert ta.current == 70.0
    assert ta.change_30d == 600.0
    assert ta.prediction_30d == 380
    assert ta.prediction_90d == 980
    assert ta.confidence == 1.0


def test_spike_threshold_from_settings(monkeypatch):
    monkeypatch.setenv("HYPE_SPIKE_THRESHOLD", "4")
    reset_settings_cache()
    assert get_settings().spike_threshold == 4.0
    assert runner.analyze_mobile_app(mobile_signals()).spike is None
    assert runner.analyze_mobile_app(mobile_signals(), threshold=2.0).spike is not None


def test_signals_discriminated_union():
    adapter = TypeAdapter(schemas.ProductSignals)
    parsed = adapter.validate_python({"platform": "web", "name": "x"})
    assert isinstance(parsed, schemas.WebAppSignals)
    with pytest.raises(ValidationError):
        adapter.validate_python({"platform": "desktop", "name": "x"})
    with pytest.raises(ValidationError):
        adapter.validate_python({"platform": "mobile", "name": "x", "category_rank": 0, "rating": 4})
    with pytest.raises(ValidationError):
        mobile_signals(rating_distribution=[1, 2, 3])


def test_category_insights():
    reports = [
        runner.analyze_mobile_app(mobile_signals(name="A")),
        runner.analyze_mobile_app(mobile_signals(name="B", category="Games")),
        runner.analyze_web_app(web_signals()),
    ]
    cats = insights.category_insights(reports, trending_threshold=50)
    assert [c.category for c in cats][-1] == "Developer Tools"
    by_name = {c.category: c for c in cats}
    assert by_name["Finance"].app_count == 1
    assert by_name["Finance"].trending is True
    assert by_name["Developer Tools"].trending is False
    assert insights.category_insights([]) == []


def test_comparison_metrics():
    reports = [
        runner.analyze_mobile_app(mobile_signals(name="A")),
        runner.analyze_web_app(web_signals(name="W")),
    ]
    metrics = {m.name: m for m in insights.comparison_metrics(reports)}
    assert [v.name for v in metrics["Hype score"].values] == ["A", "W"]
    assert [v.name for v in metrics["Downloads"].values] == ["A"]
    assert [v.name for v in metrics["Traffic"].values] == ["W"]
    assert metrics["Traffic"].unit == "visits/month"


def test_category_averages_round_ties_up():
    assert insights._one_decimal(1.25) == 1.3
    assert insights._one_decimal(-1.25) == -1.2
    assert insights._one_decimal(7.0) == 7.0
