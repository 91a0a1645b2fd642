"""Command line interface entry points."""
from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from ..config import get_settings
from ..core.series import TrendDirection

app = typer.Typer()


def _emit(payload: Dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, separators=(",", ":"), default=str))


def _fail(exc: Exception) -> None:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(1)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Overrides HYPE_LOG_LEVEL")
) -> None:
    """Estimate and forecast product popularity from indirect signals."""

    level = (log_level or get_settings().log_level).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command("downloads")
def downloads(
    category_rank: int = typer.Option(..., "--rank"),
    review_count: int = typer.Option(0, "--reviews"),
    rating: float = typer.Option(..., "--rating"),
    days_since_launch: int = typer.Option(0, "--age-days"),
) -> None:
    """Estimate downloads of a mobile app."""

    from ..estimators.mobile import estimate_downloads

    try:
        value = estimate_downloads(category_rank, review_count, rating, days_since_launch)
    except ValueError as exc:
        _fail(exc)
    _emit({"estimated_downloads": value})


@app.command("revenue")
def revenue(
    estimated_downloads: float = typer.Option(..., "--downloads"),
    category: str = typer.Option("default", "--category"),
    rating: float = typer.Option(..., "--rating"),
    in_app_purchases: bool = typer.Option(True, "--iap/--no-iap"),
) -> None:
    """Estimate monthly revenue of a mobile app."""

    from ..estimators.mobile import estimate_revenue

    try:
        value = estimate_revenue(estimated_downloads, category, rating, in_app_purchases)
    except ValueError as exc:
        _fail(exc)
    _emit({"estimated_revenue": value})


@app.command("traffic")
def traffic(
    backlinks: int = typer.Option(0, "--backlinks"),
    referring_domains: int = typer.Option(0, "--domains"),
    top_keywords: int = typer.Option(0, "--keywords"),
    github_stars: int = typer.Option(0, "--github-stars"),
    product_hunt_votes: int = typer.Option(0, "--product-hunt-votes"),
    technologies: int = typer.Option(0, "--technologies"),
) -> None:
    """Estimate monthly visits of a web product."""

    from ..estimators.web import estimate_web_traffic

    try:
        value = estimate_web_traffic(
            backlinks,
            referring_domains,
            top_keywords,
            github_stars,
            product_hunt_votes,
            technologies,
        )
    except ValueError as exc:
        _fail(exc)
    _emit({"estimated_traffic": value})


@app.command("hype-score")
def hype_score(
    growth_30d: float = typer.Option(0.0, "--growth-30d"),
    growth_7d: float = typer.Option(0.0, "--growth-7d"),
    review_velocity: float = typer.Option(0.0, "--review-velocity"),
    social_mentions: float = typer.Option(0.0, "--mentions"),
    volatility: float = typer.Option(0.0, "--volatility"),
) -> None:
    """Compute the 0-100 hype score and its sub-scores."""

    from dataclasses import asdict

    from ..scoring.hype import hype_breakdown

    try:
        breakdown = hype_breakdown(growth_30d, growth_7d, review_velocity, social_mentions, volatility)
    except ValueError as exc:
        _fail(exc)
    _emit(asdict(breakdown))


@app.command("forecast")
def forecast(
    history: Path = typer.Option(..., "--history", exists=True, file_okay=True, dir_okay=False),
    days_ahead: Optional[int] = typer.Option(None, "--days-ahead"),
) -> None:
    """Project a JSON history file forward."""

    from ..core.series import load_history
    from ..trends.forecast import forecast_trend

    if days_ahead is None:
        days_ahead = get_settings().forecast_days
    try:
        result = forecast_trend(load_history(history), days_ahead)
    except ValueError as exc:
        _fail(exc)
    _emit({"forecast": result.forecast, "confidence": result.confidence, "trend": result.trend.value})


@app.command("spike")
def spike(
    history: Path = typer.Option(..., "--history", exists=True, file_okay=True, dir_okay=False),
    threshold: Optional[float] = typer.Option(None, "--threshold"),
) -> None:
    """Detect a growth spike in a JSON history file."""

    from dataclasses import asdict

    from ..core.series import load_history
    from ..trends.spikes import detect_hype_spike

    if threshold is None:
        threshold = get_settings().spike_threshold
    try:
        found = detect_hype_spike(load_history(history), threshold)
    except ValueError as exc:
        _fail(exc)
    _emit({"spike": asdict(found) if found else None})


@app.command("analyze")
def analyze(
    spec: Path = typer.Option(..., "--spec", exists=True, file_okay=True, dir_okay=False)
) -> None:
    """Analyze a product described by a JSON signals file."""

    from pydantic import TypeAdapter, ValidationError

    from ..analysis.runner import analyze_product
    from ..api.schemas import ProductSignals

    try:
        signals = TypeAdapter(ProductSignals).validate_json(Path(spec).read_text())
        report = analyze_product(signals)
    except (ValidationError, ValueError) as exc:
        _fail(exc)
    typer.echo(report.model_dump_json())


@app.command("generate")
def generate(
    base_value: float = typer.Option(..., "--base-value"),
    days: int = typer.Option(30, "--days"),
    volatility: float = typer.Option(0.1, "--volatility"),
    trend: TrendDirection = typer.Option(TrendDirection.UP, "--trend"),
    today: Optional[str] = typer.Option(None, "--today", help="YYYY-MM-DD, defaults to today"),
    seed: Optional[int] = typer.Option(None, "--seed"),
    csv: bool = typer.Option(False, "--csv/--json", help="Print CSV instead of JSON"),
) -> None:
    """Print a synthetic history."""

    from ..core.series import history_frame
    from ..core.synthetic import generate_history

    end = date.fromisoformat(today) if today else date.today()
    points = generate_history(base_value, days, volatility, trend.value, end, seed)
    if csv:
        typer.echo(history_frame(points).to_csv(date_format="%Y-%m-%d"), nl=False)
    else:
        typer.echo(json.dumps([p.to_dict() for p in points]))


if __name__ == "__main__":
    app()
