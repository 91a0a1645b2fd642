"""Synchronous engine helpers and their FastAPI wrappers.

The helpers are plain functions so tests and the CLI can call them
directly; the FastAPI application exposes the same capabilities over HTTP
for local development.
"""
from __future__ import annotations

from typing import Dict, List, Union

from fastapi import FastAPI, HTTPException

from ..analysis import insights
from ..analysis.runner import analyze_product, spike_model
from ..core.series import validate_history
from ..estimators.mobile import CATEGORY_ARPU
from ..trends.forecast import forecast_trend
from ..trends.spikes import detect_hype_spike
from . import schemas


def analyze(
    signals: Union[schemas.MobileAppSignals, schemas.WebAppSignals],
) -> Union[schemas.MobileAppReport, schemas.WebAppReport]:
    return analyze_product(signals)


def analyze_many(
    products: List[Union[schemas.MobileAppSignals, schemas.WebAppSignals]],
) -> Dict[str, object]:
    """Analyze several products and attach category insights and comparisons."""

    reports = [analyze_product(p) for p in products]
    return {
        "reports": reports,
        "categories": insights.category_insights(reports),
        "comparison": insights.comparison_metrics(reports),
    }


def forecast(request: schemas.ForecastRequest) -> schemas.ForecastResponse:
    history = validate_history(schemas.to_points(request.history))
    result = forecast_trend(history, request.days_ahead)
    return schemas.ForecastResponse(
        forecast=result.forecast, confidence=result.confidence, trend=result.trend
    )


def spike(request: schemas.SpikeRequest) -> schemas.SpikeResponse:
    history = validate_history(schemas.to_points(request.history))
    found = detect_hype_spike(history, request.threshold)
    return schemas.SpikeResponse(spike=spike_model(found))


def category_arpu() -> Dict[str, float]:
    return dict(CATEGORY_ARPU)


fastapi_app = FastAPI(title="Hype Engine API", version="0.1.0")


@fastapi_app.post('/analyze', response_model=schemas.ProductReportUnion)
def analyze_endpoint(signals: schemas.ProductSignals):
    """HTTP endpoint wrapping :func:`analyze`."""

    try:
        return analyze(signals)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@fastapi_app.post('/forecast', response_model=schemas.ForecastResponse)
def forecast_endpoint(request: schemas.ForecastRequest) -> schemas.ForecastResponse:
    """Project a history forward with a linear fit."""

    try:
        return forecast(request)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@fastapi_app.post('/spike', response_model=schemas.SpikeResponse)
def spike_endpoint(request: schemas.SpikeRequest) -> schemas.SpikeResponse:
    """Return the detected spike, if any."""

    try:
        return spike(request)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@fastapi_app.get('/categories/arpu', response_model=Dict[str, float])
def category_arpu_endpoint() -> Dict[str, float]:
    """Return the category ARPU table, including the default entry."""

    return category_arpu()
