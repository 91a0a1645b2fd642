"""Trend analyzers: spikes, forecasts and adoption stages."""
from __future__ import annotations

from .adoption import AdoptionStage, identify_adoption_stage
from .forecast import ForecastResult, fit_linear, forecast_trend
from .spikes import HypeSpike, detect_hype_spike

__all__ = [
    "AdoptionStage",
    "identify_adoption_stage",
    "ForecastResult",
    "fit_linear",
    "forecast_trend",
    "HypeSpike",
    "detect_hype_spike",
]
