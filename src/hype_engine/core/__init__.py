"""Time-series primitives shared across the engine."""
from __future__ import annotations

from .series import MetricPoint, TrendDirection

__all__ = ["MetricPoint", "TrendDirection"]
