"""Orchestration of the engine into product reports and insights."""
from __future__ import annotations

from .insights import category_insights, comparison_metrics
from .runner import analyze_mobile_app, analyze_product, analyze_web_app, trend_analysis

__all__ = [
    "analyze_mobile_app",
    "analyze_product",
    "analyze_web_app",
    "trend_analysis",
    "category_insights",
    "comparison_metrics",
]
