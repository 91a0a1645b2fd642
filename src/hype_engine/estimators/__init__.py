"""Estimators turning indirect signals into absolute metrics."""
from __future__ import annotations

from .mobile import CATEGORY_ARPU, arpu_for, estimate_downloads, estimate_revenue
from .web import estimate_web_traffic

__all__ = [
    "CATEGORY_ARPU",
    "arpu_for",
    "estimate_downloads",
    "estimate_revenue",
    "estimate_web_traffic",
]
