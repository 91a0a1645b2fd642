from __future__ import annotations

"""Settings loader backed by environment variables.

``get_settings`` reads the environment once and caches the resulting
``Settings`` object.  Tests may call ``reset_settings_cache`` to force a
reload after changing environment variables at runtime.
"""

from dataclasses import dataclass
import os
from functools import lru_cache


@dataclass
class Settings:
    spike_threshold: float = 2.0
    forecast_days: int = 30
    trending_growth: float = 50.0
    log_level: str = "WARNING"


@lru_cache()
def get_settings() -> Settings:
    """Return settings loaded from environment variables."""

    spike_threshold = float(os.getenv("HYPE_SPIKE_THRESHOLD", "2.0"))
    forecast_days = int(os.getenv("HYPE_FORECAST_DAYS", "30"))
    trending_growth = float(os.getenv("HYPE_TRENDING_GROWTH", "50.0"))
    log_level = os.getenv("HYPE_LOG_LEVEL", "WARNING").upper()
    return Settings(
        spike_threshold=spike_threshold,
        forecast_days=forecast_days,
        trending_growth=trending_growth,
        log_level=log_level,
    )


def reset_settings_cache() -> None:
    """Clear the settings cache (mainly for tests)."""

    get_settings.cache_clear()
