"""Detection of abnormal short-window growth spikes."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..core.series import MetricPoint, mean

logger = logging.getLogger(__name__)

SPIKE_WINDOW = 7


@dataclass(frozen=True)
class HypeSpike:
    detected_at: date
    magnitude: float
    duration: int = SPIKE_WINDOW
    reason: str = ""


def classify_spike(magnitude: float) -> str:
    if magnitude >= 5:
        return "Viral growth"
    if magnitude >= 3:
        return "Strong momentum"
    return "Accelerated growth"


def detect_hype_spike(
    history: Sequence[MetricPoint], threshold: float = 2.0
) -> Optional[HypeSpike]:
    """Compare the last 7 points against everything before them.

    Returns ``None`` when there is no spike, including when the history has
    no baseline (7 points or fewer) or the baseline averages to zero.
    """

    if threshold <= 0:
        raise ValueError("threshold must be strictly positive")
    if len(history) <= SPIKE_WINDOW:
        logger.debug("spike detection skipped: %d points", len(history))
        return None

    baseline = history[:-SPIKE_WINDOW]
    recent = history[-SPIKE_WINDOW:]
    baseline_avg = mean(baseline)
    if baseline_avg <= 0:
        logger.debug("spike detection skipped: zero baseline")
        return None

    magnitude = mean(recent) / baseline_avg
    if magnitude < threshold:
        return None
    return HypeSpike(
        detected_at=recent[-1].date,
        magnitude=magnitude,
        duration=SPIKE_WINDOW,
        reason=classify_spike(magnitude),
    )
