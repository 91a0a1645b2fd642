"""Adoption-curve stage classification."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

from ..core.series import MetricPoint, mean

logger = logging.getLogger(__name__)

STAGE_WINDOW = 14


class AdoptionStage(str, Enum):
    EARLY = "early"
    GROWTH = "growth"
    MATURITY = "maturity"
    DECLINE = "decline"


def acceleration(history: Sequence[MetricPoint]) -> float:
    """Relative change of the last 14-point mean over the 14 points before it.

    Returns 0 when the earlier window is empty or averages to zero.
    """

    recent = history[-STAGE_WINDOW:]
    previous = history[-2 * STAGE_WINDOW:-STAGE_WINDOW]
    previous_avg = mean(previous)
    if previous_avg == 0:
        logger.debug("acceleration undefined: empty or zero previous window")
        return 0.0
    return (mean(recent) - previous_avg) / previous_avg


def identify_adoption_stage(
    history: Sequence[MetricPoint], current_growth_rate: float
) -> AdoptionStage:
    """Classify the lifecycle stage; the first matching rule wins."""

    if len(history) < STAGE_WINDOW:
        return AdoptionStage.EARLY

    accel = acceleration(history)
    if current_growth_rate > 50 and accel > 0.2:
        return AdoptionStage.EARLY
    if current_growth_rate > 20 and accel > 0:
        return AdoptionStage.GROWTH
    if current_growth_rate > -10 and accel < 0.1:
        return AdoptionStage.MATURITY
    return AdoptionStage.DECLINE
