"""Daily metric series and the basic statistics shared by the estimators.

A history is an ordered sequence of :class:`MetricPoint` values, one per
calendar day, ending "today" (the most recent point is the last element).
Functions in this package never mutate the sequences they receive.
"""
from __future__ import annotations

import json
import math
import statistics
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

import pandas as pd


class TrendDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


@dataclass(frozen=True)
class MetricPoint:
    """One sample of a scalar metric on a given day."""

    date: date
    value: float

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("MetricPoint.value must be non-negative")

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "MetricPoint":
        day = raw["date"]
        if isinstance(day, str):
            day = date.fromisoformat(day[:10])
        return cls(date=day, value=float(raw["value"]))

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date.isoformat(), "value": self.value}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going up (2.5 -> 3, -2.5 -> -2)."""

    return int(math.floor(value + 0.5))


def values(history: Iterable[MetricPoint]) -> List[float]:
    return [p.value for p in history]


def mean(history: Sequence[MetricPoint]) -> float:
    """Arithmetic mean of the values, ``0.0`` for an empty history."""

    if not history:
        return 0.0
    return float(statistics.mean(values(history)))


def variance(history: Sequence[MetricPoint]) -> float:
    """Population variance of the values, ``0.0`` below two points."""

    if len(history) < 2:
        return 0.0
    return float(statistics.pvariance(values(history)))


def std_dev(history: Sequence[MetricPoint]) -> float:
    """Population standard deviation of the values."""

    if len(history) < 2:
        return 0.0
    return float(statistics.pstdev(values(history)))


def validate_history(history: Sequence[MetricPoint]) -> Tuple[MetricPoint, ...]:
    """Return ``history`` as a tuple after checking the one-day step invariant."""

    snapshot = tuple(history)
    for prev, cur in zip(snapshot, snapshot[1:]):
        if cur.date - prev.date != timedelta(days=1):
            raise ValueError(
                f"history dates must increase by one day: {prev.date} -> {cur.date}"
            )
    return snapshot


def history_from_records(records: Iterable[Mapping[str, Any]]) -> Tuple[MetricPoint, ...]:
    return tuple(MetricPoint.from_dict(r) for r in records)


def load_history(path: str | Path) -> Tuple[MetricPoint, ...]:
    """Load a history from a JSON array of ``{"date", "value"}`` objects."""

    raw = json.loads(Path(path).read_text())
    return validate_history(history_from_records(raw))


def history_frame(history: Sequence[MetricPoint]) -> pd.DataFrame:
    """Return the history as a ``DataFrame`` indexed by date."""

    index = pd.DatetimeIndex([pd.Timestamp(p.date) for p in history], name="date")
    return pd.DataFrame({"value": values(history)}, index=index, dtype=float)


__all__ = [
    "MetricPoint",
    "TrendDirection",
    "round_half_up",
    "values",
    "mean",
    "variance",
    "std_dev",
    "validate_history",
    "history_from_records",
    "load_history",
    "history_frame",
]
