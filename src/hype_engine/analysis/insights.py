"""Cross-product aggregates: category insights and comparison tables."""
from __future__ import annotations

import math
from typing import List, Optional, Sequence, Union

import pandas as pd

from ..api import schemas
from ..config import get_settings

Report = Union[schemas.MobileAppReport, schemas.WebAppReport]


def _one_decimal(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10

_COMPARISON_FIELDS = [
    ("Hype score", "hype_score", "score"),
    ("Growth rate", "growth_rate", "%"),
    ("Volatility", "volatility", "ratio"),
    ("Downloads", "estimated_downloads", "downloads"),
    ("Revenue", "estimated_revenue", "USD/month"),
    ("Traffic", "estimated_traffic", "visits/month"),
]


def reports_frame(reports: Sequence[Report]) -> pd.DataFrame:
    """One row per report with the scalar fields used for aggregation."""

    rows = []
    for report in reports:
        rows.append(
            {
                "name": report.name,
                "platform": report.platform,
                "category": report.category,
                "hype_score": report.hype_score,
                "growth_rate": report.growth_rate,
                "volatility": report.trend.volatility,
                "estimated_downloads": getattr(report, "estimated_downloads", None),
                "estimated_revenue": getattr(report, "estimated_revenue", None),
                "estimated_traffic": getattr(report, "estimated_traffic", None),
            }
        )
    columns = ["name", "platform", "category", "hype_score", "growth_rate", "volatility"]
    columns += [field for _, field, _ in _COMPARISON_FIELDS[3:]]
    return pd.DataFrame(rows, columns=columns)


def category_insights(
    reports: Sequence[Report], trending_threshold: Optional[float] = None
) -> List[schemas.CategoryInsight]:
    """Average growth and hype per category, highest growth first."""

    if trending_threshold is None:
        trending_threshold = get_settings().trending_growth
    df = reports_frame(reports)
    if df.empty:
        return []
    grouped = (
        df.groupby("category")
        .agg(
            growth_rate=("growth_rate", "mean"),
            app_count=("name", "count"),
            avg_hype_score=("hype_score", "mean"),
        )
        .sort_values(["growth_rate", "avg_hype_score"], ascending=False)
    )
    return [
        schemas.CategoryInsight(
            category=str(category),
            growth_rate=_one_decimal(float(row.growth_rate)),
            app_count=int(row.app_count),
            avg_hype_score=_one_decimal(float(row.avg_hype_score)),
            trending=bool(row.growth_rate > trending_threshold),
        )
        for category, row in grouped.iterrows()
    ]


def comparison_metrics(reports: Sequence[Report]) -> List[schemas.ComparisonMetric]:
    """Side-by-side values per metric; metrics no report carries are skipped."""

    df = reports_frame(reports)
    metrics: List[schemas.ComparisonMetric] = []
    for label, field, unit in _COMPARISON_FIELDS:
        present = df.loc[df[field].notna(), ["name", field]]
        if present.empty:
            continue
        metrics.append(
            schemas.ComparisonMetric(
                name=label,
                unit=unit,
                values=[
                    schemas.ComparisonValue(name=str(name), value=float(value))
                    for name, value in present.itertuples(index=False)
                ],
            )
        )
    return metrics
