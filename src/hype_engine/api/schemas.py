"""Request/response models shared by the runner, the CLI and the HTTP API."""
from __future__ import annotations

import datetime as dt
from typing import Annotated, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from ..core.series import MetricPoint, TrendDirection
from ..trends.adoption import AdoptionStage


class MetricPointModel(BaseModel):
    """One daily sample, ``{"date": "YYYY-MM-DD", "value": n}``."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    value: float = Field(ge=0)

    def to_point(self) -> MetricPoint:
        return MetricPoint(date=self.date, value=self.value)

    @classmethod
    def from_point(cls, point: MetricPoint) -> "MetricPointModel":
        return cls(date=point.date, value=point.value)


def to_points(models: Sequence[MetricPointModel]) -> tuple[MetricPoint, ...]:
    return tuple(m.to_point() for m in models)


RatingDistribution = Annotated[List[NonNegativeInt], Field(min_length=5, max_length=5)]


class MobileAppSignals(BaseModel):
    """Indirect signals collected for a mobile app."""

    platform: Literal["mobile"] = "mobile"
    name: str
    category: str = "default"
    category_rank: int = Field(gt=0)
    review_count: int = Field(0, ge=0)
    rating: float = Field(ge=0, le=5)
    days_since_launch: int = Field(0, ge=0)
    has_in_app_purchases: bool = True
    review_velocity: float = Field(0.0, ge=0)
    social_mentions: int = Field(0, ge=0)
    rating_distribution: Optional[RatingDistribution] = None
    download_history: List[MetricPointModel] = Field(default_factory=list)


class WebAppSignals(BaseModel):
    """Indirect signals collected for a web product."""

    platform: Literal["web"] = "web"
    name: str
    category: str = "default"
    backlinks: int = Field(0, ge=0)
    referring_domains: int = Field(0, ge=0)
    top_keywords: int = Field(0, ge=0)
    github_stars: int = Field(0, ge=0)
    product_hunt_votes: int = Field(0, ge=0)
    technologies: int = Field(0, ge=0)
    social_mentions: int = Field(0, ge=0)
    traffic_history: List[MetricPointModel] = Field(default_factory=list)


ProductSignals = Annotated[
    Union[MobileAppSignals, WebAppSignals], Field(discriminator="platform")
]


class HypeSpikeModel(BaseModel):
    detected_at: dt.date
    magnitude: float
    duration: int
    reason: str


class HypeBreakdownModel(BaseModel):
    growth: float
    velocity: float
    social: float
    volatility: float
    total: int


class TrendAnalysis(BaseModel):
    current: float
    change_30d: float
    change_90d: float
    prediction_30d: int
    prediction_90d: int
    volatility: float = Field(ge=0, le=1)
    confidence: float = Field(ge=0, le=1)


class ForecastData(BaseModel):
    metric: str
    current: float
    forecast_30d: int
    forecast_90d: int
    trend: TrendDirection
    confidence: float = Field(ge=0, le=1)
    data_points: List[MetricPointModel] = Field(default_factory=list)


class ProductReport(BaseModel):
    name: str
    category: str
    hype_score: int = Field(ge=0, le=100)
    hype_breakdown: HypeBreakdownModel
    trend_direction: TrendDirection
    growth_rate: float
    adoption_stage: AdoptionStage
    spike: Optional[HypeSpikeModel] = None
    trend: TrendAnalysis
    forecast: ForecastData


class MobileAppReport(ProductReport):
    platform: Literal["mobile"] = "mobile"
    estimated_downloads: int
    estimated_revenue: int
    sentiment_score: float


class WebAppReport(ProductReport):
    platform: Literal["web"] = "web"
    estimated_traffic: int


ProductReportUnion = Annotated[
    Union[MobileAppReport, WebAppReport], Field(discriminator="platform")
]


class ForecastRequest(BaseModel):
    history: List[MetricPointModel]
    days_ahead: int = Field(30, ge=0)


class ForecastResponse(BaseModel):
    forecast: int
    confidence: float
    trend: TrendDirection


class SpikeRequest(BaseModel):
    history: List[MetricPointModel]
    threshold: float = Field(2.0, gt=0)


class SpikeResponse(BaseModel):
    spike: Optional[HypeSpikeModel] = None


class CategoryInsight(BaseModel):
    category: str
    growth_rate: float
    app_count: int
    avg_hype_score: float
    trending: bool


class ComparisonValue(BaseModel):
    name: str
    value: float


class ComparisonMetric(BaseModel):
    name: str
    unit: str
    values: List[ComparisonValue] = Field(default_factory=list)
