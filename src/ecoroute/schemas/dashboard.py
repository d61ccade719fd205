"""Dashboard summary, savings history and prediction schemas."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import Field

from .common import CamelModel

Month = Literal["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
Confidence = Literal["High", "Medium", "Low"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DashboardStatsCreate(CamelModel):
    co2_savings: float = Field(..., ge=0, description="Metric tons")
    route_efficiency: float = Field(..., ge=0, le=100)
    cost_savings: float = Field(..., description="Thousands of USD")
    active_shipments: int = Field(..., ge=0)
    updated_at: datetime = Field(default_factory=_utcnow)


class DashboardStatsModel(DashboardStatsCreate):
    id: int


class CO2SavingCreate(CamelModel):
    month: Month
    year: int = Field(..., ge=1970)
    amount: float = Field(..., ge=0, description="Metric tons saved")
    target: float = Field(..., ge=0)


class CO2SavingModel(CO2SavingCreate):
    id: int


class DemandPredictionCreate(CamelModel):
    region: str = Field(..., min_length=1)
    percentage_change: float
    confidence: Confidence
    predicted_at: datetime = Field(default_factory=_utcnow)


class DemandPredictionModel(DemandPredictionCreate):
    id: int


class RoutePredictionCreate(CamelModel):
    route: str = Field(..., min_length=1)
    percentage_change: float
    confidence: float = Field(..., ge=0, le=100)


class RoutePredictionModel(RoutePredictionCreate):
    id: int
