"""Domain records held by the in-memory store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass(slots=True)
class Route:
    """A shipping lane between two places, with its current optimization state."""

    id: int
    name: str
    origin: str
    destination: str
    distance: float
    transport_type: str
    efficiency: float
    co2_saved: float
    status: str
    duration: float
    optimized: bool = False
    coordinates: List[List[float]] = field(default_factory=list)


@dataclass(slots=True)
class CO2Saving:
    id: int
    month: str
    year: int
    amount: float
    target: float


@dataclass(slots=True)
class DemandPrediction:
    id: int
    region: str
    percentage_change: float
    confidence: str
    predicted_at: datetime


@dataclass(slots=True)
class RoutePrediction:
    id: int
    route: str
    percentage_change: float
    confidence: float


@dataclass(slots=True)
class DashboardStats:
    """Single-row aggregate shown in the dashboard header cards."""

    id: int
    co2_savings: float
    route_efficiency: float
    cost_savings: float
    active_shipments: int
    updated_at: datetime
