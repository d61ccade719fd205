"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from ...errors import ProviderFailure
from ...models.domain import Route

PROVIDER = "provider"
SIMULATED = "simulated"


@dataclass(slots=True)
class DirectionsRoute:
    """One candidate path returned by the directions provider."""

    distance_km: float
    duration_s: float
    polyline: str


@dataclass(slots=True)
class RouteSavings:
    distance_km: float
    duration_s: float
    percentage: float


@dataclass(slots=True)
class OptimizedDirections:
    distance_km: float
    duration_s: float
    polyline: str
    coordinates: List[tuple[float, float]]
    savings: RouteSavings


@dataclass(slots=True)
class ProviderSuccess:
    directions: OptimizedDirections


@dataclass(slots=True)
class ProviderFailed:
    reason: ProviderFailure
    detail: str

    @property
    def message(self) -> str:
        return self.reason.summary


ProviderOutcome = Union[ProviderSuccess, ProviderFailed]


@dataclass(slots=True)
class Estimate:
    """Revised figures for a route before they are persisted."""

    distance: float
    efficiency: float
    co2_saved: float
    co2_delta: float
    time_savings: Optional[float] = None


@dataclass(slots=True)
class OptimizationDetails:
    distance_reduction: float
    efficiency_improvement: float
    additional_co2_saved: float
    time_savings: Optional[float] = None


@dataclass(slots=True)
class OptimizationResult:
    route: Route
    details: OptimizationDetails
    source: str
    polyline: Optional[str] = None
    failure: Optional[ProviderFailed] = None

    @property
    def uses_fallback(self) -> bool:
        return self.source == SIMULATED
