"""Route and optimization request/response schemas."""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional

from pydantic import Field

from .common import CamelModel

RouteStatus = Literal["Active", "Delayed", "Planning", "Completed"]
CO2Priority = Literal["Low", "Medium", "High"]
# [longitude, latitude]
Coordinate = Annotated[List[float], Field(min_length=2, max_length=2)]


class RouteBase(CamelModel):
    name: str = Field(..., min_length=1)
    origin: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    distance: float = Field(..., ge=0, description="Kilometers")
    transport_type: str = Field(..., min_length=1, description="Air, Ground, Maritime, Ground/Air, ...")
    efficiency: float = Field(..., ge=0, le=100)
    co2_saved: float = Field(..., ge=0, description="Metric tons")
    status: RouteStatus
    duration: float = Field(..., ge=0, description="Hours")
    optimized: bool = False
    coordinates: List[Coordinate] = Field(..., min_length=2)


class RouteCreate(RouteBase):
    pass


class RouteUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    origin: Optional[str] = Field(None, min_length=1)
    destination: Optional[str] = Field(None, min_length=1)
    distance: Optional[float] = Field(None, ge=0)
    transport_type: Optional[str] = Field(None, min_length=1)
    efficiency: Optional[float] = Field(None, ge=0, le=100)
    co2_saved: Optional[float] = Field(None, ge=0)
    status: Optional[RouteStatus] = None
    duration: Optional[float] = Field(None, ge=0)
    optimized: Optional[bool] = None
    coordinates: Optional[List[Coordinate]] = Field(None, min_length=2)


class RouteModel(RouteBase):
    id: int


class OptimizeRouteRequest(CamelModel):
    route_id: int = Field(..., ge=1)
    optimization_level: float = Field(85, ge=0, le=100)
    co2_priority: CO2Priority = "High"


class OptimizationDetailsModel(CamelModel):
    distance_reduction: float
    efficiency_improvement: float
    additional_co2_saved: float = Field(..., alias="additionalCO2Saved")
    time_savings: Optional[float] = Field(None, description="Seconds saved against the provider's default route")


class FallbackErrorModel(CamelModel):
    message: str
    needs_api_setup: bool
    details: str


class OptimizeRouteResponse(CamelModel):
    success: bool = True
    route: RouteModel
    optimization_details: OptimizationDetailsModel
    uses_fallback: Optional[bool] = None
    polyline: Optional[str] = None
    error: Optional[FallbackErrorModel] = None


class RouteImpactModel(CamelModel):
    route_id: int
    emissions_tons: float
    baseline_emissions_tons: float
    emissions_reduction_pct: float
    fuel_liters: float
    cost_usd: float
    travel_time_hours: float
    trees_equivalent: int
    environmental_score: int = Field(..., ge=0, le=100)
    great_circle_km: Optional[float] = None
    path: List[Coordinate]
