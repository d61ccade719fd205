"""Environmental and operating figures for a single route."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ...models.domain import Route
from .. import emissions as model
from ..geospatial import bezier_path, haversine_km

# An unoptimized lane is taken to be 25% longer than the current one
UNOPTIMIZED_DISTANCE_FACTOR = 1.25
PATH_POINTS = 20


@dataclass(slots=True)
class RouteImpact:
    route_id: int
    emissions_tons: float
    baseline_emissions_tons: float
    emissions_reduction_pct: float
    fuel_liters: float
    cost_usd: float
    travel_time_hours: float
    trees_equivalent: int
    environmental_score: int
    great_circle_km: Optional[float]
    path: List[tuple[float, float]]


def route_impact(route: Route, path_points: int = PATH_POINTS) -> RouteImpact:
    current = model.emissions(route.distance, route.transport_type)
    baseline = model.emissions(route.distance * UNOPTIMIZED_DISTANCE_FACTOR, route.transport_type)
    reduction = (baseline - current) / baseline * 100 if baseline > 0 else 0.0

    great_circle_km = None
    path: List[tuple[float, float]] = []
    if len(route.coordinates) >= 2:
        (lon1, lat1), (lon2, lat2) = route.coordinates[0][:2], route.coordinates[-1][:2]
        great_circle_km = haversine_km(lat1, lon1, lat2, lon2)
        path = bezier_path((lon1, lat1), (lon2, lat2), path_points)

    return RouteImpact(
        route_id=route.id,
        emissions_tons=current,
        baseline_emissions_tons=baseline,
        emissions_reduction_pct=reduction,
        fuel_liters=model.fuel(route.distance, route.transport_type),
        cost_usd=model.cost(route.distance, route.transport_type),
        travel_time_hours=model.travel_time(route.distance, route.transport_type),
        trees_equivalent=model.trees_equivalent(route.co2_saved),
        environmental_score=model.environmental_impact_score(route.co2_saved, route.distance),
        great_circle_km=great_circle_km,
        path=path,
    )
