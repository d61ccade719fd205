"""Route optimization orchestration.

A provider attempt yields a ``ProviderOutcome``. Success feeds provider
distances into the estimator; failure runs the simulated estimator. Either
way the route is updated in the store and the caller gets a result, never
the provider's error.
"""

from __future__ import annotations

import logging

from ...errors import NotFoundError, ProviderError, ProviderFailure, ValidationError
from ...models.domain import Route
from ...persistence.memory import InMemoryStore
from .directions_client import DirectionsClient
from .estimator import estimate_from_provider, simulate
from .models import (
    PROVIDER,
    SIMULATED,
    Estimate,
    OptimizationDetails,
    OptimizationResult,
    ProviderFailed,
    ProviderOutcome,
    ProviderSuccess,
)

logger = logging.getLogger(__name__)

DEFAULT_OPTIMIZATION_LEVEL = 85
DEFAULT_CO2_PRIORITY = "High"
PROVIDER_TRAVEL_MODE = "driving"


def attempt_provider(
    client: DirectionsClient | None,
    route: Route,
    optimization_level: float,
) -> ProviderOutcome:
    """Ask the directions provider for a better path between the route's endpoints."""

    if client is None:
        return ProviderFailed(
            ProviderFailure.CREDENTIAL_MISSING,
            "Google Maps API key is missing. Please set the GOOGLE_MAPS_API_KEY environment variable.",
        )
    if not route.coordinates or len(route.coordinates) < 2:
        return ProviderFailed(ProviderFailure.INVALID_ROUTE, "Route coordinates are missing or invalid")

    # stored as [lon, lat]; the provider takes (lat, lon)
    origin_lon, origin_lat = route.coordinates[0][:2]
    destination_lon, destination_lat = route.coordinates[1][:2]
    try:
        directions = client.optimized_route(
            (origin_lat, origin_lon),
            (destination_lat, destination_lon),
            optimization_level,
        )
    except ProviderError as exc:
        return ProviderFailed(exc.reason, exc.detail)
    return ProviderSuccess(directions)


def _details(route: Route, estimate: Estimate) -> OptimizationDetails:
    return OptimizationDetails(
        distance_reduction=route.distance - estimate.distance,
        efficiency_improvement=estimate.efficiency - route.efficiency,
        additional_co2_saved=estimate.co2_delta,
        time_savings=estimate.time_savings,
    )


def optimize_route(
    store: InMemoryStore,
    client: DirectionsClient | None,
    route_id: int,
    optimization_level: float = DEFAULT_OPTIMIZATION_LEVEL,
    co2_priority: str = DEFAULT_CO2_PRIORITY,
) -> OptimizationResult:
    """Optimize a stored route and persist the revised figures.

    ``optimization_level`` in [0, 100] is a precondition of the estimator
    functions; this entry point checks it once so they never see other values.

    Raises:
        ValidationError: when ``optimization_level`` is outside [0, 100].
        NotFoundError: when ``route_id`` is unknown.
    """
    if not 0 <= optimization_level <= 100:
        raise ValidationError(f"optimizationLevel must be between 0 and 100, got {optimization_level}")

    route = store.get_route(route_id)
    if route is None:
        raise NotFoundError("Route not found")

    outcome = attempt_provider(client, route, optimization_level)

    if isinstance(outcome, ProviderSuccess):
        directions = outcome.directions
        estimate = estimate_from_provider(route, directions, optimization_level, co2_priority)
        changes = {
            "distance": estimate.distance,
            "efficiency": estimate.efficiency,
            "co2_saved": estimate.co2_saved,
            "optimized": True,
            "coordinates": [[lon, lat] for lon, lat in directions.coordinates],
        }
        source, polyline, failure = PROVIDER, directions.polyline, None
        logger.info(f"Route {route_id} optimized with provider directions ({estimate.distance:.1f} km)")
    else:
        estimate = simulate(route, optimization_level, co2_priority)
        changes = {
            "distance": estimate.distance,
            "efficiency": estimate.efficiency,
            "co2_saved": estimate.co2_saved,
            "optimized": True,
        }
        source, polyline, failure = SIMULATED, None, outcome
        logger.warning(
            f"Route {route_id} optimized with simulated estimator ({outcome.reason.value}): {outcome.detail}"
        )

    updated = store.update_route(route_id, changes)
    if updated is None:
        # deleted between lookup and update
        raise NotFoundError("Route not found")

    return OptimizationResult(
        route=updated,
        details=_details(route, estimate),
        source=source,
        polyline=polyline,
        failure=failure,
    )
