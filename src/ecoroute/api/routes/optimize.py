"""Route optimization endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from ...errors import NotFoundError
from ...persistence.memory import InMemoryStore
from ...schemas.routes import (
    FallbackErrorModel,
    OptimizationDetailsModel,
    OptimizeRouteRequest,
    OptimizeRouteResponse,
    RouteModel,
)
from ...services.routing.directions_client import DirectionsClient
from ...services.routing.models import OptimizationResult
from ...services.routing.service import optimize_route
from ..dependencies import get_directions_client, get_store

router = APIRouter(tags=["optimization"])


def _to_response(result: OptimizationResult) -> OptimizeRouteResponse:
    error = None
    if result.failure is not None:
        error = FallbackErrorModel(
            message=result.failure.message,
            needs_api_setup=result.failure.reason.needs_api_setup,
            details=result.failure.detail,
        )
    return OptimizeRouteResponse(
        success=True,
        route=RouteModel.model_validate(result.route),
        optimization_details=OptimizationDetailsModel.model_validate(result.details),
        uses_fallback=True if result.uses_fallback else None,
        polyline=result.polyline,
        error=error,
    )


@router.post(
    "/optimize-route",
    response_model=OptimizeRouteResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def optimize(
    payload: OptimizeRouteRequest,
    store: InMemoryStore = Depends(get_store),
    client: DirectionsClient | None = Depends(get_directions_client),
) -> OptimizeRouteResponse:
    """Optimize a route, falling back to the simulated estimator when directions are unavailable."""
    try:
        result = optimize_route(
            store,
            client,
            payload.route_id,
            optimization_level=payload.optimization_level,
            co2_priority=payload.co2_priority,
        )
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _to_response(result)
