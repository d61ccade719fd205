"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...services.routing.directions_client import DirectionsClient, check_health
from ..dependencies import get_directions_client

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/directions", status_code=status.HTTP_200_OK)
def health_directions(client: DirectionsClient | None = Depends(get_directions_client)) -> dict:
    """Report whether the directions provider is configured and answering."""
    if client is None:
        return {
            "service": "directions",
            "configured": False,
            "healthy": False,
            "message": "Google Maps API key not configured. Optimizations use the simulated estimator.",
        }
    return {"service": "directions", "configured": True, "healthy": check_health(client)}
