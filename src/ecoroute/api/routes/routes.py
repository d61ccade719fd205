"""Route CRUD endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ...persistence.memory import InMemoryStore
from ...schemas.routes import RouteCreate, RouteImpactModel, RouteModel, RouteUpdate
from ...services.routing.impact import route_impact
from ..dependencies import get_store

router = APIRouter(prefix="/routes", tags=["routes"])


@router.get("", response_model=List[RouteModel])
def list_routes(store: InMemoryStore = Depends(get_store)) -> List[RouteModel]:
    return [RouteModel.model_validate(route) for route in store.list_routes()]


@router.get("/{route_id}", response_model=RouteModel)
def get_route(route_id: int, store: InMemoryStore = Depends(get_store)) -> RouteModel:
    route = store.get_route(route_id)
    if route is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Route not found")
    return RouteModel.model_validate(route)


@router.post("", response_model=RouteModel, status_code=status.HTTP_201_CREATED)
def create_route(payload: RouteCreate, store: InMemoryStore = Depends(get_store)) -> RouteModel:
    route = store.create_route(payload.model_dump())
    return RouteModel.model_validate(route)


@router.patch("/{route_id}", response_model=RouteModel)
def update_route(
    route_id: int,
    payload: RouteUpdate,
    store: InMemoryStore = Depends(get_store),
) -> RouteModel:
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    route = store.update_route(route_id, changes)
    if route is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Route not found")
    return RouteModel.model_validate(route)


@router.delete("/{route_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_route(route_id: int, store: InMemoryStore = Depends(get_store)) -> Response:
    if not store.delete_route(route_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Route not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{route_id}/impact", response_model=RouteImpactModel)
def get_route_impact(route_id: int, store: InMemoryStore = Depends(get_store)) -> RouteImpactModel:
    """Emissions, fuel, cost and travel time for a route, plus a display path."""
    route = store.get_route(route_id)
    if route is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Route not found")
    return RouteImpactModel.model_validate(route_impact(route))
