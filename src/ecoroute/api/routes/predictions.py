"""Demand and route prediction endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from ...persistence.memory import InMemoryStore
from ...schemas.dashboard import (
    DemandPredictionCreate,
    DemandPredictionModel,
    RoutePredictionCreate,
    RoutePredictionModel,
)
from ..dependencies import get_store

router = APIRouter(tags=["predictions"])


@router.get("/demand-predictions", response_model=List[DemandPredictionModel])
def list_demand_predictions(store: InMemoryStore = Depends(get_store)) -> List[DemandPredictionModel]:
    return [DemandPredictionModel.model_validate(p) for p in store.list_demand_predictions()]


@router.post("/demand-predictions", response_model=DemandPredictionModel, status_code=status.HTTP_201_CREATED)
def create_demand_prediction(
    payload: DemandPredictionCreate,
    store: InMemoryStore = Depends(get_store),
) -> DemandPredictionModel:
    return DemandPredictionModel.model_validate(store.create_demand_prediction(payload.model_dump()))


@router.get("/route-predictions", response_model=List[RoutePredictionModel])
def list_route_predictions(store: InMemoryStore = Depends(get_store)) -> List[RoutePredictionModel]:
    return [RoutePredictionModel.model_validate(p) for p in store.list_route_predictions()]


@router.post("/route-predictions", response_model=RoutePredictionModel, status_code=status.HTTP_201_CREATED)
def create_route_prediction(
    payload: RoutePredictionCreate,
    store: InMemoryStore = Depends(get_store),
) -> RoutePredictionModel:
    return RoutePredictionModel.model_validate(store.create_route_prediction(payload.model_dump()))
