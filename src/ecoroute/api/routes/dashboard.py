"""Dashboard summary and CO2 savings history endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...persistence.memory import InMemoryStore
from ...schemas.dashboard import (
    CO2SavingCreate,
    CO2SavingModel,
    DashboardStatsCreate,
    DashboardStatsModel,
)
from ..dependencies import get_store

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard-stats", response_model=DashboardStatsModel)
def get_dashboard_stats(store: InMemoryStore = Depends(get_store)) -> DashboardStatsModel:
    stats = store.get_dashboard_stats()
    if stats is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Dashboard stats not found")
    return DashboardStatsModel.model_validate(stats)


@router.post("/dashboard-stats", response_model=DashboardStatsModel, status_code=status.HTTP_201_CREATED)
def upsert_dashboard_stats(
    payload: DashboardStatsCreate,
    store: InMemoryStore = Depends(get_store),
) -> DashboardStatsModel:
    """Replace the dashboard summary row, keeping its id."""
    return DashboardStatsModel.model_validate(store.upsert_dashboard_stats(payload.model_dump()))


@router.get("/co2-savings", response_model=List[CO2SavingModel])
def list_co2_savings(store: InMemoryStore = Depends(get_store)) -> List[CO2SavingModel]:
    return [CO2SavingModel.model_validate(saving) for saving in store.list_co2_savings()]


@router.post("/co2-savings", response_model=CO2SavingModel, status_code=status.HTTP_201_CREATED)
def create_co2_saving(payload: CO2SavingCreate, store: InMemoryStore = Depends(get_store)) -> CO2SavingModel:
    return CO2SavingModel.model_validate(store.create_co2_saving(payload.model_dump()))
