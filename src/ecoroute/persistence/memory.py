"""In-memory persistence for routes, savings history, predictions and dashboard stats."""

from __future__ import annotations

import copy
import itertools
import logging
from dataclasses import fields, replace
from typing import Any, Mapping, TypeVar

from ..models.domain import CO2Saving, DashboardStats, DemandPrediction, Route, RoutePrediction

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _known_fields(record_type: type, data: Mapping[str, Any]) -> dict[str, Any]:
    names = {f.name for f in fields(record_type)} - {"id"}
    return {key: copy.deepcopy(value) for key, value in data.items() if key in names}


class InMemoryStore:
    """Process-local store keyed by integer ids.

    Ids come from per-collection counters and are never reused after a
    delete. Every record handed out is a copy, so callers change stored state
    only through the update methods. Nothing survives a restart.
    """

    def __init__(self) -> None:
        self._routes: dict[int, Route] = {}
        self._co2_savings: dict[int, CO2Saving] = {}
        self._demand_predictions: dict[int, DemandPrediction] = {}
        self._route_predictions: dict[int, RoutePrediction] = {}
        self._dashboard_stats: DashboardStats | None = None

        self._route_ids = itertools.count(1)
        self._co2_saving_ids = itertools.count(1)
        self._demand_prediction_ids = itertools.count(1)
        self._route_prediction_ids = itertools.count(1)
        self._dashboard_stats_ids = itertools.count(1)

    @staticmethod
    def _copy(record: T) -> T:
        return copy.deepcopy(record)

    # Routes
    def list_routes(self) -> list[Route]:
        return [self._copy(route) for route in self._routes.values()]

    def get_route(self, route_id: int) -> Route | None:
        route = self._routes.get(route_id)
        return self._copy(route) if route is not None else None

    def create_route(self, data: Mapping[str, Any]) -> Route:
        route = Route(id=next(self._route_ids), **_known_fields(Route, data))
        self._routes[route.id] = route
        logger.info(f"Created route {route.id} ({route.name})")
        return self._copy(route)

    def update_route(self, route_id: int, changes: Mapping[str, Any]) -> Route | None:
        existing = self._routes.get(route_id)
        if existing is None:
            return None
        updated = replace(existing, **_known_fields(Route, changes))
        self._routes[route_id] = updated
        logger.info(f"Updated route {route_id}: {sorted(k for k in changes if k != 'id')}")
        return self._copy(updated)

    def delete_route(self, route_id: int) -> bool:
        removed = self._routes.pop(route_id, None)
        if removed is not None:
            logger.info(f"Deleted route {route_id}")
        return removed is not None

    # CO2 savings history
    def list_co2_savings(self) -> list[CO2Saving]:
        return [self._copy(saving) for saving in self._co2_savings.values()]

    def create_co2_saving(self, data: Mapping[str, Any]) -> CO2Saving:
        saving = CO2Saving(id=next(self._co2_saving_ids), **_known_fields(CO2Saving, data))
        self._co2_savings[saving.id] = saving
        return self._copy(saving)

    # Predictions
    def list_demand_predictions(self) -> list[DemandPrediction]:
        return [self._copy(prediction) for prediction in self._demand_predictions.values()]

    def create_demand_prediction(self, data: Mapping[str, Any]) -> DemandPrediction:
        prediction = DemandPrediction(
            id=next(self._demand_prediction_ids), **_known_fields(DemandPrediction, data)
        )
        self._demand_predictions[prediction.id] = prediction
        return self._copy(prediction)

    def list_route_predictions(self) -> list[RoutePrediction]:
        return [self._copy(prediction) for prediction in self._route_predictions.values()]

    def create_route_prediction(self, data: Mapping[str, Any]) -> RoutePrediction:
        prediction = RoutePrediction(
            id=next(self._route_prediction_ids), **_known_fields(RoutePrediction, data)
        )
        self._route_predictions[prediction.id] = prediction
        return self._copy(prediction)

    # Dashboard stats (single row, upserted)
    def get_dashboard_stats(self) -> DashboardStats | None:
        return self._copy(self._dashboard_stats) if self._dashboard_stats is not None else None

    def upsert_dashboard_stats(self, data: Mapping[str, Any]) -> DashboardStats:
        stats_id = self._dashboard_stats.id if self._dashboard_stats is not None else next(self._dashboard_stats_ids)
        self._dashboard_stats = DashboardStats(id=stats_id, **_known_fields(DashboardStats, data))
        return self._copy(self._dashboard_stats)
