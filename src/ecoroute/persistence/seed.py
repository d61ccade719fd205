"""Demonstration data loaded into a fresh store."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from .memory import InMemoryStore

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
PAST_CO2_AMOUNTS = (1.2, 1.8, 2.3, 2.9, 3.2, 3.6, 3.8, 4.0, 4.2, 0.0, 0.0, 0.0)
CURRENT_MONTH_CO2_AMOUNT = 4.2
MONTHLY_TARGETS = (1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0, 4.5, 5.0, 5.5, 6.0, 6.5)

SAMPLE_ROUTES = (
    {
        "name": "Shanghai → Rotterdam",
        "origin": "Shanghai",
        "destination": "Rotterdam",
        "distance": 12380,
        "transport_type": "Maritime",
        "efficiency": 92,
        "co2_saved": 4.28,
        "status": "Active",
        "duration": 336,
        "optimized": True,
        "coordinates": [[121.4737, 31.2304], [4.4777, 51.9244]],
    },
    {
        "name": "New York → Los Angeles",
        "origin": "New York",
        "destination": "Los Angeles",
        "distance": 4490,
        "transport_type": "Ground",
        "efficiency": 86,
        "co2_saved": 2.15,
        "status": "Active",
        "duration": 42,
        "optimized": True,
        "coordinates": [[-74.0060, 40.7128], [-118.2437, 34.0522]],
    },
    {
        "name": "London → Dubai",
        "origin": "London",
        "destination": "Dubai",
        "distance": 5496,
        "transport_type": "Air",
        "efficiency": 71,
        "co2_saved": 3.82,
        "status": "Delayed",
        "duration": 7,
        "optimized": True,
        "coordinates": [[-0.1276, 51.5072], [55.2708, 25.2048]],
    },
    {
        "name": "São Paulo → Mexico City",
        "origin": "São Paulo",
        "destination": "Mexico City",
        "distance": 7380,
        "transport_type": "Ground/Air",
        "efficiency": 65,
        "co2_saved": 1.95,
        "status": "Planning",
        "duration": 18,
        "optimized": False,
        "coordinates": [[-46.6333, -23.5505], [-99.1332, 19.4326]],
    },
)

SAMPLE_DEMAND_PREDICTIONS = (
    ("North America", 12.8, "High"),
    ("Europe", 3.2, "Medium"),
    ("Asia Pacific", 18.7, "High"),
    ("Latin America", -4.1, "Low"),
)

SAMPLE_ROUTE_PREDICTIONS = (
    ("Shanghai → Los Angeles", 23, 85),
    ("Hamburg → New York", 15, 72),
    ("Singapore → Dubai", 8, 58),
)


def _co2_amount(month_index: int, current_month_index: int) -> float:
    if month_index > current_month_index:
        return 0.0
    if month_index == current_month_index:
        return CURRENT_MONTH_CO2_AMOUNT
    return PAST_CO2_AMOUNTS[month_index]


def seed_sample_data(store: InMemoryStore, now: datetime | None = None) -> None:
    """Populate ``store`` with the dashboard's demonstration records.

    ``now`` decides which months of the savings history are in the past,
    present or future; it defaults to the current UTC time.
    """
    now = now or datetime.now(timezone.utc)

    for route in SAMPLE_ROUTES:
        store.create_route(route)

    current_month_index = now.month - 1
    for index, month in enumerate(MONTHS):
        store.create_co2_saving(
            {
                "month": month,
                "year": now.year,
                "amount": _co2_amount(index, current_month_index),
                "target": MONTHLY_TARGETS[index],
            }
        )

    for region, change, confidence in SAMPLE_DEMAND_PREDICTIONS:
        store.create_demand_prediction(
            {"region": region, "percentage_change": change, "confidence": confidence, "predicted_at": now}
        )

    for label, change, confidence in SAMPLE_ROUTE_PREDICTIONS:
        store.create_route_prediction({"route": label, "percentage_change": change, "confidence": confidence})

    store.upsert_dashboard_stats(
        {
            "co2_savings": 32.38,
            "route_efficiency": 78.5,
            "cost_savings": 127.8,
            "active_shipments": 1264,
            "updated_at": now,
        }
    )
    logging.getLogger(__name__).info(
        f"Seeded {len(SAMPLE_ROUTES)} routes, {len(MONTHS)} months of savings and "
        f"{len(SAMPLE_DEMAND_PREDICTIONS) + len(SAMPLE_ROUTE_PREDICTIONS)} predictions"
    )
