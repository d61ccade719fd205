"""Per-mode emission, fuel, cost and travel-time model."""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

# Average CO2 absorbed by one tree per year, in metric tons
CO2_TONS_PER_TREE_YEAR = 0.022
# 0.1 kg of CO2 saved per km maps to a full score of 100
IMPACT_SCORE_SCALE = 1000.0


@dataclass(frozen=True, slots=True)
class TransportRates:
    co2_kg_per_km: float
    fuel_l_per_km: float
    cost_usd_per_km: float
    avg_speed_kmh: float
    loading_hours: float


DEFAULT_RATES = TransportRates(
    co2_kg_per_km=0.15,
    fuel_l_per_km=1.0,
    cost_usd_per_km=2.0,
    avg_speed_kmh=100.0,
    loading_hours=4.0,
)

RATE_TABLE: Mapping[str, TransportRates] = MappingProxyType(
    {
        "Air": TransportRates(0.25, 5.2, 4.5, 800.0, 3.0),
        "Ground": TransportRates(0.096, 0.35, 1.2, 70.0, 2.0),
        "Maritime": TransportRates(0.012, 0.04, 0.5, 35.0, 12.0),
        "Ground/Air": TransportRates(0.18, 3.0, 3.0, 400.0, 6.0),
    }
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def get_rates(transport_type: str) -> TransportRates:
    """Return the rate row for a transport mode, or the default row when unknown."""

    return RATE_TABLE.get(transport_type, DEFAULT_RATES)


def emissions(distance: float, transport_type: str) -> float:
    """CO2 emitted over ``distance`` km, in metric tons."""

    return distance * get_rates(transport_type).co2_kg_per_km / 1000


def fuel(distance: float, transport_type: str) -> float:
    """Fuel burned over ``distance`` km, in liters."""

    return distance * get_rates(transport_type).fuel_l_per_km


def cost(distance: float, transport_type: str) -> float:
    """Operating cost over ``distance`` km, in USD."""

    return distance * get_rates(transport_type).cost_usd_per_km


def travel_time(distance: float, transport_type: str) -> float:
    """Line-haul time plus fixed loading/unloading time, in hours."""

    rates = get_rates(transport_type)
    return distance / rates.avg_speed_kmh + rates.loading_hours


def co2_savings(original_distance: float, optimized_distance: float, transport_type: str) -> float:
    return emissions(original_distance, transport_type) - emissions(optimized_distance, transport_type)


def trees_equivalent(co2_tons: float) -> int:
    """Number of trees absorbing ``co2_tons`` of CO2 in a year."""

    return _round_half_up(co2_tons / CO2_TONS_PER_TREE_YEAR)


def environmental_impact_score(co2_tons: float, distance: float) -> int:
    """Score CO2 saved per km on a 0-100 scale.

    A route with no length has no meaningful per-km figure and scores 0.
    """

    if distance <= 0:
        return 0
    saved_kg_per_km = co2_tons * 1000 / distance
    scaled = min(100.0, max(0.0, saved_kg_per_km * IMPACT_SCORE_SCALE))
    return _round_half_up(scaled)
