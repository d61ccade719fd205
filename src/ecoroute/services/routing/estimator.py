"""Deterministic route-optimization estimator.

Used directly when no directions provider is available, and to turn provider
output into revised route figures when one is.

``level`` is expected in [0, 100]; callers clamp or reject anything else.
"""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Route
from ..emissions import emissions
from .models import DirectionsRoute, Estimate, OptimizedDirections

EFFICIENCY_CEILING = 98.0
MAX_DISTANCE_REDUCTION = 0.2
MAX_EFFICIENCY_GAIN = 10.0

PRIORITY_FACTORS = {"High": 1.2, "Medium": 1.0}
LOW_PRIORITY_FACTOR = 0.8


def priority_factor(priority: str) -> float:
    return PRIORITY_FACTORS.get(priority, LOW_PRIORITY_FACTOR)


def _co2_delta(route: Route, new_distance: float, priority: str) -> float:
    saved = emissions(route.distance, route.transport_type) - emissions(new_distance, route.transport_type)
    return saved * priority_factor(priority)


def simulate(route: Route, level: float = 85, priority: str = "High") -> Estimate:
    """Estimate the effect of optimizing ``route`` without a directions provider."""

    optimization_factor = level / 100
    new_distance = route.distance * (1 - optimization_factor * MAX_DISTANCE_REDUCTION)
    new_efficiency = min(EFFICIENCY_CEILING, route.efficiency + optimization_factor * MAX_EFFICIENCY_GAIN)
    co2_delta = _co2_delta(route, new_distance, priority)
    return Estimate(
        distance=new_distance,
        efficiency=new_efficiency,
        co2_saved=route.co2_saved + co2_delta,
        co2_delta=co2_delta,
    )


def estimate_from_provider(
    route: Route,
    directions: OptimizedDirections,
    level: float = 85,
    priority: str = "High",
) -> Estimate:
    """Revise ``route`` using the distance and savings reported by the provider.

    The provider path can be longer than the stored distance, so the delta may
    be negative. It is reported as is, while the stored totals stay within
    their ranges: efficiency in [0, 98] and co2_saved at or above 0.
    """

    efficiency_gain = directions.savings.percentage * level / 100
    new_efficiency = min(EFFICIENCY_CEILING, max(0.0, route.efficiency + efficiency_gain))
    co2_delta = _co2_delta(route, directions.distance_km, priority)
    return Estimate(
        distance=directions.distance_km,
        efficiency=new_efficiency,
        co2_saved=max(0.0, route.co2_saved + co2_delta),
        co2_delta=co2_delta,
        time_savings=directions.savings.duration_s,
    )


def alternative_score(candidate: DirectionsRoute, level: float) -> float:
    """Lower is better: km weighted by ``level``, minutes by the remainder."""

    distance_weight = level / 100
    return candidate.distance_km * distance_weight + candidate.duration_s / 60 * (1 - distance_weight)


def select_best_alternative(candidates: Sequence[DirectionsRoute], level: float) -> DirectionsRoute:
    if not candidates:
        raise ValueError("At least one candidate route is required.")
    best = candidates[0]
    best_score = alternative_score(best, level)
    for candidate in candidates[1:]:
        score = alternative_score(candidate, level)
        if score < best_score:
            best, best_score = candidate, score
    return best
