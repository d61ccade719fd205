import pytest

from ecoroute.models.domain import Route
from ecoroute.services.emissions import emissions
from ecoroute.services.routing.estimator import (
    estimate_from_provider,
    priority_factor,
    select_best_alternative,
    simulate,
)
from ecoroute.services.routing.models import DirectionsRoute, OptimizedDirections, RouteSavings


def _route(distance: float = 1000.0, efficiency: float = 80.0, co2_saved: float = 1.0, transport_type: str = "Ground") -> Route:
    return Route(
        id=1,
        name="A → B",
        origin="A",
        destination="B",
        distance=distance,
        transport_type=transport_type,
        efficiency=efficiency,
        co2_saved=co2_saved,
        status="Active",
        duration=10.0,
        optimized=False,
        coordinates=[[0.0, 0.0], [1.0, 1.0]],
    )


def test_priority_factors():
    assert priority_factor("High") == 1.2
    assert priority_factor("Medium") == 1.0
    assert priority_factor("Low") == 0.8
    assert priority_factor("anything else") == 0.8


def test_shanghai_rotterdam_scenario():
    route = _route(distance=12380, efficiency=92, co2_saved=4.28, transport_type="Maritime")

    estimate = simulate(route, level=85, priority="High")

    assert estimate.distance == pytest.approx(12380 * (1 - 0.85 * 0.2))
    assert estimate.distance == pytest.approx(10275.4)
    assert estimate.efficiency == 98
    expected_delta = (emissions(12380, "Maritime") - emissions(estimate.distance, "Maritime")) * 1.2
    assert estimate.co2_delta == pytest.approx(expected_delta)
    assert estimate.co2_delta == pytest.approx(0.03030624)
    assert estimate.co2_saved == pytest.approx(4.28 + expected_delta)
    assert estimate.time_savings is None


@pytest.mark.parametrize("level", [0, 25, 50, 85, 100])
@pytest.mark.parametrize("priority", ["Low", "Medium", "High"])
def test_efficiency_cap_holds_for_high_efficiency_routes(level, priority):
    for efficiency in (98, 99, 100):
        assert simulate(_route(efficiency=efficiency), level, priority).efficiency == 98


def test_higher_level_never_worsens_distance_or_efficiency():
    route = _route(distance=5496, efficiency=71, transport_type="Air")
    estimates = [simulate(route, level, "Medium") for level in range(0, 101, 5)]
    for lower, higher in zip(estimates, estimates[1:]):
        assert higher.distance <= lower.distance
        assert higher.efficiency >= lower.efficiency


def test_distance_reduction_capped_at_twenty_percent():
    estimate = simulate(_route(distance=1000), level=100, priority="High")
    assert estimate.distance == pytest.approx(800)


def test_zero_distance_route():
    estimate = simulate(_route(distance=0, co2_saved=2.0), level=85, priority="High")
    assert estimate.distance == 0
    assert estimate.co2_delta == 0
    assert estimate.co2_saved == 2.0


def test_level_zero_changes_nothing_but_flags():
    route = _route()
    estimate = simulate(route, level=0, priority="High")
    assert estimate.distance == route.distance
    assert estimate.efficiency == route.efficiency
    assert estimate.co2_delta == 0


def test_co2_savings_accumulate_across_runs():
    route = _route(distance=1000, co2_saved=1.0)
    first = simulate(route, 85, "High")
    route.distance, route.efficiency, route.co2_saved = first.distance, first.efficiency, first.co2_saved
    second = simulate(route, 85, "High")
    assert second.co2_saved == pytest.approx(1.0 + first.co2_delta + second.co2_delta)
    assert second.co2_saved > first.co2_saved


def test_estimate_from_provider_uses_provider_distance():
    route = _route(distance=100, efficiency=80, co2_saved=1.0, transport_type="Ground")
    directions = OptimizedDirections(
        distance_km=90,
        duration_s=4200,
        polyline="",
        coordinates=[],
        savings=RouteSavings(distance_km=10, duration_s=-600, percentage=10.0),
    )

    estimate = estimate_from_provider(route, directions, level=85, priority="High")

    assert estimate.distance == 90
    assert estimate.efficiency == pytest.approx(88.5)
    assert estimate.co2_delta == pytest.approx((100 - 90) * 0.096 / 1000 * 1.2)
    assert estimate.time_savings == -600


def test_select_best_alternative_weighs_distance_against_time():
    short_slow = DirectionsRoute(distance_km=90, duration_s=4200, polyline="b")
    long_fast = DirectionsRoute(distance_km=100, duration_s=3600, polyline="a")

    assert select_best_alternative([long_fast, short_slow], level=85) is short_slow
    assert select_best_alternative([long_fast, short_slow], level=0) is long_fast


def test_select_best_alternative_keeps_first_on_tie():
    first = DirectionsRoute(distance_km=50, duration_s=600, polyline="first")
    second = DirectionsRoute(distance_km=50, duration_s=600, polyline="second")
    assert select_best_alternative([first, second], level=50) is first


def test_select_best_alternative_requires_candidates():
    with pytest.raises(ValueError):
        select_best_alternative([], level=50)


def test_estimate_from_longer_provider_route_keeps_totals_in_range():
    route = _route(distance=100, efficiency=2, co2_saved=0.0, transport_type="Ground")
    directions = OptimizedDirections(
        distance_km=200,
        duration_s=3600,
        polyline="",
        coordinates=[],
        savings=RouteSavings(distance_km=-50, duration_s=3600, percentage=-33.3),
    )

    estimate = estimate_from_provider(route, directions, level=10, priority="High")

    assert estimate.co2_delta == pytest.approx(-100 * 0.096 / 1000 * 1.2)
    assert estimate.co2_saved == 0.0
    assert estimate.efficiency == 0.0
    assert estimate.distance == 200
