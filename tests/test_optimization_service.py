import logging

import pytest

from ecoroute.errors import NotFoundError, ProviderError, ProviderFailure, ValidationError
from ecoroute.persistence.memory import InMemoryStore
from ecoroute.services.routing.models import (
    OptimizedDirections,
    ProviderFailed,
    ProviderSuccess,
    RouteSavings,
)
from ecoroute.services.routing.service import attempt_provider, optimize_route


def _create_route(store: InMemoryStore, **overrides) -> int:
    data = {
        "name": "Rotterdam → Hamburg",
        "origin": "Rotterdam",
        "destination": "Hamburg",
        "distance": 100.0,
        "transport_type": "Ground",
        "efficiency": 80.0,
        "co2_saved": 1.0,
        "status": "Active",
        "duration": 5.0,
        "optimized": False,
        "coordinates": [[4.4777, 51.9244], [9.9937, 53.5511]],
    }
    data.update(overrides)
    return store.create_route(data).id


class DummyDirections:
    def __init__(self, directions=None, error=None):
        self._directions = directions
        self._error = error
        self.calls = []

    def optimized_route(self, origin, destination, optimization_level=85):
        self.calls.append((origin, destination, optimization_level))
        if self._error is not None:
            raise self._error
        return self._directions


def _directions() -> OptimizedDirections:
    return OptimizedDirections(
        distance_km=90.0,
        duration_s=4200.0,
        polyline="_p~iF~ps|U_ulLnnqC_mqNvxq`@",
        coordinates=[(4.4777, 51.9244), (7.0, 52.5), (9.9937, 53.5511)],
        savings=RouteSavings(distance_km=10.0, duration_s=-600.0, percentage=10.0),
    )


def test_attempt_without_client_reports_missing_credential():
    store = InMemoryStore()
    route = store.get_route(_create_route(store))

    outcome = attempt_provider(None, route, 85)

    assert isinstance(outcome, ProviderFailed)
    assert outcome.reason is ProviderFailure.CREDENTIAL_MISSING
    assert outcome.message == "The Google Maps API key is missing"


def test_attempt_with_single_coordinate_skips_provider():
    store = InMemoryStore()
    route = store.get_route(_create_route(store, coordinates=[[4.4777, 51.9244]]))
    client = DummyDirections(directions=_directions())

    outcome = attempt_provider(client, route, 85)

    assert isinstance(outcome, ProviderFailed)
    assert outcome.reason is ProviderFailure.INVALID_ROUTE
    assert client.calls == []


def test_attempt_passes_lat_lon_to_provider():
    store = InMemoryStore()
    route = store.get_route(_create_route(store))
    client = DummyDirections(directions=_directions())

    outcome = attempt_provider(client, route, 60)

    assert isinstance(outcome, ProviderSuccess)
    assert client.calls == [((51.9244, 4.4777), (53.5511, 9.9937), 60)]


def test_provider_success_updates_route_from_directions():
    store = InMemoryStore()
    route_id = _create_route(store)

    result = optimize_route(store, DummyDirections(directions=_directions()), route_id, 85, "High")

    assert result.source == "provider"
    assert not result.uses_fallback
    assert result.failure is None
    assert result.polyline == "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
    assert result.route.distance == 90.0
    assert result.route.efficiency == pytest.approx(88.5)
    assert result.route.optimized is True
    assert result.route.coordinates[1] == [7.0, 52.5]
    assert result.details.distance_reduction == pytest.approx(10.0)
    assert result.details.efficiency_improvement == pytest.approx(8.5)
    assert result.details.additional_co2_saved == pytest.approx(10 * 0.096 / 1000 * 1.2)
    assert result.details.time_savings == -600.0

    stored = store.get_route(route_id)
    assert stored.distance == 90.0
    assert stored.co2_saved == pytest.approx(1.0 + result.details.additional_co2_saved)


@pytest.mark.parametrize(
    "reason",
    [
        ProviderFailure.CREDENTIAL_UNAUTHORIZED,
        ProviderFailure.NO_ROUTE,
        ProviderFailure.MALFORMED_RESPONSE,
        ProviderFailure.TIMEOUT,
        ProviderFailure.NETWORK,
    ],
)
def test_provider_failure_falls_back_to_estimator(reason, caplog):
    store = InMemoryStore()
    route_id = _create_route(store, coordinates=[[4.4777, 51.9244], [9.9937, 53.5511]])
    client = DummyDirections(error=ProviderError(reason, "boom"))

    with caplog.at_level(logging.WARNING, logger="ecoroute"):
        result = optimize_route(store, client, route_id, 50, "Medium")

    assert result.uses_fallback
    assert result.failure.reason is reason
    assert result.failure.detail == "boom"
    assert result.polyline is None
    assert result.route.optimized is True
    assert result.route.distance == pytest.approx(100 * (1 - 0.5 * 0.2))
    assert result.route.efficiency == pytest.approx(85.0)
    # coordinates are untouched on the simulated path
    assert result.route.coordinates == [[4.4777, 51.9244], [9.9937, 53.5511]]
    assert "simulated estimator" in caplog.text


def test_no_client_uses_fallback():
    store = InMemoryStore()
    route_id = _create_route(store, distance=12380, efficiency=92, co2_saved=4.28, transport_type="Maritime")

    result = optimize_route(store, None, route_id)

    assert result.uses_fallback
    assert result.failure.reason is ProviderFailure.CREDENTIAL_MISSING
    assert result.route.distance == pytest.approx(10275.4)
    assert result.route.efficiency == 98
    assert result.details.efficiency_improvement == pytest.approx(6.0)
    assert result.details.time_savings is None


def test_unknown_route_raises_not_found():
    with pytest.raises(NotFoundError):
        optimize_route(InMemoryStore(), None, 42)


def test_repeated_optimizations_accumulate_co2():
    store = InMemoryStore()
    route_id = _create_route(store, distance=1000.0, co2_saved=0.5)

    first = optimize_route(store, None, route_id, 85, "High")
    second = optimize_route(store, None, route_id, 85, "High")

    assert second.route.co2_saved == pytest.approx(
        0.5 + first.details.additional_co2_saved + second.details.additional_co2_saved
    )
    assert second.route.distance < first.route.distance


@pytest.mark.parametrize("level", [-1, 100.5, 150])
def test_out_of_range_level_is_rejected(level):
    store = InMemoryStore()
    route_id = _create_route(store)

    with pytest.raises(ValidationError):
        optimize_route(store, None, route_id, level)
    assert store.get_route(route_id).optimized is False
