from datetime import datetime, timezone

from ecoroute.persistence.memory import InMemoryStore
from ecoroute.persistence.seed import seed_sample_data


def _route_data(name: str = "Singapore → Dubai") -> dict:
    return {
        "name": name,
        "origin": "Singapore",
        "destination": "Dubai",
        "distance": 5840.0,
        "transport_type": "Maritime",
        "efficiency": 75.0,
        "co2_saved": 0.9,
        "status": "Planning",
        "duration": 240.0,
        "optimized": False,
        "coordinates": [[103.8198, 1.3521], [55.2708, 25.2048]],
    }


def test_create_then_get_returns_submitted_fields():
    store = InMemoryStore()
    data = _route_data()

    created = store.create_route(data)
    fetched = store.get_route(created.id)

    assert fetched is not None
    assert fetched.id == created.id
    for key, value in data.items():
        assert getattr(fetched, key) == value


def test_ids_are_never_reused_after_delete():
    store = InMemoryStore()
    first = store.create_route(_route_data("one"))
    second = store.create_route(_route_data("two"))

    assert store.delete_route(second.id) is True
    third = store.create_route(_route_data("three"))

    assert third.id not in {first.id, second.id}
    assert third.id > second.id


def test_delete_missing_route_returns_false():
    store = InMemoryStore()
    assert store.delete_route(999) is False
    assert store.get_route(999) is None
    assert store.update_route(999, {"name": "x"}) is None


def test_update_merges_partial_changes_and_ignores_id():
    store = InMemoryStore()
    route = store.create_route(_route_data())

    updated = store.update_route(route.id, {"status": "Active", "id": 77, "unknown": True})

    assert updated.id == route.id
    assert updated.status == "Active"
    assert updated.name == route.name


def test_returned_records_are_copies():
    store = InMemoryStore()
    route = store.create_route(_route_data())

    route.coordinates.append([0.0, 0.0])
    fetched = store.get_route(route.id)
    fetched.distance = 1.0

    again = store.get_route(route.id)
    assert len(again.coordinates) == 2
    assert again.distance == 5840.0


def test_dashboard_stats_upsert_keeps_single_row():
    store = InMemoryStore()
    assert store.get_dashboard_stats() is None
    now = datetime(2026, 3, 1, tzinfo=timezone.utc)

    first = store.upsert_dashboard_stats(
        {"co2_savings": 1.0, "route_efficiency": 50.0, "cost_savings": 10.0, "active_shipments": 3, "updated_at": now}
    )
    second = store.upsert_dashboard_stats(
        {"co2_savings": 2.0, "route_efficiency": 60.0, "cost_savings": 20.0, "active_shipments": 4, "updated_at": now}
    )

    assert first.id == second.id
    assert store.get_dashboard_stats().co2_savings == 2.0


def test_seed_sample_data():
    store = InMemoryStore()
    seed_sample_data(store, now=datetime(2026, 5, 15, tzinfo=timezone.utc))

    routes = store.list_routes()
    assert [route.id for route in routes] == [1, 2, 3, 4]
    assert routes[0].name == "Shanghai → Rotterdam"
    assert all(len(route.coordinates) >= 2 for route in routes)

    savings = store.list_co2_savings()
    assert [s.month for s in savings][:3] == ["Jan", "Feb", "Mar"]
    assert len(savings) == 12
    # April is past, May is the current month, June is in the future
    assert savings[3].amount == 2.9
    assert savings[4].amount == 4.2
    assert savings[5].amount == 0.0
    assert all(s.year == 2026 for s in savings)

    assert len(store.list_demand_predictions()) == 4
    assert len(store.list_route_predictions()) == 3
    assert store.get_dashboard_stats().active_shipments == 1264
