import math

import pytest

from ecoroute.services.geospatial import EARTH_RADIUS_KM, bezier_path, haversine_km


@pytest.mark.parametrize("lat, lon", [(0, 0), (51.5072, -0.1276), (-23.5505, -46.6333), (89.9, 179.9)])
def test_haversine_identical_points_is_zero(lat, lon):
    assert haversine_km(lat, lon, lat, lon) == 0


def test_haversine_quarter_great_circle():
    expected = EARTH_RADIUS_KM * math.pi / 2
    assert haversine_km(0, 0, 0, 90) == pytest.approx(expected, rel=1e-6)
    assert haversine_km(0, 0, 0, 90) == pytest.approx(10007.543, rel=1e-6)


def test_haversine_is_symmetric():
    london_dubai = haversine_km(51.5072, -0.1276, 25.2048, 55.2708)
    dubai_london = haversine_km(25.2048, 55.2708, 51.5072, -0.1276)
    assert london_dubai == pytest.approx(dubai_london, rel=1e-12)
    assert 5400 < london_dubai < 5600


def test_bezier_path_includes_endpoints():
    origin = (-74.0060, 40.7128)
    destination = (-118.2437, 34.0522)
    path = bezier_path(origin, destination, num_points=10)

    assert len(path) == 10
    assert path[0] == origin
    assert path[-1] == destination


def test_bezier_path_bulges_off_the_chord():
    path = bezier_path((0.0, 0.0), (10.0, 0.0), num_points=5)
    midpoint = path[2]
    # control point is offset along +y for a west-to-east chord
    assert midpoint[1] > 0
    assert midpoint[0] == pytest.approx(5.0)
    assert all(0.0 <= x <= 10.0 for x, _ in path)


def test_bezier_path_coincident_points_has_no_nan():
    path = bezier_path((4.4777, 51.9244), (4.4777, 51.9244), num_points=6)
    assert path == [(4.4777, 51.9244)] * 6
    assert not any(math.isnan(value) for point in path for value in point)


def test_bezier_path_requires_two_points():
    with pytest.raises(ValueError):
        bezier_path((0, 0), (1, 1), num_points=1)
