"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Sequence

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def bezier_path(
    origin: Sequence[float],
    destination: Sequence[float],
    num_points: int = 10,
) -> list[tuple[float, float]]:
    """Build a curved display path between two (lon, lat) points.

    The curve is a quadratic Bezier whose control point is the chord midpoint
    pushed sideways by one thirtieth of the great-circle distance. Points are
    sampled at uniform parameter steps and include both endpoints.
    """

    if num_points < 2:
        raise ValueError("A path needs at least two points.")

    x0, y0 = float(origin[0]), float(origin[1])
    x2, y2 = float(destination[0]), float(destination[1])

    dx = x2 - x0
    dy = y2 - y0
    chord = math.hypot(dx, dy)
    if chord == 0:
        return [(x0, y0)] * num_points

    bulge = haversine_km(y0, x0, y2, x2) / 30
    # unit vector perpendicular to the chord
    perp_x, perp_y = -dy / chord, dx / chord
    cx = (x0 + x2) / 2 + perp_x * bulge
    cy = (y0 + y2) / 2 + perp_y * bulge

    path: list[tuple[float, float]] = [(x0, y0)]
    steps = num_points - 1
    for i in range(1, steps):
        t = i / steps
        u = 1 - t
        x = u * u * x0 + 2 * u * t * cx + t * t * x2
        y = u * u * y0 + 2 * u * t * cy + t * t * y2
        path.append((x, y))
    path.append((x2, y2))
    return path
