from __future__ import annotations

import math

from src.domain.models.geo import GeoPoint

EARTH_RADIUS_M = 6371000.0


def haversine_distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in meters."""

    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = lat2 - lat1
    dlon = math.radians(b.lon) - math.radians(a.lon)

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    )
    return 2.0 * EARTH_RADIUS_M * math.asin(math.sqrt(s))


def optional_distance_m(a: GeoPoint | None, b: GeoPoint | None) -> float | None:
    # Stations without coordinates still route; they just have no distance.
    if a is None or b is None:
        return None
    return haversine_distance_m(a, b)
