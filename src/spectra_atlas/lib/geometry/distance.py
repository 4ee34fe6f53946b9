"""Distances between ``(lon, lat)`` points."""

import math
from collections.abc import Sequence

EARTH_RADIUS_KM = 6371.0


def planar_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance in raw degree space.

    Only meaningful at country scale; used for the nearest-state fallback.
    """
    return math.hypot(a[0] - b[0], a[1] - b[1])


def haversine_km(a: Sequence[float], b: Sequence[float]) -> float:
    """Great-circle distance in kilometres between two ``(lon, lat)`` points."""
    lon1, lat1 = a[0], a[1]
    lon2, lat2 = b[0], b[1]
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    la1 = math.radians(lat1)
    la2 = math.radians(lat2)
    h = math.sin(d_lat / 2) ** 2 + math.cos(la1) * math.cos(la2) * math.sin(d_lon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(h))
