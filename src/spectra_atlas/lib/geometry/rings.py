"""Ring and polygon primitives over raw GeoJSON coordinate arrays.

Coordinates are ``[lon, lat]`` pairs. A polygon is a list of rings where
ring 0 is the outer boundary and rings 1..n are holes.
"""

from collections.abc import Sequence
from typing import Any

Point = tuple[float, float]
Ring = Sequence[Sequence[float]]
PolygonCoords = Sequence[Ring]


def point_in_ring(point: Sequence[float], ring: Ring) -> bool:
    """Even-odd ray casting test of a point against a single ring.

    Casts a horizontal ray towards +x and flips on every edge it crosses.
    The ring does not need to be explicitly closed.

    Args:
        point: ``(x, y)`` pair.
        ring: Ordered vertices of the ring.

    Returns:
        True if the point is inside the ring.
    """
    x, y = point[0], point[1]
    inside = False
    j = len(ring) - 1
    for i in range(len(ring)):
        xi, yi = ring[i][0], ring[i][1]
        xj, yj = ring[j][0], ring[j][1]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def point_in_polygon(point: Sequence[float], polygon: PolygonCoords | None) -> bool:
    """Test a point against a polygon with holes.

    Args:
        point: ``(x, y)`` pair.
        polygon: List of rings, outer ring first.

    Returns:
        True if the point is inside the outer ring and inside none of the holes.
        False for an empty or missing polygon.
    """
    if not polygon:
        return False
    if not point_in_ring(point, polygon[0]):
        return False
    return not any(point_in_ring(point, hole) for hole in polygon[1:])


def centroid_of_coords(coords: Ring | None) -> Point | None:
    """Arithmetic mean of a ring's vertices.

    This is not the area-weighted centroid; it is only used for coarse
    bucket assignment.

    Returns:
        ``(x, y)`` or None for empty input.
    """
    if not coords:
        return None
    sx = 0.0
    sy = 0.0
    for c in coords:
        sx += c[0]
        sy += c[1]
    n = len(coords)
    return (sx / n, sy / n)


def _geometry_of(feature: Any) -> dict[str, Any] | None:
    if not isinstance(feature, dict):
        return None
    geometry = feature.get("geometry")
    return geometry if isinstance(geometry, dict) else None


def centroid_of_feature(feature: dict[str, Any]) -> Point | None:
    """Representative point of a GeoJSON feature.

    Polygon uses the outer ring; MultiPolygon averages the outer-ring
    centroids of its parts with equal weight; Point is returned as-is.
    Anything else, including a non-object geometry or malformed
    coordinates, yields None.
    """
    geometry = _geometry_of(feature)
    if not geometry:
        return None

    geom_type = geometry.get("type")
    coords = geometry.get("coordinates")
    try:
        if geom_type == "Polygon":
            return centroid_of_coords(coords[0]) if coords else None
        if geom_type == "MultiPolygon":
            cents = [c for c in (centroid_of_coords(poly[0]) for poly in coords or [] if poly) if c is not None]
            if not cents:
                return None
            return (
                sum(c[0] for c in cents) / len(cents),
                sum(c[1] for c in cents) / len(cents),
            )
        if geom_type == "Point":
            return (float(coords[0]), float(coords[1]))
    except (TypeError, IndexError, KeyError, ValueError):
        return None
    return None


def feature_polygons(feature: dict[str, Any]) -> list[PolygonCoords]:
    """Return the polygons of a feature as coordinate arrays.

    Polygon yields one polygon, MultiPolygon all of its parts, anything
    else (including non-list coordinates) an empty list.
    """
    geometry = _geometry_of(feature)
    if not geometry:
        return []
    geom_type = geometry.get("type")
    coords = geometry.get("coordinates")
    if not isinstance(coords, (list, tuple)) or not coords:
        return []
    if geom_type == "Polygon":
        return [coords]
    if geom_type == "MultiPolygon":
        return list(coords)
    return []
