"""Geometry library — pure-Python primitives over GeoJSON coordinate arrays.

Public API:
    - point_in_ring: Even-odd ray casting against one ring
    - point_in_polygon: Containment against a polygon with holes
    - centroid_of_coords: Unweighted vertex mean of a ring
    - centroid_of_feature: Representative point of a feature
    - feature_polygons: Polygon coordinate arrays of a feature
    - feature_identifier: Stable district identifier from properties
    - feature_name: State display name from properties
    - slugify: Filesystem-safe key for a name
    - planar_distance / haversine_km: Point distances
"""

from spectra_atlas.lib.geometry.distance import haversine_km, planar_distance
from spectra_atlas.lib.geometry.features import feature_identifier, feature_name, slugify
from spectra_atlas.lib.geometry.rings import (
    centroid_of_coords,
    centroid_of_feature,
    feature_polygons,
    point_in_polygon,
    point_in_ring,
)

__all__ = [
    "centroid_of_coords",
    "centroid_of_feature",
    "feature_identifier",
    "feature_name",
    "feature_polygons",
    "haversine_km",
    "planar_distance",
    "point_in_polygon",
    "point_in_ring",
    "slugify",
]
