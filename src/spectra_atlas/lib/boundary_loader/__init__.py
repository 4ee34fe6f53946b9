"""Boundary loader library — reads GeoJSON and shapefile boundary data.

Public API:
    - load_features: Auto-detect format and return GeoJSON feature dicts
    - read_feature_collection: GeoJSON FeatureCollection reader
    - read_features: GeoJSON feature list reader
    - read_shapefile_features: Shapefile reader
"""

from pathlib import Path
from typing import Any

from spectra_atlas.lib.boundary_loader.geojson import read_feature_collection, read_features
from spectra_atlas.lib.boundary_loader.shapefile import read_shapefile_features


def load_features(file_path: Path) -> list[dict[str, Any]]:
    """Load features from a file with automatic format detection.

    Supports .shp (shapefile), .geojson, and .json (GeoJSON) formats.

    Args:
        file_path: Path to the boundary file.

    Returns:
        List of GeoJSON feature dicts.

    Raises:
        ValueError: If the file format is not supported.
    """
    suffix = file_path.suffix.lower()

    if suffix == ".shp":
        return read_shapefile_features(file_path)
    if suffix in (".geojson", ".json"):
        return read_features(file_path)

    msg = f"Unsupported boundary file format: {suffix}. Supported: .shp, .geojson, .json"
    raise ValueError(msg)


__all__ = [
    "load_features",
    "read_feature_collection",
    "read_features",
    "read_shapefile_features",
]
