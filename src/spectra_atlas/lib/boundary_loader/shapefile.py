"""Shapefile reader using GeoPandas with the pyogrio engine.

Reads .shp files, transforms CRS to EPSG:4326 when needed, and re-emits
each row as a plain GeoJSON Feature dict.
"""

import math
from pathlib import Path
from typing import Any

import geopandas as gpd
import numpy as np
from loguru import logger
from shapely.geometry import mapping


def read_shapefile_features(file_path: Path) -> list[dict[str, Any]]:
    """Read a shapefile and return its rows as GeoJSON features.

    Args:
        file_path: Path to the .shp file.

    Returns:
        List of ``{"type": "Feature", "properties": ..., "geometry": ...}``
        dicts in file order. An empty shapefile yields an empty list.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    if not file_path.exists():
        msg = f"Input .shp not found: {file_path}"
        raise FileNotFoundError(msg)

    logger.info(f"Reading shapefile: {file_path}")
    gdf = gpd.read_file(file_path, engine="pyogrio")

    if gdf.empty:
        logger.info("Shapefile has no features")
        return []

    if gdf.crs and gdf.crs.to_epsg() != 4326:
        logger.debug(f"Transforming CRS from {gdf.crs} to EPSG:4326")
        gdf = gdf.to_crs(epsg=4326)

    geometry_col = gdf.geometry.name
    columns = [col for col in gdf.columns if col != geometry_col]

    features: list[dict[str, Any]] = []
    for _, row in gdf.iterrows():
        geom = row[geometry_col]
        features.append(
            {
                "type": "Feature",
                "properties": {col: _serialize_value(row[col]) for col in columns},
                "geometry": mapping(geom) if geom is not None and not geom.is_empty else None,
            }
        )

    logger.info(f"Parsed {len(features)} features from shapefile")
    return features


def _serialize_value(val: object) -> object:
    """Serialize a GeoDataFrame value to a JSON-safe type.

    Returns None for NaN/Inf values since they are not valid JSON.
    """
    if val is None:
        return None
    if isinstance(val, float) and (math.isnan(val) or math.isinf(val)):
        return None
    if isinstance(val, np.integer):
        return int(val)
    if isinstance(val, np.floating):
        v = float(val)
        return None if math.isnan(v) or math.isinf(v) else v
    if isinstance(val, np.bool_):
        return bool(val)
    if isinstance(val, np.ndarray):
        return val.tolist()
    if hasattr(val, "isoformat"):
        return val.isoformat()
    return val
