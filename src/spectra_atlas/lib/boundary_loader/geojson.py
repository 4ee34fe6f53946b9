"""GeoJSON reader — loads FeatureCollections as plain dicts."""

import json
from pathlib import Path
from typing import Any

from loguru import logger


def read_feature_collection(file_path: Path) -> dict[str, Any]:
    """Read a GeoJSON FeatureCollection from disk.

    Features are kept as raw dicts so they can be re-emitted unchanged.

    Args:
        file_path: Path to a .geojson or .json file.

    Returns:
        The parsed FeatureCollection with a ``features`` list.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a FeatureCollection.
    """
    if not file_path.is_file():
        msg = f"GeoJSON file not found: {file_path}"
        raise FileNotFoundError(msg)

    logger.debug(f"Reading GeoJSON: {file_path}")
    with file_path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        kind = data.get("type") if isinstance(data, dict) else type(data).__name__
        msg = f"Expected FeatureCollection in {file_path.name}, got {kind}"
        raise ValueError(msg)

    features = data.get("features") or []
    if not isinstance(features, list):
        msg = f"'features' must be a list in {file_path.name}"
        raise ValueError(msg)
    data["features"] = features
    return data


def read_features(file_path: Path) -> list[dict[str, Any]]:
    """Read only the feature list of a FeatureCollection."""
    return read_feature_collection(file_path)["features"]
