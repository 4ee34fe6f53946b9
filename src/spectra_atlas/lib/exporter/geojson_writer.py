"""GeoJSON FeatureCollection writer."""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any


def write_feature_collection(
    output_path: Path,
    features: Iterable[dict[str, Any]],
    *,
    indent: int | None = None,
) -> int:
    """Write features as a GeoJSON FeatureCollection, replacing any existing file.

    Parent directories are created as needed. Features are written as-is.

    Args:
        output_path: Path to write the GeoJSON file.
        features: Feature dicts to include, in order.
        indent: Optional JSON indentation; compact output when None.

    Returns:
        Number of features written.
    """
    feature_list = list(features)
    collection = {"type": "FeatureCollection", "features": feature_list}

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        json.dump(collection, f, indent=indent, ensure_ascii=False)
        if indent is not None:
            f.write("\n")

    return len(feature_list)
