"""Dissolve per-state district files into single state outlines."""

from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger
from shapely.errors import ShapelyError
from shapely.geometry import mapping, shape
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from spectra_atlas.lib.assigner.state_index import list_state_files
from spectra_atlas.lib.boundary_loader.geojson import read_features
from spectra_atlas.lib.exporter import write_feature_collection

_POLYGONAL = ("Polygon", "MultiPolygon")


@dataclass
class DissolveResult:
    """Files dissolved and files that failed."""

    written: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


def dissolve_features(features: list[dict]) -> BaseGeometry | None:
    """Union all polygonal geometries into one geometry.

    Invalid geometries are repaired with ``buffer(0)`` first; geometries that
    cannot be built at all are skipped. Returns None when there is nothing
    polygonal to dissolve.
    """
    geoms: list[BaseGeometry] = []
    for feature in features:
        geom_data = feature.get("geometry") if isinstance(feature, dict) else None
        if not isinstance(geom_data, dict) or geom_data.get("type") not in _POLYGONAL:
            continue
        try:
            geom = shape(geom_data)
        except (TypeError, ValueError, KeyError, IndexError, AttributeError, ShapelyError) as e:
            logger.debug(f"Skipping unreadable geometry: {e}")
            continue
        if not geom.is_valid:
            geom = geom.buffer(0)
        if not geom.is_empty:
            geoms.append(geom)

    if not geoms:
        return None
    return unary_union(geoms)


def dissolve_state_file(in_path: Path, out_path: Path) -> int:
    """Dissolve one per-state file into a single-feature FeatureCollection.

    Returns:
        Number of features written (0 or 1).
    """
    merged = dissolve_features(read_features(in_path))
    features = []
    if merged is not None:
        features.append({"type": "Feature", "properties": {}, "geometry": mapping(merged)})
    return write_feature_collection(out_path, features)


def dissolve_state_dir(states_dir: Path, out_dir: Path) -> DissolveResult:
    """Dissolve every per-state file of a directory into ``out_dir``.

    A failing file is logged and skipped; the rest are still processed.

    Raises:
        FileNotFoundError: If ``states_dir`` does not exist.
    """
    result = DissolveResult()
    out_dir.mkdir(parents=True, exist_ok=True)
    for in_path in list_state_files(states_dir):
        logger.info(f"Processing {in_path.stem}")
        try:
            dissolve_state_file(in_path, out_dir / in_path.name)
        except (ValueError, OSError, ShapelyError) as e:
            logger.error(f"Failed to dissolve {in_path.stem}: {e}")
            result.failed.append(in_path.stem)
            continue
        result.written.append(in_path.stem)
    return result
