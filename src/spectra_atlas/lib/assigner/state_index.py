"""Load existing per-state district files into a containment index."""

from pathlib import Path

from loguru import logger

from spectra_atlas.lib.assigner.types import StateBucket, StateIndex
from spectra_atlas.lib.boundary_loader.geojson import read_features
from spectra_atlas.lib.geometry import feature_identifier, feature_polygons


def list_state_files(states_dir: Path) -> list[Path]:
    """Return the ``*.geojson`` files of a directory sorted by filename.

    Raises:
        FileNotFoundError: If the directory does not exist.
    """
    if not states_dir.is_dir():
        msg = f"state-districts directory not found: {states_dir}"
        raise FileNotFoundError(msg)
    return sorted(p for p in states_dir.iterdir() if p.is_file() and p.suffix == ".geojson")


def load_state_index(states_dir: Path) -> StateIndex:
    """Build the state list and previous-assignment map from per-state files.

    Each file stem is a state key. Every Polygon/MultiPolygon of every
    feature in the file becomes a containment polygon for that state, and
    every identified feature records its current state.

    Raises:
        FileNotFoundError: If the directory is missing or holds no .geojson files.
    """
    files = list_state_files(states_dir)
    if not files:
        msg = f"No per-state .geojson files found in {states_dir}"
        raise FileNotFoundError(msg)

    logger.info(f"Loading existing per-state files from {states_dir}")
    index = StateIndex()
    for path in files:
        bucket = StateBucket(key=path.stem)
        for feature in read_features(path):
            ident = feature_identifier(feature)
            if ident:
                index.previous[ident] = bucket.key
            bucket.polygons.extend(feature_polygons(feature))
        index.states.append(bucket)

    logger.info(f"States loaded: {len(index.states)}")
    return index
