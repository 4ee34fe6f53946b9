"""Per-state FeatureCollection writer."""

from pathlib import Path

from loguru import logger

from spectra_atlas.lib.assigner.types import Feature
from spectra_atlas.lib.exporter import write_feature_collection


def write_state_buckets(buckets: dict[str, list[Feature]], out_dir: Path) -> int:
    """Write one ``<key>.geojson`` per non-empty bucket.

    Existing files are replaced entirely; empty buckets are skipped and any
    file they had is left untouched.

    Returns:
        Number of files written.
    """
    written = 0
    for key, features in buckets.items():
        if not features:
            continue
        out_path = out_dir / f"{key}.geojson"
        count = write_feature_collection(out_path, features)
        written += 1
        logger.info(f"Wrote {out_path} features: {count}")
    return written
