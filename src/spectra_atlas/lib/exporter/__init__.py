"""Exporter library — GeoJSON and JSON writers."""

from spectra_atlas.lib.exporter.geojson_writer import write_feature_collection
from spectra_atlas.lib.exporter.json_writer import write_json

__all__ = [
    "write_feature_collection",
    "write_json",
]
