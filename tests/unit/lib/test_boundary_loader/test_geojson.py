"""Unit tests for the GeoJSON FeatureCollection reader."""

import json
from pathlib import Path

import pytest

from spectra_atlas.lib.boundary_loader import load_features, read_feature_collection, read_features


class TestReadFeatureCollection:
    """Tests for GeoJSON parsing."""

    def test_valid_collection(self, tmp_path: Path, square_feature, write_fc) -> None:
        f = write_fc(tmp_path / "districts.geojson", [square_feature(0, 0, shapeID="A")])

        data = read_feature_collection(f)
        assert data["type"] == "FeatureCollection"
        assert data["features"][0]["properties"]["shapeID"] == "A"

    def test_features_kept_verbatim(self, tmp_path: Path, square_feature, write_fc) -> None:
        feature = square_feature(3, 4, shapeID="B", extra={"nested": [1, 2]})
        f = write_fc(tmp_path / "districts.geojson", [feature])

        assert read_features(f) == [feature]

    def test_empty_collection_allowed(self, tmp_path: Path, write_fc) -> None:
        f = write_fc(tmp_path / "empty.geojson", [])
        assert read_features(f) == []

    def test_missing_features_key(self, tmp_path: Path) -> None:
        f = tmp_path / "bare.geojson"
        f.write_text(json.dumps({"type": "FeatureCollection"}))
        assert read_features(f) == []

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="not found"):
            read_feature_collection(tmp_path / "nope.geojson")

    def test_wrong_type_raises(self, tmp_path: Path) -> None:
        f = tmp_path / "feature.geojson"
        f.write_text(json.dumps({"type": "Feature", "properties": {}}))

        with pytest.raises(ValueError, match="FeatureCollection"):
            read_feature_collection(f)

    def test_non_object_raises(self, tmp_path: Path) -> None:
        f = tmp_path / "list.geojson"
        f.write_text("[]")

        with pytest.raises(ValueError, match="FeatureCollection"):
            read_feature_collection(f)

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        f = tmp_path / "broken.geojson"
        f.write_text("{not json")

        with pytest.raises(ValueError):
            read_feature_collection(f)


class TestLoadFeatures:
    """Tests for format auto-detection."""

    def test_geojson_extension(self, tmp_path: Path, square_feature, write_fc) -> None:
        f = write_fc(tmp_path / "states.json", [square_feature(0, 0)])
        assert len(load_features(f)) == 1

    def test_unsupported_format(self, tmp_path: Path) -> None:
        f = tmp_path / "states.kml"
        f.write_text("<kml/>")

        with pytest.raises(ValueError, match="Unsupported"):
            load_features(f)
