"""Tests for the GeoJSON FeatureCollection writer."""

import json
from pathlib import Path

from spectra_atlas.lib.exporter import write_feature_collection


class TestWriteFeatureCollection:
    """Tests for write_feature_collection."""

    def test_writes_collection(self, tmp_path: Path, square_feature) -> None:
        output = tmp_path / "out.geojson"
        features = [square_feature(0, 0, shapeID="A"), square_feature(1, 1, shapeID="B")]

        assert write_feature_collection(output, features) == 2

        data = json.loads(output.read_text())
        assert data == {"type": "FeatureCollection", "features": features}

    def test_empty_collection(self, tmp_path: Path) -> None:
        output = tmp_path / "empty.geojson"
        assert write_feature_collection(output, []) == 0
        assert json.loads(output.read_text()) == {"type": "FeatureCollection", "features": []}

    def test_overwrites_existing_file(self, tmp_path: Path, square_feature) -> None:
        output = tmp_path / "state.geojson"
        write_feature_collection(output, [square_feature(0, 0), square_feature(1, 1)])
        write_feature_collection(output, [square_feature(5, 5)])

        assert len(json.loads(output.read_text())["features"]) == 1

    def test_creates_parent_dirs(self, tmp_path: Path) -> None:
        output = tmp_path / "a" / "b" / "out.geojson"
        write_feature_collection(output, [])
        assert output.exists()

    def test_indent(self, tmp_path: Path) -> None:
        output = tmp_path / "pretty.geojson"
        write_feature_collection(output, [], indent=2)
        assert output.read_text().startswith('{\n  "type"')
