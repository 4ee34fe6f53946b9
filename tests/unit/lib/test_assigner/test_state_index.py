"""Unit tests for loading per-state files."""

from pathlib import Path

import pytest

from spectra_atlas.lib.assigner import list_state_files, load_state_index


class TestLoadStateIndex:
    """Tests for load_state_index."""

    def test_loads_states_in_filename_order(self, tmp_path: Path, square_feature, write_fc) -> None:
        write_fc(tmp_path / "kerala.geojson", [square_feature(10, 0, shapeID="k1")])
        write_fc(tmp_path / "goa.geojson", [square_feature(0, 0, shapeID="g1"), square_feature(2, 2, shapeID="g2")])
        (tmp_path / "notes.txt").write_text("ignored")

        index = load_state_index(tmp_path)

        assert [state.key for state in index.states] == ["goa", "kerala"]
        assert len(index.states[0].polygons) == 2
        assert index.previous == {"g1": "goa", "g2": "goa", "k1": "kerala"}

    def test_multipolygon_parts_are_separate_polygons(self, tmp_path: Path, write_fc) -> None:
        feature = {
            "type": "Feature",
            "properties": {"shapeName": "Islands"},
            "geometry": {
                "type": "MultiPolygon",
                "coordinates": [[[[0, 0], [1, 0], [1, 1], [0, 0]]], [[[5, 5], [6, 5], [6, 6], [5, 5]]]],
            },
        }
        write_fc(tmp_path / "lakshadweep.geojson", [feature])

        index = load_state_index(tmp_path)
        assert len(index.states[0].polygons) == 2
        assert index.previous == {"Islands": "lakshadweep"}

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="not found"):
            load_state_index(tmp_path / "missing")

    def test_empty_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="No per-state"):
            load_state_index(tmp_path)

    def test_list_state_files(self, tmp_path: Path, write_fc) -> None:
        write_fc(tmp_path / "b.geojson", [])
        write_fc(tmp_path / "a.geojson", [])
        assert [p.name for p in list_state_files(tmp_path)] == ["a.geojson", "b.geojson"]

    def test_malformed_features_contribute_nothing(self, tmp_path: Path, square_feature, write_fc) -> None:
        write_fc(
            tmp_path / "goa.geojson",
            [
                {"type": "Feature", "properties": ["x"], "geometry": "garbage"},
                {"type": "Feature", "properties": {"shapeID": "g1"}, "geometry": {"type": "Polygon", "coordinates": 5}},
                square_feature(0, 0, shapeID="g2"),
            ],
        )

        index = load_state_index(tmp_path)

        assert len(index.states[0].polygons) == 1
        assert index.previous == {"g1": "goa", "g2": "goa"}
