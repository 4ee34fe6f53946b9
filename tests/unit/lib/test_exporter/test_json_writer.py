"""Tests for the JSON export writer."""

import json
from pathlib import Path

from spectra_atlas.lib.exporter import write_json


class TestJSONWriter:
    """Tests for write_json."""

    def test_writes_array_of_records(self, tmp_path: Path) -> None:
        output = tmp_path / "samples.json"
        records = [
            {"sample_no": "1", "raman_shift": [100.0, 200.0]},
            {"sample_no": "2", "raman_shift": []},
        ]
        assert write_json(output, records) == 2

        data = json.loads(output.read_text())
        assert data == records

    def test_accepts_generator(self, tmp_path: Path) -> None:
        output = tmp_path / "samples.json"
        count = write_json(output, ({"n": i} for i in range(3)))
        assert count == 3
        assert json.loads(output.read_text())[2] == {"n": 2}

    def test_empty_records(self, tmp_path: Path) -> None:
        output = tmp_path / "samples.json"
        assert write_json(output, []) == 0
        assert json.loads(output.read_text()) == []

    def test_one_record_per_line(self, tmp_path: Path) -> None:
        output = tmp_path / "samples.json"
        write_json(output, [{"sample_name": "Quartz α"}, {"sample_name": "Calcite"}])

        lines = output.read_text(encoding="utf-8").splitlines()
        assert lines == ["[", '{"sample_name": "Quartz α"},', '{"sample_name": "Calcite"}', "]"]
