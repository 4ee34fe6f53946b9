"""Shared test fixtures for GeoJSON features and files."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


def square_ring(x0: float, y0: float, size: float = 1.0) -> list[list[float]]:
    """Closed counter-clockwise square ring with its lower-left corner at (x0, y0)."""
    return [[x0, y0], [x0 + size, y0], [x0 + size, y0 + size], [x0, y0 + size], [x0, y0]]


def polygon_feature(rings: list, **properties: Any) -> dict[str, Any]:
    return {"type": "Feature", "properties": properties, "geometry": {"type": "Polygon", "coordinates": rings}}


@pytest.fixture
def square_feature() -> Callable[..., dict[str, Any]]:
    """Factory for a square Polygon feature."""

    def _make(x0: float, y0: float, size: float = 1.0, **properties: Any) -> dict[str, Any]:
        return polygon_feature([square_ring(x0, y0, size)], **properties)

    return _make


@pytest.fixture
def write_fc() -> Callable[[Path, list[dict[str, Any]]], Path]:
    """Factory writing a FeatureCollection to a path."""

    def _write(path: Path, features: list[dict[str, Any]]) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps({"type": "FeatureCollection", "features": features}))
        return path

    return _write
