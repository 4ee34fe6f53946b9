"""Data types shared by the district-to-state assignment steps."""

from dataclasses import dataclass, field
from typing import Any

from spectra_atlas.lib.geometry.rings import PolygonCoords

Feature = dict[str, Any]


@dataclass
class StateBucket:
    """A state key and the polygons used for containment tests."""

    key: str
    polygons: list[PolygonCoords] = field(default_factory=list)


@dataclass
class StateIndex:
    """Per-state files loaded from disk, in fixed (sorted filename) order.

    ``previous`` maps each district identifier found in the files to the
    state key it was stored under.
    """

    states: list[StateBucket] = field(default_factory=list)
    previous: dict[str, str] = field(default_factory=dict)


@dataclass
class RefineResult:
    """Outcome of a containment refinement run."""

    buckets: dict[str, list[Feature]]
    total: int = 0
    reassignments: int = 0
    dropped: int = 0
    files_written: int = 0


@dataclass
class SplitResult:
    """Outcome of a nearest-state split run."""

    buckets: dict[str, list[Feature]]
    names: dict[str, str] = field(default_factory=dict)
    total: int = 0
    unassigned: int = 0
    files_written: int = 0
