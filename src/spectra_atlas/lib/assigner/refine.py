"""Containment-based district-to-state refinement.

Each district is placed in the first state (in fixed state order) whose
polygons contain the district's centroid. When containment fails the
district keeps its previous state, and failing that goes to the state
whose first outer ring has the nearest centroid.
"""

from collections.abc import Iterable, Sequence

from loguru import logger

from spectra_atlas.lib.assigner.types import Feature, RefineResult, StateBucket
from spectra_atlas.lib.geometry import (
    centroid_of_coords,
    centroid_of_feature,
    feature_identifier,
    planar_distance,
    point_in_polygon,
)
from spectra_atlas.lib.geometry.rings import Point


def _state_contains(state: StateBucket, point: Point) -> bool:
    for polygon in state.polygons:
        try:
            if point_in_polygon(point, polygon):
                return True
        except (TypeError, IndexError, KeyError, ZeroDivisionError):
            logger.debug(f"Skipping malformed polygon in state {state.key}")
    return False


def find_containing_state(states: Sequence[StateBucket], point: Point) -> str | None:
    """Return the key of the first state whose polygons contain the point."""
    for state in states:
        if _state_contains(state, point):
            return state.key
    return None


def find_nearest_state(states: Sequence[StateBucket], point: Point) -> str | None:
    """Return the state whose first polygon's outer-ring centroid is nearest.

    Distance is planar in lon/lat degrees. States without polygons or
    without a usable first ring are ignored; ties keep the earlier state.
    """
    best: str | None = None
    best_d = float("inf")
    for state in states:
        if not state.polygons or not state.polygons[0]:
            continue
        try:
            c = centroid_of_coords(state.polygons[0][0])
        except (TypeError, IndexError, KeyError):
            c = None
        if c is None:
            continue
        d = planar_distance(c, point)
        if d < best_d:
            best_d = d
            best = state.key
    return best


def refine_by_containment(
    districts: Iterable[Feature],
    states: Sequence[StateBucket],
    previous: dict[str, str],
) -> RefineResult:
    """Assign every district to a state bucket.

    Args:
        districts: District features from the raw source.
        states: State buckets in fixed order.
        previous: District identifier to state key from the existing files.

    Returns:
        RefineResult with per-state buckets (in state order) and counters.
        ``files_written`` is left at 0; see ``write_state_buckets``.
    """
    buckets: dict[str, list[Feature]] = {s.key: [] for s in states}
    result = RefineResult(buckets=buckets)

    for feature in districts:
        result.total += 1
        ident = feature_identifier(feature)
        prior = previous.get(ident) if ident else None

        centroid = centroid_of_feature(feature)
        if centroid is None:
            if prior is not None:
                buckets.setdefault(prior, []).append(feature)
            else:
                result.dropped += 1
                logger.warning(f"Dropping district {ident or result.total}: no centroid and no previous state")
            continue

        key = find_containing_state(states, centroid)
        if key is None:
            key = prior or find_nearest_state(states, centroid)
        if key is None:
            key = next(iter(buckets), None)
        if key is None:
            result.dropped += 1
            logger.warning(f"Dropping district {ident or result.total}: no state buckets")
            continue

        if prior is not None and prior != key:
            result.reassignments += 1
            logger.debug(f"Reassigned {ident}: {prior} -> {key}")
        buckets.setdefault(key, []).append(feature)

    return result
