"""Initial district-to-state split by nearest state point (great-circle)."""

from collections.abc import Iterable, Sequence

from loguru import logger

from spectra_atlas.lib.assigner.types import Feature, SplitResult
from spectra_atlas.lib.geometry import centroid_of_feature, feature_name, haversine_km, slugify
from spectra_atlas.lib.geometry.rings import Point


def state_points(states: Iterable[Feature]) -> list[tuple[str, Point | None]]:
    """Reduce state features to ``(name, representative point)`` pairs."""
    return [(feature_name(f), centroid_of_feature(f)) for f in states]


def split_by_nearest_state(
    districts: Iterable[Feature],
    states: Sequence[tuple[str, Point | None]],
) -> SplitResult:
    """Bucket districts under the state whose point is nearest by haversine distance.

    Buckets are keyed by the slug of the state name and created for every
    state up front, in input order.

    Args:
        districts: District features.
        states: ``(name, point)`` pairs from ``state_points``.

    Returns:
        SplitResult; districts without a centroid, or with no state point to
        compare against, are counted as unassigned.
    """
    result = SplitResult(buckets={})
    for name, _ in states:
        key = slugify(name)
        result.buckets.setdefault(key, [])
        result.names.setdefault(key, name)

    for feature in districts:
        result.total += 1
        c = centroid_of_feature(feature)
        if c is None:
            result.unassigned += 1
            continue

        best_name: str | None = None
        best_d = float("inf")
        for name, point in states:
            if point is None:
                continue
            d = haversine_km(c, point)
            if d < best_d:
                best_d = d
                best_name = name

        if best_name is None:
            result.unassigned += 1
            continue
        result.buckets[slugify(best_name)].append(feature)

    if result.unassigned:
        logger.warning(f"{result.unassigned} districts could not be assigned to a state")
    return result
