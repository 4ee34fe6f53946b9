"""District assigner library — groups district features into per-state files.

Public API:
    - load_state_index: Load existing per-state files (states + previous assignments)
    - refine_by_containment: Centroid-in-polygon assignment with fallbacks
    - split_by_nearest_state: Initial split by nearest state point
    - state_points: Reduce state features to named points
    - write_state_buckets: Write one FeatureCollection per non-empty bucket
    - dissolve_state_dir / dissolve_state_file: Union per-state districts into outlines
"""

from spectra_atlas.lib.assigner.dissolve import (
    DissolveResult,
    dissolve_features,
    dissolve_state_dir,
    dissolve_state_file,
)
from spectra_atlas.lib.assigner.refine import find_containing_state, find_nearest_state, refine_by_containment
from spectra_atlas.lib.assigner.split import split_by_nearest_state, state_points
from spectra_atlas.lib.assigner.state_index import list_state_files, load_state_index
from spectra_atlas.lib.assigner.types import RefineResult, SplitResult, StateBucket, StateIndex
from spectra_atlas.lib.assigner.writer import write_state_buckets

__all__ = [
    "DissolveResult",
    "RefineResult",
    "SplitResult",
    "StateBucket",
    "StateIndex",
    "dissolve_features",
    "dissolve_state_dir",
    "dissolve_state_file",
    "find_containing_state",
    "find_nearest_state",
    "list_state_files",
    "load_state_index",
    "refine_by_containment",
    "split_by_nearest_state",
    "state_points",
    "write_state_buckets",
]
