from .dedupe import DEDUPE_MODES, apply_dedupe, drop_duplicates, merge_overlaps
from .overlap import intersect, intersect_sorted
from .pipeline import STRATEGIES, find_suggestions
from .tile import check_duration, tile, tile_all

__all__ = [
    "intersect",
    "intersect_sorted",
    "tile",
    "tile_all",
    "check_duration",
    "drop_duplicates",
    "merge_overlaps",
    "apply_dedupe",
    "find_suggestions",
    "DEDUPE_MODES",
    "STRATEGIES",
]
