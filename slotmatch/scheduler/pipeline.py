from __future__ import annotations

import logging
from typing import List, Sequence

from ..models.interval import Interval, Suggestion
from .dedupe import apply_dedupe
from .overlap import intersect, intersect_sorted
from .tile import check_duration, tile_all

STRATEGIES = {"nested": intersect, "sorted": intersect_sorted}


def find_suggestions(
    side_a: Sequence[Interval],
    side_b: Sequence[Interval],
    min_duration: int,
    *,
    dedupe: str = "none",
    strategy: str = "nested",
) -> List[Suggestion]:
    logger = logging.getLogger(__name__)
    check_duration(min_duration)
    try:
        intersector = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown intersect strategy {strategy!r}; expected one of {', '.join(STRATEGIES)}"
        ) from None
    overlaps = intersector(side_a, side_b)
    logger.debug(f"Intersect({strategy}) {len(side_a)}x{len(side_b)} -> {len(overlaps)} overlaps")
    overlaps = apply_dedupe(overlaps, dedupe)
    logger.debug(f"Dedupe({dedupe}) -> {len(overlaps)} overlaps")
    suggestions = tile_all(overlaps, min_duration)
    logger.debug(f"Tile({min_duration}m) -> {len(suggestions)} suggestions")
    return suggestions
