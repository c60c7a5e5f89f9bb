from __future__ import annotations

from typing import Dict, Iterable, List, TypeVar

from ..models.interval import Overlap

T = TypeVar("T")

DEDUPE_MODES = ("none", "exact", "merge")


def drop_duplicates(values: Iterable[T]) -> List[T]:
    # first occurrence wins; values are frozen dataclasses so they hash by field
    seen: set = set()
    out: List[T] = []
    for v in values:
        if v in seen:
            continue
        seen.add(v)
        out.append(v)
    return out


def merge_overlaps(overlaps: Iterable[Overlap]) -> List[Overlap]:
    """Collapse overlapping or touching spans on the same day.

    Days keep the order in which they first appear; spans within a day are
    sorted by start.
    """
    by_day: Dict[str, List[Overlap]] = {}
    for o in overlaps:
        by_day.setdefault(o.day, []).append(o)

    out: List[Overlap] = []
    for day, spans in by_day.items():
        spans.sort(key=lambda o: (o.start_minute, o.end_minute))
        cur_start, cur_end = spans[0].start_minute, spans[0].end_minute
        for o in spans[1:]:
            if o.start_minute <= cur_end:
                cur_end = max(cur_end, o.end_minute)
                continue
            out.append(Overlap(day, cur_start, cur_end))
            cur_start, cur_end = o.start_minute, o.end_minute
        out.append(Overlap(day, cur_start, cur_end))
    return out


def apply_dedupe(overlaps: List[Overlap], mode: str) -> List[Overlap]:
    if mode == "none":
        return list(overlaps)
    if mode == "exact":
        return drop_duplicates(overlaps)
    if mode == "merge":
        return merge_overlaps(overlaps)
    raise ValueError(f"Unknown dedupe mode {mode!r}; expected one of {', '.join(DEDUPE_MODES)}")
