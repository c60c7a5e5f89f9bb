from __future__ import annotations

from typing import Iterable, List

from ..errors import InvalidDuration
from ..models.interval import Overlap, Suggestion


def check_duration(min_duration: int) -> int:
    if isinstance(min_duration, bool) or not isinstance(min_duration, int):
        raise InvalidDuration(f"Meeting length must be an integer number of minutes, got {min_duration!r}")
    if min_duration <= 0:
        raise InvalidDuration(f"Meeting length must be positive, got {min_duration}")
    return min_duration


def tile(overlap: Overlap, min_duration: int) -> List[Suggestion]:
    check_duration(min_duration)
    out: List[Suggestion] = []
    if overlap.end_minute - overlap.start_minute < min_duration:
        return out
    cur = overlap.start_minute
    # back to back slots; a tail shorter than min_duration is dropped
    while cur + min_duration <= overlap.end_minute:
        out.append(Suggestion(overlap.day, cur, cur + min_duration))
        cur += min_duration
    return out


def tile_all(overlaps: Iterable[Overlap], min_duration: int) -> List[Suggestion]:
    check_duration(min_duration)
    out: List[Suggestion] = []
    for o in overlaps:
        out.extend(tile(o, min_duration))
    return out
