"""Pairwise intersection of two availability sides.

Both functions are pure: they read their arguments and return fresh lists.
Intervals are assumed well formed; validation happens before they get here.
"""
from __future__ import annotations

from bisect import bisect_left
from collections import defaultdict
from typing import Dict, List, Sequence

from ..models.interval import Interval, Overlap


def intersect(side_a: Sequence[Interval], side_b: Sequence[Interval]) -> List[Overlap]:
    """Every same-day pair with a positive-length intersection.

    Result order follows the nested loop: A outer, B inner, in the order
    supplied. Intervals that only touch (one ends where the other starts)
    produce nothing. Duplicate overlaps are kept.
    """
    out: List[Overlap] = []
    for a in side_a:
        for b in side_b:
            if a.day != b.day:
                continue
            start = max(a.start_minute, b.start_minute)
            end = min(a.end_minute, b.end_minute)
            if end > start:
                out.append(Overlap(a.day, start, end))
    return out


def intersect_sorted(side_a: Sequence[Interval], side_b: Sequence[Interval]) -> List[Overlap]:
    """Same overlaps as `intersect`, found with a per-day sorted index of B.

    B is bucketed by day and sorted by start once, so for each interval of A
    only the B intervals starting before it ends are looked at. Within one
    A interval the overlaps come out in B's start order.
    """
    by_day: Dict[str, List[Interval]] = defaultdict(list)
    for b in side_b:
        by_day[b.day].append(b)
    starts: Dict[str, List[int]] = {}
    for day, bucket in by_day.items():
        bucket.sort(key=lambda iv: (iv.start_minute, iv.end_minute))
        starts[day] = [iv.start_minute for iv in bucket]

    out: List[Overlap] = []
    for a in side_a:
        bucket = by_day.get(a.day)
        if not bucket:
            continue
        # B intervals at index >= stop start at or after a ends
        stop = bisect_left(starts[a.day], a.end_minute)
        for b in bucket[:stop]:
            if b.end_minute <= a.start_minute:
                continue
            start = max(a.start_minute, b.start_minute)
            end = min(a.end_minute, b.end_minute)
            if end > start:
                out.append(Overlap(a.day, start, end))
    return out
