from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Sequence

from ..errors import InvalidInterval
from ..models.interval import Interval, check_interval
from ..models.roster import SIDES, Roster
from ..scheduler.tile import check_duration

__all__ = ["check_interval", "check_duration", "valid_intervals", "validate_roster"]


def valid_intervals(intervals: Sequence[Interval]) -> List[Interval]:
    out: List[Interval] = []
    for iv in intervals:
        try:
            check_interval(iv)
        except InvalidInterval:
            continue
        out.append(iv)
    return out


def validate_roster(roster: Roster, days: Sequence[str]) -> Dict[str, object]:
    report: Dict[str, object] = {}
    report["interval_count"] = roster.counts()

    invalid: List[str] = []
    unknown_days: Dict[str, List[str]] = defaultdict(list)
    known = set(days)
    for side in SIDES:
        for iv in roster.side(side):
            try:
                check_interval(iv)
            except InvalidInterval as exc:
                invalid.append(f"{side} {iv.id or '-'} {iv.day} {iv.start_minute}-{iv.end_minute}: {exc}")
            # day labels are opaque to matching; unknown ones are reported, not dropped
            if known and iv.day not in known:
                unknown_days[side].append(iv.day)
    report["invalid_intervals"] = invalid
    report["unknown_days"] = dict(unknown_days)
    return report
