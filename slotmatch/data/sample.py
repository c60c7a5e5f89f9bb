from __future__ import annotations

from typing import List

from ..models.clock import minutes
from ..models.interval import Interval
from ..models.roster import new_interval_id

SAMPLE_THEM = [
    ("Mon", "08:00", "12:00"),
    ("Tue", "14:00", "18:00"),
    ("Thu", "10:00", "13:00"),
]


def sample_them() -> List[Interval]:
    return [
        Interval(day, minutes(start), minutes(end), id=new_interval_id())
        for day, start, end in SAMPLE_THEM
    ]
