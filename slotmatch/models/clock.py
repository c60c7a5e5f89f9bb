from __future__ import annotations

import re

from ..errors import InvalidInterval
from .interval import MINUTES_PER_DAY

CLOCK_RE = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)


def minutes(hhmm: str) -> int:
    # "09:30" -> 570; "24:00" is allowed as an end of day marker
    m = CLOCK_RE.fullmatch(hhmm.strip())
    if m is None:
        raise InvalidInterval(f"Not a HH:MM time: {hhmm!r}")
    h, mins = int(m.group(1)), int(m.group(2))
    total = h * 60 + mins
    if mins >= 60 or total > MINUTES_PER_DAY:
        raise InvalidInterval(f"Time out of range: {hhmm!r}")
    return total


def time_from_minutes(mins: int) -> str:
    h, m = divmod(mins, 60)
    return f"{h:02d}:{m:02d}"
