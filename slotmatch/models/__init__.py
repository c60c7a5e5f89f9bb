
# Re-export common types
from .interval import MINUTES_PER_DAY, Interval, Overlap, Suggestion
from .clock import minutes, time_from_minutes
from .roster import SIDES, Roster

__all__ = [
    "MINUTES_PER_DAY",
    "Interval",
    "Overlap",
    "Suggestion",
    "Roster",
    "SIDES",
    "minutes",
    "time_from_minutes",
]
