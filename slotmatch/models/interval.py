from dataclasses import dataclass, field

from ..errors import InvalidInterval

MINUTES_PER_DAY = 1440


@dataclass(frozen=True)
class Interval:
    day: str
    start_minute: int
    end_minute: int
    id: str | None = field(default=None, compare=False)

    @property
    def duration(self) -> int:
        return self.end_minute - self.start_minute


@dataclass(frozen=True)
class Overlap:
    day: str
    start_minute: int
    end_minute: int

    @property
    def duration(self) -> int:
        return self.end_minute - self.start_minute


@dataclass(frozen=True)
class Suggestion:
    day: str
    start_minute: int
    end_minute: int

    @property
    def duration(self) -> int:
        return self.end_minute - self.start_minute


def check_interval(iv: Interval) -> Interval:
    if not iv.day:
        raise InvalidInterval("Interval has no day label")
    if not (0 <= iv.start_minute < MINUTES_PER_DAY):
        raise InvalidInterval(f"Start minute {iv.start_minute} outside [0, {MINUTES_PER_DAY})")
    if not (0 < iv.end_minute <= MINUTES_PER_DAY):
        raise InvalidInterval(f"End minute {iv.end_minute} outside (0, {MINUTES_PER_DAY}]")
    if iv.end_minute <= iv.start_minute:
        raise InvalidInterval("End time must be after start time")
    return iv
