from __future__ import annotations

import secrets
from dataclasses import dataclass, field, replace
from typing import Dict, List

from ..errors import UnknownSide
from .interval import Interval, check_interval

SIDES = ("you", "them")
DEFAULT_LABELS = {"you": "You", "them": "GPT"}


def new_interval_id() -> str:
    return secrets.token_hex(4)


@dataclass
class Roster:
    you: List[Interval] = field(default_factory=list)
    them: List[Interval] = field(default_factory=list)
    label_you: str = DEFAULT_LABELS["you"]
    label_them: str = DEFAULT_LABELS["them"]

    def side(self, name: str) -> List[Interval]:
        if name == "you":
            return self.you
        if name == "them":
            return self.them
        raise UnknownSide(f"Unknown side {name!r}; expected one of {', '.join(SIDES)}")

    def label(self, name: str) -> str:
        self.side(name)
        return self.label_you if name == "you" else self.label_them

    def add(self, name: str, interval: Interval) -> Interval:
        check_interval(interval)
        if interval.id is None:
            interval = replace(interval, id=new_interval_id())
        self.side(name).append(interval)
        return interval

    def remove(self, name: str, interval_id: str) -> bool:
        slots = self.side(name)
        kept = [iv for iv in slots if iv.id != interval_id]
        removed = len(kept) != len(slots)
        slots[:] = kept
        return removed

    def clear(self) -> None:
        self.you.clear()
        self.them.clear()

    def counts(self) -> Dict[str, int]:
        return {"you": len(self.you), "them": len(self.them)}
