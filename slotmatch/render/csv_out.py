from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence

from ..models.clock import time_from_minutes
from ..models.interval import Interval, Suggestion

HEADER = "Day,Start,End,Minutes"


def describe(s: Suggestion) -> str:
    # clipboard form
    return f"{s.day} {time_from_minutes(s.start_minute)} - {time_from_minutes(s.end_minute)}"


def format_interval(iv: Interval) -> str:
    return f"{iv.day} {time_from_minutes(iv.start_minute)}–{time_from_minutes(iv.end_minute)}"


def text_lines(suggestions: Sequence[Suggestion]) -> List[str]:
    return [describe(s) for s in suggestions]


def csv_block(suggestions: Sequence[Suggestion]) -> str:
    lines: List[str] = [HEADER]
    for s in suggestions:
        lines.append(
            f"{s.day},{time_from_minutes(s.start_minute)},{time_from_minutes(s.end_minute)},{s.duration}"
        )
    return "\n".join(lines)


def write_csv_block(text: str, outputs_dir: Path) -> Path:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    out_path = outputs_dir / "suggestions.csv"
    with out_path.open("w", encoding="utf-8") as f:
        f.write(text + "\n")
    return out_path


def write_suggestions_json(suggestions: Sequence[Suggestion], outputs_dir: Path) -> Path:
    json_dir = outputs_dir / "json"
    json_dir.mkdir(parents=True, exist_ok=True)
    rows = [
        {"day": s.day, "start": s.start_minute, "end": s.end_minute, "label": describe(s)}
        for s in suggestions
    ]
    out_path = json_dir / "suggestions.json"
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(rows, f, indent=2)
    return out_path
