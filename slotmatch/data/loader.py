from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from ..errors import InvalidInterval, StateError
from ..models.interval import Interval
from ..models.roster import DEFAULT_LABELS, Roster


def interval_to_dict(iv: Interval) -> Dict[str, Any]:
    return {"id": iv.id, "day": iv.day, "startMin": iv.start_minute, "endMin": iv.end_minute}


def interval_from_dict(raw: Dict[str, Any]) -> Interval:
    try:
        return Interval(
            day=str(raw["day"]),
            start_minute=int(raw["startMin"]),
            end_minute=int(raw["endMin"]),
            id=None if raw.get("id") is None else str(raw["id"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidInterval(f"Malformed interval entry {raw!r}") from exc


def roster_to_payload(roster: Roster) -> Dict[str, Any]:
    return {
        "you": [interval_to_dict(iv) for iv in roster.you],
        "them": [interval_to_dict(iv) for iv in roster.them],
        "labelYou": roster.label_you,
        "labelThem": roster.label_them,
    }


def _intervals(raw: Any) -> List[Interval]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise StateError(f"Expected a list of intervals, got {type(raw).__name__}")
    return [interval_from_dict(x) for x in raw]


def _label(payload: Dict[str, Any], key: str, default: str) -> str:
    # an empty stored label is kept; only a missing one falls back
    value = payload.get(key)
    return default if value is None else str(value)


def roster_from_payload(payload: Any) -> Roster:
    # Intervals are restored as stored; validate_roster reports bad ones
    if not isinstance(payload, dict):
        raise StateError(f"Expected a JSON object, got {type(payload).__name__}")
    try:
        return Roster(
            you=_intervals(payload.get("you")),
            them=_intervals(payload.get("them")),
            label_you=_label(payload, "labelYou", DEFAULT_LABELS["you"]),
            label_them=_label(payload, "labelThem", DEFAULT_LABELS["them"]),
        )
    except InvalidInterval as exc:
        raise StateError(str(exc)) from exc


def load_state(path: Path) -> Roster:
    try:
        with path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise StateError(f"Failed to read {path}: {exc}") from exc
    return roster_from_payload(payload)


def load_saved(path: Path) -> Roster:
    """Restore the last saved roster; an absent or corrupt file gives an empty one."""
    if not path.exists():
        return Roster()
    try:
        return load_state(path)
    except StateError as exc:
        logging.getLogger(__name__).warning(f"Ignoring saved state: {exc}")
        return Roster()


def save_state(roster: Roster, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(roster_to_payload(roster), f, indent=2)
    return path


def clear_state(path: Path) -> None:
    path.unlink(missing_ok=True)


# Export/import go to a user-chosen file; import is strict
export_state = save_state
import_state = load_state
