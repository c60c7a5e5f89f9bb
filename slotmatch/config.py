from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

DEFAULT_DAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


@dataclass
class MatcherSettings:
    min_duration: int = 30
    days: List[str] = field(default_factory=lambda: list(DEFAULT_DAYS))
    label_you: str = "You"
    label_them: str = "GPT"
    state_file: str = "schedule-matcher.json"
    share_base_url: str = "https://localhost/"
    dedupe: str = "none"
    strategy: str = "nested"

    def state_path(self, project_root: Path) -> Path:
        return Path(project_root) / self.state_file


def load_settings(project_root: Path | str | None = None) -> MatcherSettings:
    """Load settings from configs/matcher.toml if present, else defaults.

    Keys may sit at the top level or under [matcher]. A file that does not
    parse is reported and ignored.
    """
    base = MatcherSettings()
    root = Path.cwd() if project_root is None else Path(project_root)
    cfg = root / "configs" / "matcher.toml"
    if not cfg.exists():
        return base
    try:
        data: Dict[str, Any] = tomllib.loads(cfg.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        logging.getLogger(__name__).warning(f"Ignoring unreadable {cfg}: {exc}")
        return base
    w = data.get("matcher") if isinstance(data.get("matcher"), dict) else data

    def get_int(name: str, default: int) -> int:
        v = w.get(name, default)
        return v if isinstance(v, int) and not isinstance(v, bool) else default

    def get_str(name: str, default: str) -> str:
        v = w.get(name, default)
        return v if isinstance(v, str) else default

    days = w.get("days")
    return MatcherSettings(
        min_duration=get_int("min_duration", base.min_duration),
        days=[str(d) for d in days] if isinstance(days, list) and days else base.days,
        label_you=get_str("label_you", base.label_you),
        label_them=get_str("label_them", base.label_them),
        state_file=get_str("state_file", base.state_file),
        share_base_url=get_str("share_base_url", base.share_base_url),
        dedupe=get_str("dedupe", base.dedupe),
        strategy=get_str("strategy", base.strategy),
    )
