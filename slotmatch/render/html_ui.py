from __future__ import annotations

from html import escape
from pathlib import Path
from typing import Dict, List, Sequence

from ..models.interval import Interval, Suggestion
from ..models.roster import Roster
from .csv_out import describe, format_interval

SIDE_COLORS = {
    "you": "#e6f7ff",
    "them": "#f0e6ff",
}


def _side_list(intervals: Sequence[Interval], days: List[str]) -> str:
    if not intervals:
        return "<p class='empty'>No availability yet.</p>"

    def order(iv: Interval) -> tuple:
        # unknown labels sort after the configured week
        return (days.index(iv.day) if iv.day in days else len(days), iv.start_minute)

    items = "".join(
        f"<li><span class='when'>{escape(format_interval(iv))}</span>"
        f" <span class='id'>{escape(iv.id or '')}</span></li>"
        for iv in sorted(intervals, key=order)
    )
    return f"<ul>{items}</ul>"


def build_html(
    roster: Roster,
    suggestions: Sequence[Suggestion],
    min_duration: int,
    days: List[str],
) -> str:
    columns = []
    for side in ("you", "them"):
        columns.append(
            f"<section class='side' style=\"background:{SIDE_COLORS[side]}\">"
            f"<h2>{escape(roster.label(side))}</h2>"
            f"{_side_list(roster.side(side), days)}"
            f"</section>"
        )

    by_day: Dict[str, List[Suggestion]] = {}
    for s in suggestions:
        by_day.setdefault(s.day, []).append(s)
    if not suggestions:
        body = "<p class='empty'>No matching slots. Add availability on both sides and try again.</p>"
    else:
        rows = []
        for day, items in by_day.items():
            cells = "".join(f"<li>{escape(describe(s))}</li>" for s in items)
            rows.append(f"<tr><th class='day'>{escape(day)}</th><td><ul>{cells}</ul></td></tr>")
        body = f"<table class='slots'><tbody>{''.join(rows)}</tbody></table>"

    style = """
    <style>
    body { font-family: system-ui, Arial, sans-serif; margin: 20px; color: #222; }
    .sides { display:flex; gap:16px; flex-wrap:wrap; }
    .side { flex:1; min-width: 240px; padding: 8px 16px; border:1px solid #ddd; border-radius: 6px; }
    .id { font-size: 11px; color:#888; }
    .slots { border-collapse: collapse; width: 100%; margin-top: 12px; }
    .slots th, .slots td { border: 1px solid #ddd; padding: 6px; vertical-align: top; text-align: left; }
    .slots .day { background:#fafafa; width: 90px; }
    .empty { color:#666; font-style: italic; }
    </style>
    """

    title = f"{escape(roster.label_you)} + {escape(roster.label_them)}"
    return (
        "<html><head><meta charset='utf-8'><title>Schedule matcher</title>" + style + "</head><body>"
        f"<h1>{title}</h1>"
        f"<div class='sides'>{''.join(columns)}</div>"
        f"<h2>Suggested {min_duration}-minute slots ({len(suggestions)})</h2>"
        + body
        + "</body></html>"
    )


def write_html_ui(
    roster: Roster,
    suggestions: Sequence[Suggestion],
    min_duration: int,
    days: List[str],
    outputs_dir: Path,
) -> Path:
    ui_dir = outputs_dir / "ui"
    ui_dir.mkdir(parents=True, exist_ok=True)
    html = build_html(roster, suggestions, min_duration, days)
    out_path = ui_dir / "index.html"
    out_path.write_text(html, encoding="utf-8")
    return out_path
