from __future__ import annotations

import json
from pathlib import Path
from typing import Dict


def write_validation_report(report: Dict[str, object], outputs_dir: Path) -> Path:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    out_path = outputs_dir / "validation.json"
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)
    return out_path


def format_validation_report(report: Dict[str, object]) -> str:
    lines: list[str] = []
    counts = report.get("interval_count", {})
    if isinstance(counts, dict):
        lines.append("interval_count: " + ", ".join(f"{k}={v}" for k, v in counts.items()))
    invalid = report.get("invalid_intervals", [])
    lines.append(f"invalid_intervals: {len(invalid)}")
    if isinstance(invalid, list):
        for item in invalid:
            lines.append(f"  - {item}")
    unknown = report.get("unknown_days", {})
    lines.append("unknown_days:")
    if isinstance(unknown, dict):
        for side, labels in unknown.items():
            lines.append(f"  - {side}: {', '.join(sorted(set(labels)))}")
    return "\n".join(lines)
