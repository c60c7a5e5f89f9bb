from collections import Counter
from pathlib import Path

import pytest
from typer.testing import CliRunner

from slotmatch.cli.main import app, run_pipeline
from slotmatch.data import save_state
from slotmatch.models import Interval, Roster
from slotmatch.scheduler import find_suggestions

runner = CliRunner()

YOU = [
    Interval("Mon", 480, 720),
    Interval("Mon", 600, 900),
    Interval("Tue", 0, 1440),
]
THEM = [
    Interval("Mon", 700, 800),
    Interval("Mon", 400, 500),
    Interval("Tue", 1000, 1100),
    Interval("Tue", 10, 20),
]


def test_sorted_strategy_gives_same_suggestions() -> None:
    nested = find_suggestions(YOU, THEM, 20, strategy="nested")
    swept = find_suggestions(YOU, THEM, 20, strategy="sorted")
    assert nested
    assert Counter(nested) == Counter(swept)
    assert Counter(find_suggestions(YOU, THEM, 20, dedupe="merge", strategy="sorted")) == Counter(
        find_suggestions(YOU, THEM, 20, dedupe="merge")
    )


def test_unknown_strategy_rejected() -> None:
    with pytest.raises(ValueError):
        find_suggestions(YOU, THEM, 20, strategy="bogus")


def test_suggest_strategy_option(tmp_path: Path) -> None:
    roster = Roster()
    roster.add("you", Interval("Mon", 540, 600))
    roster.add("them", Interval("Mon", 570, 630))
    save_state(roster, tmp_path / "schedule-matcher.json")
    root = ["--root", str(tmp_path)]

    result = runner.invoke(app, ["suggest", "--min-duration", "15", "--strategy", "sorted", "--csv", *root])
    assert result.exit_code == 0, result.output
    assert "Mon,09:30,09:45,15" in result.stdout
    assert "Mon,09:45,10:00,15" in result.stdout
    assert runner.invoke(app, ["suggest", "--strategy", "bogus", *root]).exit_code == 1


def test_configured_labels_apply_without_state(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "matcher.toml").write_text(
        '[matcher]\nlabel_you = "Ana"\nlabel_them = "Sam"\n', encoding="utf-8"
    )
    run_pipeline(tmp_path)
    html = (tmp_path / "outputs" / "ui" / "index.html").read_text(encoding="utf-8")
    assert "Ana + Sam" in html
    assert "<h2>Ana</h2>" in html
