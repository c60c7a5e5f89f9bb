from __future__ import annotations

import logging
from pathlib import Path
from typing import List, NoReturn

import typer

from ..config import MatcherSettings, load_settings
from ..data import (
    clear_state,
    decode_share,
    export_state,
    import_state,
    load_saved,
    sample_them,
    save_state,
    share_link,
)
from ..errors import SlotmatchError
from ..models import Interval, Roster, Suggestion, minutes
from ..render import csv_block, format_interval, text_lines, write_csv_block, write_html_ui, write_suggestions_json
from ..scheduler import find_suggestions
from ..validate import format_validation_report, valid_intervals, validate_roster, write_validation_report


def _setup_logging(project_root: Path) -> None:
    logs_dir = project_root / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(logs_dir / "slotmatch.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def _load_roster(settings: MatcherSettings, path: Path) -> Roster:
    roster = load_saved(path)
    if not path.exists():
        roster.label_you, roster.label_them = settings.label_you, settings.label_them
    return roster


def run_pipeline(
    project_root: Path,
    *,
    min_duration: int | None = None,
    dedupe: str | None = None,
    strategy: str | None = None,
    log_level: int | None = None,
) -> tuple[str, str, List[Suggestion]]:
    _setup_logging(project_root)
    if log_level is not None:
        logging.getLogger().setLevel(log_level)
    logger = logging.getLogger(__name__)
    settings = load_settings(project_root)
    duration = settings.min_duration if min_duration is None else min_duration
    roster = _load_roster(settings, settings.state_path(project_root))

    report = validate_roster(roster, settings.days)
    if report["invalid_intervals"]:
        logger.warning(f"Skipping {len(report['invalid_intervals'])} invalid intervals")
    you = valid_intervals(roster.you)
    them = valid_intervals(roster.them)

    suggestions = find_suggestions(
        you,
        them,
        duration,
        dedupe=dedupe or settings.dedupe,
        strategy=strategy or settings.strategy,
    )
    logger.info(
        f"Matched {roster.label_you} ({len(you)}) with {roster.label_them} ({len(them)}): "
        f"{len(suggestions)} slots of {duration}m"
    )

    outputs_dir = project_root / "outputs"
    write_validation_report(report, outputs_dir)
    csv = csv_block(suggestions)
    write_csv_block(csv, outputs_dir)
    write_suggestions_json(suggestions, outputs_dir)
    write_html_ui(roster, suggestions, duration, settings.days, outputs_dir)

    lines = text_lines(suggestions) or ["No matching slots."]
    summary = "\n".join([format_validation_report(report), "", "Suggestions:"] + lines)
    return csv, summary, suggestions


app = typer.Typer(add_completion=False, help="Find common free time between two weekly schedules")

ROOT_OPTION = typer.Option(Path("."), "--root", help="Project directory (configs, state, outputs)")


def _open(root: Path) -> tuple[MatcherSettings, Path, Roster]:
    root = root.resolve()
    _setup_logging(root)
    settings = load_settings(root)
    path = settings.state_path(root)
    return settings, path, _load_roster(settings, path)


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command("suggest")
def cli_suggest(
    min_duration: int | None = typer.Option(None, help="Meeting length in minutes"),
    dedupe: str | None = typer.Option(None, help="Overlap dedupe: none, exact or merge"),
    strategy: str | None = typer.Option(None, help="Intersection strategy: nested or sorted"),
    csv: bool = typer.Option(False, "--csv", help="Print CSV instead of text"),
    log_level: str = typer.Option("INFO", help="Log level"),
    root: Path = ROOT_OPTION,
) -> None:
    level = getattr(logging, log_level.upper(), logging.INFO)
    try:
        csv_text, summary, _ = run_pipeline(
            root.resolve(), min_duration=min_duration, dedupe=dedupe, strategy=strategy, log_level=level
        )
    except ValueError as exc:
        _fail(exc)
    typer.echo(csv_text if csv else summary)


@app.command("add")
def cli_add(
    side: str = typer.Argument(..., help="you or them"),
    day: str = typer.Argument(..., help="Day label, e.g. Mon"),
    start: str = typer.Argument(..., help="Start time HH:MM"),
    end: str = typer.Argument(..., help="End time HH:MM"),
    root: Path = ROOT_OPTION,
) -> None:
    settings, path, roster = _open(root)
    try:
        if day not in settings.days:
            raise SlotmatchError(f"Unknown day {day!r}; expected one of {', '.join(settings.days)}")
        added = roster.add(side, Interval(day, minutes(start), minutes(end)))
    except SlotmatchError as exc:
        _fail(exc)
    save_state(roster, path)
    logging.getLogger(__name__).info(f"Add {side} {format_interval(added)} ({added.id})")
    typer.echo(added.id)


@app.command("remove")
def cli_remove(
    side: str = typer.Argument(..., help="you or them"),
    interval_id: str = typer.Argument(..., help="Interval id as shown by `list`"),
    root: Path = ROOT_OPTION,
) -> None:
    _, path, roster = _open(root)
    try:
        removed = roster.remove(side, interval_id)
    except SlotmatchError as exc:
        _fail(exc)
    if not removed:
        _fail(SlotmatchError(f"No {side} interval with id {interval_id!r}"))
    save_state(roster, path)


@app.command("list")
def cli_list(root: Path = ROOT_OPTION) -> None:
    _, _, roster = _open(root)
    for side in ("you", "them"):
        typer.echo(f"{roster.label(side)}:")
        for iv in roster.side(side):
            typer.echo(f"  {iv.id}  {format_interval(iv)}")


@app.command("clear")
def cli_clear(root: Path = ROOT_OPTION) -> None:
    _, path, _ = _open(root)
    clear_state(path)


@app.command("sample")
def cli_sample(root: Path = ROOT_OPTION) -> None:
    """Replace the other side with a sample week."""
    _, path, roster = _open(root)
    roster.them[:] = sample_them()
    save_state(roster, path)


@app.command("labels")
def cli_labels(
    you: str | None = typer.Option(None, "--you", help="Label for your side"),
    them: str | None = typer.Option(None, "--them", help="Label for the other side"),
    root: Path = ROOT_OPTION,
) -> None:
    _, path, roster = _open(root)
    if you:
        roster.label_you = you
    if them:
        roster.label_them = them
    save_state(roster, path)
    typer.echo(f"{roster.label_you} / {roster.label_them}")


@app.command("export")
def cli_export(target: Path = typer.Argument(..., help="File to write"), root: Path = ROOT_OPTION) -> None:
    _, _, roster = _open(root)
    export_state(roster, target)


@app.command("import")
def cli_import(source: Path = typer.Argument(..., help="File to read"), root: Path = ROOT_OPTION) -> None:
    _, path, _ = _open(root)
    try:
        roster = import_state(source)
    except SlotmatchError as exc:
        _fail(exc)
    save_state(roster, path)
    typer.echo("Imported schedule successfully")


@app.command("share")
def cli_share(
    base_url: str | None = typer.Option(None, help="Page the link should open"),
    root: Path = ROOT_OPTION,
) -> None:
    settings, _, roster = _open(root)
    typer.echo(share_link(roster, base_url or settings.share_base_url))


@app.command("open-share")
def cli_open_share(link: str = typer.Argument(..., help="Share link or token"), root: Path = ROOT_OPTION) -> None:
    _, path, _ = _open(root)
    try:
        roster = decode_share(link)
    except SlotmatchError as exc:
        _fail(exc)
    save_state(roster, path)


@app.command("validate")
def cli_validate(root: Path = ROOT_OPTION) -> None:
    settings, _, roster = _open(root)
    typer.echo(format_validation_report(validate_roster(roster, settings.days)))
