"""Workout history commands."""

import json
from pathlib import Path

import click

from ..db import HistoryRepository
from ..engine.numbers import fixed
from ..models.history import WorkoutHistoryEntry
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
)


@click.group()
def history():
    """Import and list logged workouts."""
    pass


def parse_history_file(path: Path) -> list[WorkoutHistoryEntry]:
    """Parse a JSON file holding one entry or a list of entries."""
    data = json.loads(path.read_text())
    if isinstance(data, dict):
        data = data.get("entries", [data])
    return [WorkoutHistoryEntry.from_dict(item) for item in data]


@history.command("import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
@async_command
async def import_history(ctx: click.Context, file: Path):
    """Import workout sessions from a JSON file.

    Entries whose id is already stored are skipped; history is never
    rewritten.
    """
    ensure_initialized(ctx)

    try:
        entries = parse_history_file(file)
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        echo_error(f"Could not read {file}: {e}")
        ctx.exit(1)

    inserted = await HistoryRepository().add_many(entries)
    echo_success(f"Imported {inserted} session(s)")
    if inserted < len(entries):
        echo_info(f"{len(entries) - inserted} session(s) were already in the log")


@history.command("list")
@click.option("--limit", "-n", default=20, type=int, help="Most recent sessions to show")
@click.pass_context
@async_command
async def list_history(ctx: click.Context, limit: int):
    """List logged sessions, most recent first."""
    ensure_initialized(ctx)

    entries = await HistoryRepository().load_all()
    if not entries:
        echo_info("No sessions logged yet.")
        return

    rows = []
    for entry in reversed(entries[-limit:]):
        sets = [s for s in entry.iter_sets() if s.is_completed]
        rows.append(
            [
                entry.completed_at.strftime("%Y-%m-%d %H:%M"),
                entry.day_of_week.value.title(),
                entry.focus.value,
                str(len(entry.exercises)),
                str(len(sets)),
                fixed(sum(s.volume for s in sets), 0),
            ]
        )

    click.echo(format_table(["Date", "Day", "Focus", "Exercises", "Sets", "Volume"], rows))
    click.echo()
    click.echo(f"Showing {len(rows)} of {len(entries)} sessions")
