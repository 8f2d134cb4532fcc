"""Shared CLI utilities."""

import asyncio
import json
from functools import wraps

import click

from ..db import HistoryRepository, ProgramRepository, get_db_path
from ..models.history import WorkoutHistoryEntry
from ..models.program import ProgramMultiWeek


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'liftcoach init' first."
        )
        ctx.exit(1)


async def load_state(ctx: click.Context) -> tuple[ProgramMultiWeek, list[WorkoutHistoryEntry]]:
    """Load the program and history, exiting when there is no program."""
    ensure_initialized(ctx)

    program = await ProgramRepository().load()
    if program is None:
        echo_error("No program found. Run 'liftcoach init' to create one.")
        ctx.exit(1)

    history = await HistoryRepository().load_all()
    return program, history


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def echo_json(data: dict | list) -> None:
    """Print data as indented JSON."""
    click.echo(json.dumps(data, indent=2))


def format_optional(value: float | None, fmt: str = ".1f", suffix: str = "") -> str:
    """Format a nullable number, showing "-" for missing values."""
    if value is None:
        return "-"
    return f"{value:{fmt}}{suffix}"


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = []

    header_line = ""
    for i, h in enumerate(headers):
        header_line += h.ljust(widths[i] + padding)
    lines.append(header_line)

    sep_line = ""
    for w in widths:
        sep_line += "-" * w + " " * padding
    lines.append(sep_line)

    for row in rows:
        row_line = ""
        for i, cell in enumerate(row):
            row_line += str(cell).ljust(widths[i] + padding)
        lines.append(row_line)

    return "\n".join(lines)
