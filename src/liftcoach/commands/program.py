"""Program commands: show and renew the multi-week program."""

import click

from ..db import HistoryRepository, ProgramRepository
from ..engine.renewal import generate_next_week_and_block
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_json,
    echo_success,
    ensure_initialized,
)


@click.group()
def program():
    """View and advance the training program."""
    pass


@program.command("show")
@click.option("--json", "as_json", is_flag=True, help="Print the raw program as JSON")
@click.pass_context
@async_command
async def show(ctx: click.Context, as_json: bool):
    """Show the program's weeks and blocks."""
    ensure_initialized(ctx)

    prog = await ProgramRepository().load()
    if prog is None:
        echo_error("No program found. Run 'liftcoach init' to create one.")
        ctx.exit(1)

    if as_json:
        echo_json(prog.to_dict())
        return

    click.echo()
    click.echo(click.style("Training Program", bold=True))
    click.echo("=" * 50)
    click.echo(prog.get_summary())


@program.command("next-week")
@click.pass_context
@async_command
async def next_week(ctx: click.Context):
    """Generate the next week.

    Copies the latest week's structure, decides between a build and a
    deload week from recent volume, and closes the active block once it
    has run its course.
    """
    ensure_initialized(ctx)

    repo = ProgramRepository()
    prog = await repo.load()
    if prog is None:
        echo_error("No program found. Run 'liftcoach init' to create one.")
        ctx.exit(1)
    if not prog.weeks:
        echo_error("Program has no weeks to renew.")
        ctx.exit(1)

    history = await HistoryRepository().load_all()
    renewed = generate_next_week_and_block(prog, history)
    await repo.save(renewed)

    week = renewed.weeks[-1]
    label = "Deload" if week.is_deload else "Build"
    echo_success(f"Generated Week {week.week_number} ({label})")

    for number, (before, after) in enumerate(zip(prog.blocks, renewed.blocks), start=1):
        if before.is_active and not after.is_active:
            echo_info(
                f"Block {number} closed after week {after.end_week_index + 1}. "
                f"Run 'liftcoach block summary --block {number}' to review it."
            )
