"""Training block commands."""

import click

from ..engine.blocks import calculate_block_metrics
from ..engine.numbers import as_percent
from ..engine.recommendations import get_next_block_recommendation
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_json,
    format_optional,
    format_table,
    load_state,
)


@click.group()
def block():
    """Review training blocks (mesocycles)."""
    pass


@block.command("list")
@click.pass_context
@async_command
async def list_blocks(ctx: click.Context):
    """List blocks with their week ranges."""
    program, _ = await load_state(ctx)

    if not program.blocks:
        echo_info("No training blocks defined.")
        return

    rows = []
    for number, blk in enumerate(program.blocks, start=1):
        end = "active" if blk.is_active else str(blk.end_week_index + 1)
        rows.append(
            [
                str(number),
                blk.goal.display_name,
                str(blk.start_week_index + 1),
                end,
                str(len(program.weeks_for_block(blk))),
            ]
        )
    click.echo(format_table(["Block", "Goal", "First week", "Last week", "Weeks"], rows))


@block.command("summary")
@click.option("--block", "-b", "block_number", type=int, help="Block number (default: current)")
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.pass_context
@async_command
async def summary(ctx: click.Context, block_number: int | None, as_json: bool):
    """Aggregate a block's metrics and recommend the next block."""
    program, history = await load_state(ctx)

    if block_number is None:
        blk = program.block_for_week(program.current_week_index)
        if blk is None:
            echo_error("The current week does not belong to any block.")
            ctx.exit(1)
        block_number = program.blocks.index(blk) + 1
    elif not 1 <= block_number <= len(program.blocks):
        echo_error(f"Block {block_number} not found.")
        ctx.exit(1)
    else:
        blk = program.blocks[block_number - 1]

    block_weeks = program.weeks_for_block(blk)
    if not block_weeks:
        echo_error(f"No weeks found for block {block_number}.")
        ctx.exit(1)

    result = calculate_block_metrics(block_weeks, history)
    recommendation = get_next_block_recommendation(result.metrics)

    if as_json:
        echo_json(
            {
                "block": blk.to_dict(),
                "summary": result.to_dict(),
                "recommendation": recommendation.to_dict(),
            }
        )
        return

    metrics = result.metrics
    last_week = blk.end_week_index if blk.end_week_index is not None else len(program.weeks) - 1
    status = " (Active)" if blk.is_active else ""

    click.echo()
    click.echo(click.style(f"Block {block_number}{status}", bold=True))
    click.echo(
        f"Weeks {blk.start_week_index + 1}-{last_week + 1} · Goal: {blk.goal.display_name}"
    )
    click.echo("=" * 50)

    click.echo()
    click.echo(click.style("Adherence:", bold=True))
    click.echo(
        f"  Sessions: {result.completed_sessions}/{result.planned_sessions} "
        f"({as_percent(metrics.session_adherence)}%)"
    )
    click.echo(
        f"  Sets:     {result.completed_sets}/{result.planned_sets} "
        f"({as_percent(metrics.set_adherence)}%)"
    )

    click.echo()
    click.echo(click.style("Training Load:", bold=True))
    volume_trend = format_optional(metrics.volume_change_percent, "+.1f", "%")
    click.echo(f"  Volume trend (first -> last week): {volume_trend}")
    click.echo(f"  Average RPE: {format_optional(metrics.avg_rpe)}")

    if result.key_lifts:
        click.echo()
        click.echo(click.style("Key Lifts:", bold=True))
        rows = [
            [
                lift.exercise_name,
                format_optional(lift.first_week_load_kg, suffix=" kg"),
                format_optional(lift.last_week_load_kg, suffix=" kg"),
                format_optional(lift.change_percent, "+.1f", "%"),
            ]
            for lift in result.key_lifts
        ]
        click.echo(format_table(["Exercise", "First", "Last", "Change"], rows))

    click.echo()
    click.echo(click.style(f"Next Block: {recommendation.title}", bold=True))
    click.echo(f"  Action: {recommendation.recommended_action.value}")
    click.echo(f"  {recommendation.message}")
