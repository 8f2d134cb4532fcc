"""Weekly dashboard command."""

import click

from ..engine.dashboard import DEFAULT_INSIGHT_LIMIT, build_weekly_dashboard
from ..engine.numbers import as_percent, fixed
from ..models.coaching import InsightSeverity
from .base import (
    async_command,
    echo_error,
    echo_json,
    format_optional,
    format_table,
    load_state,
)

SEVERITY_COLORS = {
    InsightSeverity.CRITICAL: "red",
    InsightSeverity.WARNING: "yellow",
    InsightSeverity.SUCCESS: "green",
    InsightSeverity.INFO: "blue",
}


@click.command()
@click.option("--week", "-w", type=int, help="Week number to show (default: current week)")
@click.option(
    "--limit", "-l", default=DEFAULT_INSIGHT_LIMIT, type=int, help="Insights to show"
)
@click.option("--json", "as_json", is_flag=True, help="Print the dashboard as JSON")
@click.pass_context
@async_command
async def dashboard(ctx: click.Context, week: int | None, limit: int, as_json: bool):
    """Show adherence, stress, key lifts and coaching insights for a week."""
    program, history = await load_state(ctx)

    week_index = program.current_week_index if week is None else week - 1
    try:
        board = build_weekly_dashboard(program, week_index, history, insight_limit=limit)
    except IndexError as e:
        echo_error(str(e))
        ctx.exit(1)

    if as_json:
        echo_json(board.to_dict())
        return

    phase = "Deload" if board.week.is_deload else "Build"
    click.echo()
    click.echo(click.style(f"Week {board.week.week_number} ({phase})", bold=True))
    click.echo("=" * 50)

    adherence = board.adherence
    click.echo()
    click.echo(click.style("Adherence:", bold=True))
    click.echo(
        f"  Sessions: {adherence.completed_sessions}/{adherence.planned_sessions} "
        f"({as_percent(adherence.session_adherence)}%)"
    )
    click.echo(
        f"  Sets:     {adherence.completed_sets}/{adherence.planned_sets} "
        f"({as_percent(adherence.set_adherence)}%)"
    )
    click.echo(f"  {adherence.adherence_label.value}")

    stress = board.stress
    click.echo()
    click.echo(click.style("Training Load:", bold=True))
    click.echo(f"  Volume: {fixed(stress.total_volume, 0)} kg")
    if stress.stress_label:
        click.echo(f"  {stress.stress_label}")

    if board.key_lifts:
        click.echo()
        click.echo(click.style("Key Lifts:", bold=True))
        rows = [
            [
                lift.exercise_name,
                format_optional(lift.last_week_load_kg, suffix=" kg"),
                format_optional(lift.this_week_load_kg, suffix=" kg"),
                format_optional(lift.change_percent, "+.1f", "%"),
                str(lift.total_sets),
                format_optional(lift.avg_rpe),
            ]
            for lift in board.key_lifts
        ]
        click.echo(format_table(["Exercise", "Last", "This", "Change", "Sets", "RPE"], rows))

    if board.insights:
        click.echo()
        click.echo(click.style("Coach Insights:", bold=True))
        for insight in board.insights:
            color = SEVERITY_COLORS[insight.severity]
            tag = click.style(f"  [{insight.severity.value.upper()}] ", fg=color)
            click.echo(tag + insight.title)
            click.echo(f"    {insight.message}")
