"""Data integrity diagnostics command."""

import click

from ..db import HistoryRepository, ProgramRepository
from ..engine.diagnostics import DiagnosticSeverity, run_diagnostics
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
)


@click.command()
@click.pass_context
@async_command
async def doctor(ctx: click.Context):
    """Check stored program and history data for integrity problems.

    Problems are reported, never repaired.
    """
    ensure_initialized(ctx)

    program = await ProgramRepository().load()
    history = await HistoryRepository().load_all()

    click.echo(
        f"Weeks: {len(program.weeks) if program else 0}  "
        f"Blocks: {len(program.blocks) if program else 0}  "
        f"Sessions: {len(history)}"
    )

    if program is None:
        echo_info("No program stored.")
        return

    issues = run_diagnostics(program, history)
    if not issues:
        echo_success("No integrity issues found.")
        return

    printers = {
        DiagnosticSeverity.ERROR: echo_error,
        DiagnosticSeverity.WARNING: echo_warning,
        DiagnosticSeverity.INFO: echo_info,
    }
    for issue in issues:
        printers[issue.severity](issue.message)

    if any(issue.severity == DiagnosticSeverity.ERROR for issue in issues):
        ctx.exit(1)
