"""CLI entry point for liftcoach."""

import sys

import click
from loguru import logger

from .commands import block, dashboard, doctor, history, init, program, serve


@click.group()
@click.version_option(version="0.1.0", prog_name="liftcoach")
@click.option("--verbose", "-v", is_flag=True, help="Show engine decisions as they are made")
def main(verbose: bool):
    """liftcoach: periodization and progression coach.

    Keeps a multi-week training program, reads your logged workouts and
    decides when to deload, when a training block ends and what the next
    block should change.

    Example usage:

        # Create the database and a starter program
        liftcoach init

        # Import logged sessions
        liftcoach history import sessions.json

        # Review this week and generate the next one
        liftcoach dashboard
        liftcoach program next-week
    """
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


# Register commands
main.add_command(init)
main.add_command(program)
main.add_command(history)
main.add_command(dashboard)
main.add_command(block)
main.add_command(doctor)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
