"""Initialize project command."""

import click
import questionary
from questionary import Style

from ..db import ProgramRepository, get_data_dir, get_db_path, init_db
from ..engine.starter import DEFAULT_SESSIONS_PER_WEEK, generate_starter_program
from ..models.profile import Equipment, OnboardingProfile, PrimaryGoal
from ..models.program import BlockGoal, DayOfWeek
from .base import async_command, echo_info, echo_success, echo_warning

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)


async def collect_profile() -> OnboardingProfile | None:
    """Run the onboarding questionnaire.

    Returns:
        The answers, or None if the user cancelled
    """
    primary_goal = await questionary.select(
        "What's your primary goal?",
        choices=[
            questionary.Choice("Get stronger", PrimaryGoal.GET_STRONGER),
            questionary.Choice("Build muscle", PrimaryGoal.BUILD_MUSCLE),
            questionary.Choice("Lose fat", PrimaryGoal.LOSE_FAT),
            questionary.Choice("Improve endurance", PrimaryGoal.IMPROVE_ENDURANCE),
            questionary.Choice("Stay fit", PrimaryGoal.STAY_FIT),
        ],
        style=custom_style,
    ).ask_async()
    if primary_goal is None:
        return None

    sessions = await questionary.select(
        "How many sessions per week?",
        choices=[str(n) for n in range(2, 7)],
        default=str(DEFAULT_SESSIONS_PER_WEEK),
        style=custom_style,
    ).ask_async()
    if sessions is None:
        return None

    preferred_days = await questionary.checkbox(
        "Which days do you prefer to train? (leave empty for a default schedule)",
        choices=[questionary.Choice(day.value.title(), day) for day in DayOfWeek],
        style=custom_style,
    ).ask_async()

    equipment = await questionary.checkbox(
        "What equipment do you have access to?",
        choices=[
            questionary.Choice("Barbell", Equipment.BARBELL),
            questionary.Choice("Dumbbells", Equipment.DUMBBELL),
            questionary.Choice("Bodyweight only", Equipment.BODYWEIGHT),
        ],
        style=custom_style,
    ).ask_async()

    return OnboardingProfile(
        sessions_per_week=int(sessions),
        preferred_days=preferred_days or [],
        equipment=equipment or [],
        primary_goal=primary_goal,
    )


@click.command()
@click.option("--goal", type=click.Choice([g.value for g in PrimaryGoal]), help="Primary goal")
@click.option("--sessions", type=int, help="Sessions per week (2-6)")
@click.option(
    "--day",
    "days",
    multiple=True,
    type=click.Choice([d.value for d in DayOfWeek]),
    help="Preferred training day (repeatable)",
)
@click.option(
    "--equipment",
    multiple=True,
    type=click.Choice([e.value for e in Equipment]),
    help="Available equipment (repeatable)",
)
@click.option(
    "--block-goal",
    type=click.Choice([g.value for g in BlockGoal]),
    help="Goal of the first training block (derived from --goal by default)",
)
@click.option("--no-program", is_flag=True, help="Only create the database")
@click.option("--force", is_flag=True, help="Replace an existing program")
@async_command
async def init(
    goal: str | None,
    sessions: int | None,
    days: tuple[str, ...],
    equipment: tuple[str, ...],
    block_goal: str | None,
    no_program: bool,
    force: bool,
):
    """Initialize liftcoach and create a starter program.

    Creates the data directory and SQLite database. Unless --no-program is
    given, builds week 1 and the first training block. Without --goal the
    onboarding questionnaire is run instead of reading the options.
    """
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing liftcoach in {data_dir}")
    await init_db(db_path)
    echo_success("Database initialized")

    if no_program:
        return

    repo = ProgramRepository(db_path)
    if await repo.load() is not None and not force:
        echo_warning("A program already exists. Use --force to replace it.")
        return

    if goal is None:
        profile = await collect_profile()
        if profile is None:
            echo_warning("Questionnaire cancelled, no program created.")
            return
    else:
        profile = OnboardingProfile(
            sessions_per_week=sessions,
            preferred_days=[DayOfWeek(d) for d in days],
            equipment=[Equipment(e) for e in equipment],
            primary_goal=PrimaryGoal(goal),
        )

    program = generate_starter_program(
        profile, block_goal=BlockGoal(block_goal) if block_goal else None
    )
    await repo.save(program)

    week = program.weeks[0]
    echo_success(
        f"Created week 1: {len(week.days)} sessions, "
        f"block goal {program.blocks[0].goal.display_name}"
    )
    click.echo()
    click.echo("Next steps:")
    click.echo("  liftcoach program show            # Review the plan")
    click.echo("  liftcoach history import log.json # Import logged sessions")
    click.echo("  liftcoach dashboard               # Weekly metrics and insights")
