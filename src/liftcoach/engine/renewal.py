"""Week renewal: generate the next week of a multi-week program.

The next week copies the structure of the previous one (exercise
selection, sets and reps). Progressive overload is applied when a session
starts, not here. Only the phase changes, based on recent training stress.
"""

from dataclasses import replace
from datetime import date

from loguru import logger

from ..models.history import WorkoutHistoryEntry
from ..models.program import (
    ProgramDay,
    ProgramMultiWeek,
    ProgramWeek,
    TrainingPhase,
    day_id_for_week,
)
from .blocks import apply_block_transition, evaluate_block_transition
from .phase import DELOAD_LOOKBACK_WEEKS, determine_next_phase


def _copy_day(day: ProgramDay, week_number: int) -> ProgramDay:
    return ProgramDay(
        id=day_id_for_week(day.id, week_number),
        day_of_week=day.day_of_week,
        focus=day.focus,
        description=day.description,
        exercises=[replace(exercise) for exercise in day.exercises],
    )


def generate_next_week(
    prev_week: ProgramWeek,
    all_weeks: list[ProgramWeek] | None = None,
    history: list[WorkoutHistoryEntry] | None = None,
    today: date | None = None,
) -> ProgramWeek:
    """Generate the week that follows ``prev_week``.

    Without block bookkeeping; ``generate_next_week_and_block`` wraps this
    for programs that track blocks.

    Args:
        prev_week: The week being renewed
        all_weeks: All weeks so far, oldest first, for phase detection
        history: Workout history for phase detection
        today: Start date of the new week (defaults to today)

    Returns:
        A new ProgramWeek
    """
    next_phase = TrainingPhase.BUILD
    if all_weeks and len(all_weeks) >= DELOAD_LOOKBACK_WEEKS and history is not None:
        next_phase = determine_next_phase(all_weeks[-DELOAD_LOOKBACK_WEEKS:], history)

    week_number = prev_week.week_number + 1
    return ProgramWeek(
        week_number=week_number,
        week_start_date=today or date.today(),
        focus=prev_week.focus,
        days=[_copy_day(day, week_number) for day in prev_week.days],
        phase=next_phase,
    )


def generate_next_week_and_block(
    program: ProgramMultiWeek,
    history: list[WorkoutHistoryEntry] | None = None,
    today: date | None = None,
) -> ProgramMultiWeek:
    """Append the next week and close the active block when it is done.

    The input program is left untouched; callers persist the returned
    snapshot as a whole.

    Args:
        program: Current program snapshot
        history: Workout history for phase detection
        today: Start date of the new week (defaults to today)

    Returns:
        A new program with one more week and the current week advanced
    """
    if not program.weeks:
        logger.warning("Program has no weeks to renew; returning it unchanged")
        return replace(program, weeks=[], blocks=[replace(b) for b in program.blocks])

    prev_week = program.weeks[-1]
    new_week = generate_next_week(prev_week, program.weeks, history, today)

    transition = evaluate_block_transition(program, new_week.phase)
    blocks = apply_block_transition(program.blocks, transition)
    if transition.close_block:
        logger.info(
            f"Closed block {transition.block_index + 1} at week {transition.end_week_index + 1} "
            f"after {transition.weeks_in_block} weeks; next block starts at week "
            f"{transition.new_block.start_week_index + 1}"
        )
    elif transition.block_index is None:
        logger.warning("Program has no active block; generating week without block bookkeeping")

    logger.info(f"Generated week {new_week.week_number} ({new_week.phase.value})")
    return ProgramMultiWeek(
        weeks=[*program.weeks, new_week],
        blocks=blocks,
        current_week_index=program.current_week_index + 1,
    )
