"""Builders for programs and workout history used across tests."""

from datetime import date, datetime, timedelta

from liftcoach.models.history import (
    ExerciseLog,
    SetStatus,
    WorkoutHistoryEntry,
    WorkoutSet,
)
from liftcoach.models.program import (
    BlockGoal,
    DayFocus,
    DayOfWeek,
    ProgramDay,
    ProgramExercise,
    ProgramMultiWeek,
    ProgramWeek,
    TrainingBlock,
    TrainingPhase,
)

WEEK_ONE = date(2025, 1, 6)  # a Monday

DEFAULT_EXERCISES = [
    ("squat", "Barbell Back Squat", 3),
    ("bench", "Barbell Bench Press", 3),
]


def build_week(
    week_number: int = 1,
    start: date | None = None,
    phase: TrainingPhase = TrainingPhase.BUILD,
    days: list[list[tuple[str, str, int]]] | None = None,
) -> ProgramWeek:
    """Build a week; each day is a list of (id, name, sets)."""
    if start is None:
        start = WEEK_ONE + timedelta(weeks=week_number - 1)
    if days is None:
        days = [DEFAULT_EXERCISES]

    day_names = list(DayOfWeek)
    return ProgramWeek(
        week_number=week_number,
        week_start_date=start,
        focus="Strength",
        phase=phase,
        days=[
            ProgramDay(
                id=f"{day_names[i].value}-{i}-week{week_number}",
                day_of_week=day_names[i],
                focus=DayFocus.FULL,
                exercises=[
                    ProgramExercise(id=ex_id, name=name, sets=sets, reps="5")
                    for ex_id, name, sets in exercises
                ],
            )
            for i, exercises in enumerate(days)
        ],
    )


def build_program(
    phases: list[TrainingPhase],
    current_week_index: int | None = None,
    blocks: list[TrainingBlock] | None = None,
) -> ProgramMultiWeek:
    """Build a program with one week per phase and a single active block."""
    weeks = [build_week(n, phase=phase) for n, phase in enumerate(phases, start=1)]
    if blocks is None:
        blocks = [TrainingBlock(goal=BlockGoal.STRENGTH, start_week_index=0)]
    if current_week_index is None:
        current_week_index = len(weeks) - 1
    return ProgramMultiWeek(weeks=weeks, blocks=blocks, current_week_index=current_week_index)


def build_entry(
    completed_at: datetime,
    sets: dict[str, list[tuple]],
    entry_id: str | None = None,
) -> WorkoutHistoryEntry:
    """Build a history entry.

    ``sets`` maps exercise id to tuples of (reps, load, rpe) or
    (reps, load, rpe, status).
    """
    exercises = []
    for exercise_id, set_specs in sets.items():
        logged = []
        for index, logged_set in enumerate(set_specs):
            reps, load, rpe = logged_set[:3]
            status = logged_set[3] if len(logged_set) > 3 else SetStatus.COMPLETED
            logged.append(
                WorkoutSet(
                    exercise_id=exercise_id,
                    set_index=index,
                    status=status,
                    target_reps="5",
                    performed_reps=reps,
                    performed_load_kg=load,
                    rpe=rpe,
                )
            )
        exercises.append(ExerciseLog(exercise_id=exercise_id, name=exercise_id, sets=logged))

    return WorkoutHistoryEntry(
        id=entry_id or f"session-{completed_at.isoformat()}",
        completed_at=completed_at,
        program_day_id="monday-0-week1",
        day_of_week=DayOfWeek.MONDAY,
        focus=DayFocus.FULL,
        exercises=exercises,
    )


def at(day: date, hour: int = 18) -> datetime:
    """A session time on a given day."""
    return datetime(day.year, day.month, day.day, hour, 0)


def session_with_volume(week: ProgramWeek, volume: float) -> WorkoutHistoryEntry:
    """One session in ``week`` with a single 1-rep squat set of ``volume`` kg."""
    return build_entry(
        at(week.week_start_date + timedelta(days=1)),
        {"squat": [(1, volume, 8)]},
        entry_id=f"w{week.week_number}",
    )
