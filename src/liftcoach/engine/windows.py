"""Week date windows over the workout history."""

from datetime import datetime, time, timedelta

from ..models.history import WorkoutHistoryEntry, WorkoutSet
from ..models.program import ProgramWeek

WEEK_LENGTH = timedelta(days=7)


def week_window(week: ProgramWeek) -> tuple[datetime, datetime]:
    """Half-open ``[start, start + 7 days)`` window for a week."""
    start = datetime.combine(week.week_start_date, time.min)
    return start, start + WEEK_LENGTH


def history_for_week(
    history: list[WorkoutHistoryEntry], week: ProgramWeek
) -> list[WorkoutHistoryEntry]:
    """History entries completed inside the week's window."""
    start, end = week_window(week)
    return [entry for entry in history if start <= entry.completed_at_utc < end]


def completed_sets(
    entries: list[WorkoutHistoryEntry], exercise_id: str | None = None
) -> list[WorkoutSet]:
    """Completed sets across entries, optionally for one exercise."""
    sets = []
    for entry in entries:
        for exercise in entry.exercises:
            if exercise_id is not None and exercise.exercise_id != exercise_id:
                continue
            sets.extend(exercise.completed_sets())
    return sets


def rpe_values(sets: list[WorkoutSet]) -> list[float]:
    """RPE of every completed set that recorded one."""
    return [s.rpe for s in sets if s.is_completed and s.rpe is not None]
