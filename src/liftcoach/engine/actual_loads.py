"""Extract actually performed loads from workout history.

Reports what was lifted, as opposed to what was planned, so that progress
tracking reflects real performance.
"""

from ..models.history import WorkoutHistoryEntry
from ..models.metrics import ActualExerciseLoad
from ..models.program import ProgramWeek
from .numbers import mean
from .windows import completed_sets, history_for_week


def get_actual_loads_for_week(
    history: list[WorkoutHistoryEntry], week: ProgramWeek
) -> list[ActualExerciseLoad]:
    """Actual loads for every exercise programmed in a week.

    Exercises are deduplicated by id across the week's days and reported
    in the order they first appear.

    Args:
        history: All workout history entries
        week: The week to analyze

    Returns:
        One ActualExerciseLoad per distinct exercise
    """
    week_history = history_for_week(history, week)

    exercise_names: dict[str, str] = {}
    for exercise in week.iter_exercises():
        exercise_names[exercise.id] = exercise.name

    return [
        _load_for_exercise(week_history, exercise_id, exercise_name)
        for exercise_id, exercise_name in exercise_names.items()
    ]


def total_volume_for_week(history: list[WorkoutHistoryEntry], week: ProgramWeek) -> float:
    """Sum of reps x load over every programmed exercise in the week."""
    return sum(load.total_volume for load in get_actual_loads_for_week(history, week))


def _load_for_exercise(
    week_history: list[WorkoutHistoryEntry], exercise_id: str, exercise_name: str
) -> ActualExerciseLoad:
    sets = completed_sets(week_history, exercise_id)
    loads = [s.performed_load_kg for s in sets if s.performed_load_kg is not None]

    # Bodyweight work keeps its set count so it reads as attempted
    return ActualExerciseLoad(
        exercise_id=exercise_id,
        exercise_name=exercise_name,
        average_load_kg=mean(loads),
        top_set_load_kg=max(loads) if loads else None,
        total_volume=sum(s.volume for s in sets),
        set_count=len(sets),
    )
