"""Key lifts: the top exercises of a week by training volume."""

from ..models.history import WorkoutHistoryEntry
from ..models.metrics import KeyLiftSummary
from ..models.program import ProgramWeek
from .actual_loads import get_actual_loads_for_week
from .numbers import mean, percent_change
from .windows import completed_sets, history_for_week, rpe_values

DEFAULT_TOP_N = 5


def summarize_key_lifts(
    current_week: ProgramWeek,
    previous_week: ProgramWeek | None,
    history: list[WorkoutHistoryEntry],
    top_n: int = DEFAULT_TOP_N,
) -> list[KeyLiftSummary]:
    """Summarize the top ``top_n`` exercises by current-week volume.

    Exercises with equal volume keep the order they have in the week.

    Args:
        current_week: Week to rank
        previous_week: Week to compare loads against, if any
        history: All workout history entries
        top_n: How many lifts to return

    Returns:
        Key lift summaries, highest volume first
    """
    current_loads = get_actual_loads_for_week(history, current_week)
    previous_loads = {}
    if previous_week is not None:
        previous_loads = {
            load.exercise_id: load for load in get_actual_loads_for_week(history, previous_week)
        }

    # sorted() is stable, so ties keep encounter order
    top_lifts = sorted(current_loads, key=lambda load: load.total_volume, reverse=True)[:top_n]
    week_history = history_for_week(history, current_week)

    summaries = []
    for current in top_lifts:
        previous = previous_loads.get(current.exercise_id)
        last_week_load = previous.average_load_kg if previous else None
        exercise_sets = completed_sets(week_history, current.exercise_id)

        summaries.append(
            KeyLiftSummary(
                exercise_id=current.exercise_id,
                exercise_name=current.exercise_name,
                last_week_load_kg=last_week_load,
                this_week_load_kg=current.average_load_kg,
                change_percent=percent_change(current.average_load_kg, last_week_load),
                total_sets=current.set_count,
                avg_rpe=mean(rpe_values(exercise_sets)),
                total_volume=current.total_volume,
            )
        )

    return summaries
