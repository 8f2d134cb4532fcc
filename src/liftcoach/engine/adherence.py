"""Weekly adherence: planned vs. completed sessions and sets."""

from ..models.history import WorkoutHistoryEntry
from ..models.metrics import AdherenceLabel, WeeklyAdherenceMetrics
from ..models.program import ProgramWeek
from .numbers import ratio
from .rules import Rule, evaluate
from .windows import completed_sets, history_for_week

ON_TRACK_THRESHOLD = 0.9
ROOM_FOR_IMPROVEMENT_THRESHOLD = 0.7

# Evaluated against the mean of session and set adherence; ties go to the better band
ADHERENCE_LABEL_RULES = (
    Rule(
        "on-track",
        lambda overall: overall >= ON_TRACK_THRESHOLD,
        lambda _: AdherenceLabel.ON_TRACK,
    ),
    Rule(
        "room-for-improvement",
        lambda overall: overall >= ROOM_FOR_IMPROVEMENT_THRESHOLD,
        lambda _: AdherenceLabel.ROOM_FOR_IMPROVEMENT,
    ),
)


def adherence_label(overall_adherence: float) -> AdherenceLabel:
    """Band an overall adherence ratio."""
    return evaluate(ADHERENCE_LABEL_RULES, overall_adherence, default=AdherenceLabel.UNDER_TARGET)


def calculate_weekly_adherence(
    week: ProgramWeek, history: list[WorkoutHistoryEntry]
) -> WeeklyAdherenceMetrics:
    """Calculate adherence metrics for a training week.

    Each history entry inside the week window counts as one session.
    Ratios are 0 when nothing was planned and are capped at 1 when extra
    sessions or sets were logged.

    Args:
        week: The planned week
        history: All workout history entries

    Returns:
        Session and set adherence with a label
    """
    week_history = history_for_week(history, week)

    planned_sessions = len(week.days)
    completed_sessions = len(week_history)
    planned_sets = week.planned_sets
    completed_set_count = len(completed_sets(week_history))

    session_adherence = ratio(completed_sessions, planned_sessions)
    set_adherence = ratio(completed_set_count, planned_sets)

    return WeeklyAdherenceMetrics(
        planned_sessions=planned_sessions,
        completed_sessions=completed_sessions,
        session_adherence=session_adherence,
        planned_sets=planned_sets,
        completed_sets=completed_set_count,
        set_adherence=set_adherence,
        adherence_label=adherence_label((session_adherence + set_adherence) / 2),
    )
