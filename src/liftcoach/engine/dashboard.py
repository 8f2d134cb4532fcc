"""Weekly dashboard: every metric the coach shows for one week."""

from dataclasses import dataclass, field

from ..models.coaching import CoachInsight, CoachInsightInputs
from ..models.history import WorkoutHistoryEntry
from ..models.metrics import KeyLiftSummary, WeeklyAdherenceMetrics, WeeklyStressMetrics
from ..models.program import ProgramMultiWeek, ProgramWeek
from .adherence import calculate_weekly_adherence
from .insights import generate_coach_insights, sort_insights_by_priority
from .key_lifts import DEFAULT_TOP_N, summarize_key_lifts
from .stress import calculate_weekly_stress

DEFAULT_INSIGHT_LIMIT = 3


@dataclass
class WeeklyDashboard:
    """Metrics and top insights for one program week."""

    week_index: int
    week: ProgramWeek
    adherence: WeeklyAdherenceMetrics
    stress: WeeklyStressMetrics
    key_lifts: list[KeyLiftSummary] = field(default_factory=list)
    insights: list[CoachInsight] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "week_index": self.week_index,
            "week_number": self.week.week_number,
            "phase": self.week.phase.value,
            "week_start_date": self.week.week_start_date.isoformat(),
            "adherence": self.adherence.to_dict(),
            "stress": self.stress.to_dict(),
            "key_lifts": [lift.to_dict() for lift in self.key_lifts],
            "insights": [insight.to_dict() for insight in self.insights],
        }


def build_weekly_dashboard(
    program: ProgramMultiWeek,
    week_index: int,
    history: list[WorkoutHistoryEntry],
    insight_limit: int | None = DEFAULT_INSIGHT_LIMIT,
) -> WeeklyDashboard:
    """Compute the dashboard for ``program.weeks[week_index]``.

    Args:
        program: Program snapshot
        week_index: Index of the week to show
        history: All workout history entries
        insight_limit: How many insights to keep after sorting (None keeps all)

    Raises:
        IndexError: If the week index is outside the program
    """
    if not 0 <= week_index < len(program.weeks):
        raise IndexError(f"Week index {week_index} is out of range (0-{len(program.weeks) - 1})")

    week = program.weeks[week_index]
    previous = program.previous_week(week_index)

    adherence = calculate_weekly_adherence(week, history)
    stress = calculate_weekly_stress(week, previous, history)
    key_lifts = summarize_key_lifts(week, previous, history, DEFAULT_TOP_N)

    insights = sort_insights_by_priority(
        generate_coach_insights(
            CoachInsightInputs(
                week_number=week.week_number,
                phase=week.phase,
                adherence=adherence,
                stress=stress,
                key_lifts=key_lifts,
            )
        )
    )
    if insight_limit is not None:
        insights = insights[:insight_limit]

    return WeeklyDashboard(
        week_index=week_index,
        week=week,
        adherence=adherence,
        stress=stress,
        key_lifts=key_lifts,
        insights=insights,
    )
