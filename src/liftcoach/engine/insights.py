"""Coach insights engine.

Turns one week's metrics into short coaching messages. Unlike block
recommendations, several insights can fire for the same week; only the
stress rules are mutually exclusive.
"""

from ..models.coaching import CoachInsight, CoachInsightInputs, InsightSeverity
from ..models.program import TrainingPhase
from .numbers import fixed, mean, signed
from .rules import Rule, evaluate

HIGH_SESSION_ADHERENCE = 0.9
LOW_SESSION_ADHERENCE = 0.7
STANDOUT_MIN_CHANGE = 7.0
STANDOUT_MARGIN = 3.0
PLATEAU_MAX_CHANGE = 1.0
MIN_LIFTS_FOR_TRENDS = 3


def _stress_known(i: CoachInsightInputs) -> bool:
    return i.stress.volume_change_percent is not None and i.stress.avg_rpe is not None


def _high_stress(i: CoachInsightInputs) -> CoachInsight:
    return CoachInsight(
        id="high-stress",
        severity=InsightSeverity.CRITICAL,
        title="High Training Stress",
        message=(
            f"Volume increased {fixed(i.stress.volume_change_percent)}% with average RPE "
            f"{fixed(i.stress.avg_rpe)}. Watch for signs of fatigue. A deload may be approaching."
        ),
    )


def _volume_increase(i: CoachInsightInputs) -> CoachInsight:
    return CoachInsight(
        id="volume-increase",
        severity=InsightSeverity.WARNING,
        title="Significant Volume Increase",
        message=(
            f"Training volume up {fixed(i.stress.volume_change_percent)}% from last week. RPE is "
            f"manageable ({fixed(i.stress.avg_rpe)}), but monitor recovery closely."
        ),
    )


def _productive_stress(i: CoachInsightInputs) -> CoachInsight:
    return CoachInsight(
        id="productive-stress",
        severity=InsightSeverity.SUCCESS,
        title="Productive Training Zone",
        message=(
            f"Training stress is well-balanced: volume {signed(i.stress.volume_change_percent)}% "
            f"with RPE {fixed(i.stress.avg_rpe)}. This is sustainable progress."
        ),
    )


def _low_stress(i: CoachInsightInputs) -> CoachInsight:
    return CoachInsight(
        id="low-stress",
        severity=InsightSeverity.INFO,
        title="Lower Training Load",
        message=(
            f"Volume decreased {fixed(abs(i.stress.volume_change_percent))}% with easy RPE "
            f"({fixed(i.stress.avg_rpe)}). This might be intentional recovery, or there's room to "
            "push harder next week."
        ),
    )


STRESS_INSIGHT_RULES = (
    Rule(
        "high-stress",
        lambda i: (
            _stress_known(i)
            and i.stress.volume_change_percent > 10
            and i.stress.avg_rpe >= 8.5
        ),
        _high_stress,
    ),
    Rule(
        "volume-increase",
        lambda i: (
            _stress_known(i)
            and i.stress.volume_change_percent > 10
            and 7 <= i.stress.avg_rpe < 8.5
        ),
        _volume_increase,
    ),
    Rule(
        "productive-stress",
        lambda i: (
            _stress_known(i)
            and abs(i.stress.volume_change_percent) <= 10
            and 6.5 <= i.stress.avg_rpe <= 8
        ),
        _productive_stress,
    ),
    Rule(
        "low-stress",
        lambda i: (
            _stress_known(i)
            and i.stress.volume_change_percent < -15
            and i.stress.avg_rpe < 7
            and i.phase != TrainingPhase.DELOAD
        ),
        _low_stress,
    ),
)


def _adherence_insight(inputs: CoachInsightInputs) -> CoachInsight | None:
    adherence = inputs.adherence
    if adherence.session_adherence >= HIGH_SESSION_ADHERENCE:
        return CoachInsight(
            id="high-adherence",
            severity=InsightSeverity.SUCCESS,
            title="Excellent Consistency",
            message=(
                f"You completed {adherence.completed_sessions} of {adherence.planned_sessions} "
                "planned sessions. This kind of consistency builds real results."
            ),
        )
    if adherence.session_adherence < LOW_SESSION_ADHERENCE and adherence.planned_sessions > 0:
        return CoachInsight(
            id="low-adherence",
            severity=InsightSeverity.WARNING,
            title="Consistency Below Target",
            message=(
                f"Only {adherence.completed_sessions} of {adherence.planned_sessions} sessions "
                "completed. Consider stabilizing your schedule before increasing training volume."
            ),
        )
    return None


def _lift_trend_insights(inputs: CoachInsightInputs) -> list[CoachInsight]:
    lifts = [lift for lift in inputs.key_lifts if lift.change_percent is not None]
    if len(lifts) < MIN_LIFTS_FOR_TRENDS:
        return []

    insights = []
    # max() keeps the first lift on ties
    standout = max(lifts, key=lambda lift: lift.change_percent)
    max_change = standout.change_percent
    avg_change = mean(lift.change_percent for lift in lifts)
    if max_change >= STANDOUT_MIN_CHANGE and max_change > avg_change + STANDOUT_MARGIN:
        insights.append(
            CoachInsight(
                id="standout-lift",
                severity=InsightSeverity.INFO,
                title="Standout Progress",
                message=(
                    f"{standout.exercise_name} jumped {fixed(max_change)}% this week, notably "
                    "higher than other lifts. Great progress on this movement!"
                ),
            )
        )

    if inputs.phase == TrainingPhase.BUILD and all(
        lift.change_percent <= PLATEAU_MAX_CHANGE for lift in lifts
    ):
        insights.append(
            CoachInsight(
                id="plateau-warning",
                severity=InsightSeverity.WARNING,
                title="Potential Plateau",
                message=(
                    "Most key lifts stayed flat or decreased this week. Consider adjusting "
                    "programming, recovery, or nutrition to break through."
                ),
            )
        )
    return insights


def generate_coach_insights(inputs: CoachInsightInputs) -> list[CoachInsight]:
    """Generate coaching insights from one week's metrics.

    Args:
        inputs: Week number, phase, adherence, stress and key lifts

    Returns:
        Insights in rule order; use ``sort_insights_by_priority`` to rank them
    """
    insights = []

    adherence_insight = _adherence_insight(inputs)
    if adherence_insight is not None:
        insights.append(adherence_insight)

    if inputs.phase == TrainingPhase.DELOAD:
        insights.append(
            CoachInsight(
                id="deload-phase",
                severity=InsightSeverity.INFO,
                title="Deload Week Active",
                message=(
                    "Reduced loads this week are intentional. Focus on movement quality and "
                    "recovery. You should feel refreshed and ready to push harder next week."
                ),
            )
        )

    stress_insight = evaluate(STRESS_INSIGHT_RULES, inputs)
    if stress_insight is not None:
        insights.append(stress_insight)

    insights.extend(_lift_trend_insights(inputs))

    if inputs.week_number == 1 and inputs.adherence.completed_sessions > 0:
        insights.append(
            CoachInsight(
                id="week-1-start",
                severity=InsightSeverity.SUCCESS,
                title="Strong Start",
                message=(
                    "Week 1 is complete! You've established baseline data. Focus on consistency "
                    "and progressive overload as you move forward."
                ),
            )
        )

    return insights


def sort_insights_by_priority(insights: list[CoachInsight]) -> list[CoachInsight]:
    """Order insights critical, warning, success, info; ties keep their order."""
    return sorted(insights, key=lambda insight: insight.severity.rank)
