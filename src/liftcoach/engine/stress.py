"""Weekly training stress: volume trend and perceived effort."""

from dataclasses import dataclass

from ..models.history import WorkoutHistoryEntry
from ..models.metrics import WeeklyStressMetrics
from ..models.program import ProgramWeek
from .actual_loads import total_volume_for_week
from .numbers import fixed, mean, percent_change, signed
from .rules import Rule, evaluate
from .windows import completed_sets, history_for_week, rpe_values

HIGH_RPE = 8.5
MODERATE_RPE = 7.0

NO_DATA_LABEL = "No training data yet this week"


@dataclass
class _StressReading:
    total_volume: float
    volume_change_percent: float | None
    avg_rpe: float | None

    @property
    def volume_text(self) -> str:
        return f"Volume {signed(self.volume_change_percent)}% vs last week"

    @property
    def with_rpe(self) -> str:
        return f"{self.volume_text} · Avg RPE {fixed(self.avg_rpe)}"


def _both_known(r: _StressReading) -> bool:
    return r.volume_change_percent is not None and r.avg_rpe is not None


STRESS_LABEL_RULES = (
    Rule("no-data", lambda r: r.total_volume == 0, lambda r: NO_DATA_LABEL),
    Rule(
        "high-stress",
        lambda r: _both_known(r) and r.avg_rpe >= HIGH_RPE and r.volume_change_percent > 0,
        lambda r: f"{r.with_rpe} (high stress — deload may be close)",
    ),
    Rule(
        "good-stress",
        lambda r: _both_known(r) and MODERATE_RPE <= r.avg_rpe < HIGH_RPE,
        lambda r: f"{r.with_rpe} (good training stress)",
    ),
    Rule(
        "manageable-stress",
        lambda r: _both_known(r) and r.avg_rpe < MODERATE_RPE,
        lambda r: f"{r.with_rpe} (manageable stress)",
    ),
    Rule("volume-and-rpe", _both_known, lambda r: r.with_rpe),
    Rule(
        "volume-only",
        lambda r: r.volume_change_percent is not None,
        lambda r: r.volume_text,
    ),
    Rule(
        "rpe-only",
        lambda r: r.avg_rpe is not None,
        lambda r: f"Avg RPE {fixed(r.avg_rpe)} this week",
    ),
)


def stress_label(
    total_volume: float, volume_change_percent: float | None, avg_rpe: float | None
) -> str:
    """Human-readable summary of a week's stress; empty when nothing is known."""
    reading = _StressReading(total_volume, volume_change_percent, avg_rpe)
    return evaluate(STRESS_LABEL_RULES, reading, default="")


def average_rpe_for_week(history: list[WorkoutHistoryEntry], week: ProgramWeek) -> float | None:
    """Mean RPE across completed sets with an RPE in the week window."""
    return mean(rpe_values(completed_sets(history_for_week(history, week))))


def calculate_weekly_stress(
    current_week: ProgramWeek,
    previous_week: ProgramWeek | None,
    history: list[WorkoutHistoryEntry],
) -> WeeklyStressMetrics:
    """Calculate weekly stress metrics.

    Volume change is None when there is no previous week or the previous
    week has no recorded volume.
    """
    total_volume = total_volume_for_week(history, current_week)

    volume_change_percent = None
    if previous_week is not None:
        previous_volume = total_volume_for_week(history, previous_week)
        volume_change_percent = percent_change(total_volume, previous_volume)

    avg_rpe = average_rpe_for_week(history, current_week)

    return WeeklyStressMetrics(
        avg_rpe=avg_rpe,
        total_volume=total_volume,
        volume_change_percent=volume_change_percent,
        stress_label=stress_label(total_volume, volume_change_percent, avg_rpe),
    )
