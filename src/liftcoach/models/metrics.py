"""Derived training metrics.

Everything here is recomputed on demand from the program and the workout
history; none of it is stored as a source of truth.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum


@dataclass
class ActualExerciseLoad:
    """What was actually lifted for one exercise in one week."""

    exercise_id: str
    exercise_name: str
    average_load_kg: float | None  # None for bodyweight / no data
    top_set_load_kg: float | None
    total_volume: float  # sum of reps x load
    set_count: int  # completed sets, loaded or not

    @property
    def is_bodyweight(self) -> bool:
        """Attempted, but without a tracked load."""
        return self.set_count > 0 and self.average_load_kg is None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


class AdherenceLabel(str, Enum):
    """Overall adherence band for a week."""

    ON_TRACK = "On track"
    ROOM_FOR_IMPROVEMENT = "Good, but room for improvement"
    UNDER_TARGET = "Under target this week"


@dataclass
class WeeklyAdherenceMetrics:
    """Planned vs. completed training for a week."""

    planned_sessions: int
    completed_sessions: int
    session_adherence: float  # 0-1
    planned_sets: int
    completed_sets: int
    set_adherence: float  # 0-1
    adherence_label: AdherenceLabel

    @property
    def overall_adherence(self) -> float:
        """Mean of session and set adherence."""
        return (self.session_adherence + self.set_adherence) / 2

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = asdict(self)
        data["adherence_label"] = self.adherence_label.value
        return data


@dataclass
class WeeklyStressMetrics:
    """Training volume trend and effort for a week."""

    avg_rpe: float | None
    total_volume: float
    volume_change_percent: float | None  # None without a comparable previous week
    stress_label: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class KeyLiftSummary:
    """Week-over-week load change for one of the top exercises by volume."""

    exercise_id: str
    exercise_name: str
    last_week_load_kg: float | None
    this_week_load_kg: float | None
    change_percent: float | None
    total_sets: int
    avg_rpe: float | None
    total_volume: float = 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class BlockMetrics:
    """Block-level inputs for the next-block recommendation."""

    session_adherence: float
    set_adherence: float
    volume_change_percent: float | None  # first week -> last week
    avg_rpe: float | None
    lift_progress_count: int  # key lifts that improved
    total_key_lifts: int

    @property
    def lift_progress_ratio(self) -> float:
        """Share of key lifts that improved (0 when none were tracked)."""
        if self.total_key_lifts <= 0:
            return 0.0
        return self.lift_progress_count / self.total_key_lifts

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class BlockLiftComparison:
    """Average load of a key lift in the first and last week of a block."""

    exercise_name: str
    first_week_load_kg: float | None
    last_week_load_kg: float | None
    change_percent: float | None


@dataclass
class BlockSummary:
    """Aggregated block metrics plus the totals they were derived from."""

    metrics: BlockMetrics
    planned_sessions: int
    completed_sessions: int
    planned_sets: int
    completed_sets: int
    week_count: int
    key_lifts: list[BlockLiftComparison] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "metrics": self.metrics.to_dict(),
            "planned_sessions": self.planned_sessions,
            "completed_sessions": self.completed_sessions,
            "planned_sets": self.planned_sets,
            "completed_sets": self.completed_sets,
            "week_count": self.week_count,
            "key_lifts": [asdict(lift) for lift in self.key_lifts],
        }
