"""Workout history data models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from .program import DayFocus, DayOfWeek


class SetStatus(str, Enum):
    """Completion status of a logged set."""

    PENDING = "pending"
    COMPLETED = "completed"
    SKIPPED = "skipped"


def _optional(value, cast):
    """Coerce a nullable numeric field; raises ValueError/TypeError when it is not numeric."""
    return None if value is None else cast(value)


@dataclass
class WorkoutSet:
    """A single set logged during a session."""

    exercise_id: str
    set_index: int
    status: SetStatus
    target_reps: str = ""
    target_load_kg: float | None = None
    performed_reps: int | None = None
    performed_load_kg: float | None = None
    rpe: float | None = None  # Rate of perceived exertion (0-10)

    @property
    def is_completed(self) -> bool:
        """Whether the set was performed."""
        return self.status == SetStatus.COMPLETED

    @property
    def volume(self) -> float:
        """Reps x load; missing values contribute nothing."""
        return (self.performed_reps or 0) * (self.performed_load_kg or 0)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "exercise_id": self.exercise_id,
            "set_index": self.set_index,
            "status": self.status.value,
            "target_reps": self.target_reps,
            "target_load_kg": self.target_load_kg,
            "performed_reps": self.performed_reps,
            "performed_load_kg": self.performed_load_kg,
            "rpe": self.rpe,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutSet":
        """Create from dictionary."""
        return cls(
            exercise_id=data["exercise_id"],
            set_index=int(data.get("set_index", 0)),
            status=SetStatus(data.get("status", "pending")),
            target_reps=str(data.get("target_reps", "")),
            target_load_kg=_optional(data.get("target_load_kg"), float),
            performed_reps=_optional(data.get("performed_reps"), int),
            performed_load_kg=_optional(data.get("performed_load_kg"), float),
            rpe=_optional(data.get("rpe"), float),
        )


@dataclass
class ExerciseLog:
    """All sets logged for one exercise within a session."""

    exercise_id: str
    name: str
    sets: list[WorkoutSet] = field(default_factory=list)

    def completed_sets(self) -> list[WorkoutSet]:
        """Sets with status ``completed``."""
        return [s for s in self.sets if s.is_completed]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "exercise_id": self.exercise_id,
            "name": self.name,
            "sets": [s.to_dict() for s in self.sets],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseLog":
        """Create from dictionary."""
        return cls(
            exercise_id=data["exercise_id"],
            name=data.get("name", data["exercise_id"]),
            sets=[WorkoutSet.from_dict(s) for s in data.get("sets", [])],
        )


@dataclass
class WorkoutHistoryEntry:
    """One completed session. History is append-only."""

    id: str
    completed_at: datetime
    program_day_id: str
    day_of_week: DayOfWeek
    focus: DayFocus
    exercises: list[ExerciseLog] = field(default_factory=list)

    @property
    def completed_at_utc(self) -> datetime:
        """Completion time as a naive UTC datetime, for window comparisons."""
        if self.completed_at.tzinfo is None:
            return self.completed_at
        return self.completed_at.astimezone(timezone.utc).replace(tzinfo=None)

    def iter_sets(self):
        """Yield every logged set of the session."""
        for exercise in self.exercises:
            yield from exercise.sets

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "completed_at": self.completed_at.isoformat(),
            "program_day_id": self.program_day_id,
            "day_of_week": self.day_of_week.value,
            "focus": self.focus.value,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutHistoryEntry":
        """Create from dictionary."""
        completed_at = data["completed_at"]
        if isinstance(completed_at, str):
            # fromisoformat() only accepts a trailing "Z" from Python 3.11
            completed_at = datetime.fromisoformat(completed_at.replace("Z", "+00:00"))
        elif not isinstance(completed_at, datetime):
            raise ValueError(f"completed_at must be an ISO 8601 timestamp, got {completed_at!r}")
        return cls(
            id=data["id"],
            completed_at=completed_at,
            program_day_id=data.get("program_day_id", ""),
            day_of_week=DayOfWeek(data["day_of_week"]),
            focus=DayFocus(data.get("focus", "other")),
            exercises=[ExerciseLog.from_dict(ex) for ex in data.get("exercises", [])],
        )
