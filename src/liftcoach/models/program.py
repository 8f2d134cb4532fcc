"""Training program data models."""

import re
from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class TrainingPhase(str, Enum):
    """Phase tag carried by every program week."""

    BUILD = "build"  # Progressively loaded training
    DELOAD = "deload"  # Reduced volume/intensity for recovery


class DayFocus(str, Enum):
    """Focus category of a training day."""

    UPPER = "upper"
    LOWER = "lower"
    FULL = "full"
    CONDITIONING = "conditioning"
    OTHER = "other"


class DayOfWeek(str, Enum):
    """Day of the week a session is scheduled on."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


class BlockGoal(str, Enum):
    """Goal shared by the weeks of a training block."""

    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    GENERAL = "general"
    RETURN_TO_TRAINING = "return_to_training"

    @property
    def display_name(self) -> str:
        """Human-readable goal name."""
        return {
            BlockGoal.STRENGTH: "Strength",
            BlockGoal.HYPERTROPHY: "Hypertrophy",
            BlockGoal.GENERAL: "General Fitness",
            BlockGoal.RETURN_TO_TRAINING: "Return to Training",
        }[self]


@dataclass
class ProgramExercise:
    """An exercise template within a training day."""

    id: str
    name: str
    sets: int
    reps: str  # e.g. "5", "8-10"
    notes: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "sets": self.sets,
            "reps": self.reps,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProgramExercise":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            sets=int(data["sets"]),
            reps=str(data["reps"]),
            notes=data.get("notes") or "",
        )


@dataclass
class ProgramDay:
    """A single training day."""

    id: str
    day_of_week: DayOfWeek
    focus: DayFocus
    exercises: list[ProgramExercise]
    description: str = ""

    @property
    def planned_sets(self) -> int:
        """Total number of sets prescribed for this day."""
        return sum(ex.sets for ex in self.exercises)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "day_of_week": self.day_of_week.value,
            "focus": self.focus.value,
            "description": self.description,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProgramDay":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            day_of_week=DayOfWeek(data["day_of_week"]),
            focus=DayFocus(data.get("focus", "other")),
            description=data.get("description") or "",
            exercises=[ProgramExercise.from_dict(ex) for ex in data["exercises"]],
        )


_WEEK_SUFFIX = re.compile(r"-week\d+$")


@dataclass
class ProgramWeek:
    """A week in the program.

    The week number is assigned once when the week is created and is
    never derived from the identifier.
    """

    week_number: int
    week_start_date: date
    days: list[ProgramDay]
    focus: str = ""
    phase: TrainingPhase = TrainingPhase.BUILD

    @property
    def id(self) -> str:
        """Stable identifier for the week."""
        return f"week-{self.week_number}"

    @property
    def is_deload(self) -> bool:
        """Whether this is a recovery week."""
        return self.phase == TrainingPhase.DELOAD

    @property
    def planned_sets(self) -> int:
        """Total number of sets prescribed across all days."""
        return sum(day.planned_sets for day in self.days)

    def iter_exercises(self):
        """Yield every exercise of the week in day order."""
        for day in self.days:
            yield from day.exercises

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "week_number": self.week_number,
            "week_start_date": self.week_start_date.isoformat(),
            "focus": self.focus,
            "phase": self.phase.value,
            "days": [day.to_dict() for day in self.days],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProgramWeek":
        """Create from dictionary."""
        return cls(
            week_number=int(data["week_number"]),
            week_start_date=date.fromisoformat(data["week_start_date"][:10]),
            focus=data.get("focus") or "",
            phase=TrainingPhase(data.get("phase", "build")),
            days=[ProgramDay.from_dict(day) for day in data["days"]],
        )


def day_id_for_week(day_id: str, week_number: int) -> str:
    """Re-key a day identifier for another week (``mon-0-week2`` -> ``mon-0-week3``)."""
    return f"{_WEEK_SUFFIX.sub('', day_id)}-week{week_number}"


@dataclass
class TrainingBlock:
    """A contiguous run of weeks sharing one goal (mesocycle)."""

    goal: BlockGoal
    start_week_index: int
    end_week_index: int | None = None  # None while the block is active

    @property
    def is_active(self) -> bool:
        """Whether the block is still open."""
        return self.end_week_index is None

    def contains(self, week_index: int) -> bool:
        """Whether a week index falls inside this block."""
        if self.end_week_index is None:
            return week_index >= self.start_week_index
        return self.start_week_index <= week_index <= self.end_week_index

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "goal": self.goal.value,
            "start_week_index": self.start_week_index,
            "end_week_index": self.end_week_index,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TrainingBlock":
        """Create from dictionary."""
        end = data.get("end_week_index")
        return cls(
            goal=BlockGoal(data.get("goal", "general")),
            start_week_index=int(data["start_week_index"]),
            end_week_index=int(end) if end is not None else None,
        )


@dataclass
class ProgramMultiWeek:
    """Multi-week program: the root aggregate for weeks and blocks."""

    weeks: list[ProgramWeek]
    blocks: list[TrainingBlock] = field(default_factory=list)
    current_week_index: int = 0  # 0 = Week 1

    @property
    def current_week(self) -> ProgramWeek | None:
        """The week the athlete is currently in."""
        if 0 <= self.current_week_index < len(self.weeks):
            return self.weeks[self.current_week_index]
        return None

    def previous_week(self, week_index: int) -> ProgramWeek | None:
        """The week before ``week_index``, if any."""
        if 0 < week_index <= len(self.weeks):
            return self.weeks[week_index - 1]
        return None

    @property
    def active_block(self) -> TrainingBlock | None:
        """The open block, or None when none is open."""
        for block in self.blocks:
            if block.is_active:
                return block
        return None

    def block_for_week(self, week_index: int) -> TrainingBlock | None:
        """Find the block that contains a week index."""
        for block in self.blocks:
            if block.contains(week_index):
                return block
        return None

    def weeks_for_block(self, block: TrainingBlock) -> list[ProgramWeek]:
        """Weeks that belong to a block, in order."""
        return [week for i, week in enumerate(self.weeks) if block.contains(i)]

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "current_week_index": self.current_week_index,
            "weeks": [week.to_dict() for week in self.weeks],
            "blocks": [block.to_dict() for block in self.blocks],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProgramMultiWeek":
        """Create from dictionary."""
        return cls(
            current_week_index=int(data["current_week_index"]),
            weeks=[ProgramWeek.from_dict(week) for week in data["weeks"]],
            blocks=[TrainingBlock.from_dict(block) for block in data.get("blocks", [])],
        )

    def get_summary(self) -> str:
        """Generate a text summary of the program."""
        summary = f"Weeks: {len(self.weeks)}, current: Week {self.current_week_index + 1}\n"
        for block_number, block in enumerate(self.blocks, start=1):
            end = "active" if block.is_active else f"week {block.end_week_index + 1}"
            summary += (
                f"Block {block_number} ({block.goal.display_name}): "
                f"week {block.start_week_index + 1} -> {end}\n"
            )
        summary += "\n"

        for index, week in enumerate(self.weeks):
            marker = ">" if index == self.current_week_index else " "
            week_label = f"Week {week.week_number}"
            if week.is_deload:
                week_label += " (Deload)"
            summary += f"{marker} {week_label} - starts {week.week_start_date.isoformat()}\n"

            for day in week.days:
                summary += f"    {day.day_of_week.value.title()} ({day.focus.value}):\n"
                for ex in day.exercises:
                    summary += f"      - {ex.name}: {ex.sets}x{ex.reps}\n"

        return summary
