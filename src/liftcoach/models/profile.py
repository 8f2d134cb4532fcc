"""Onboarding profile used to build a starter program."""

from dataclasses import dataclass, field
from enum import Enum

from .program import BlockGoal, DayOfWeek


class PrimaryGoal(str, Enum):
    """Primary goal picked during onboarding."""

    LOSE_FAT = "lose_fat"
    BUILD_MUSCLE = "build_muscle"
    GET_STRONGER = "get_stronger"
    IMPROVE_ENDURANCE = "improve_endurance"
    STAY_FIT = "stay_fit"

    @property
    def week_focus(self) -> str:
        """Week-level focus description for this goal."""
        return {
            PrimaryGoal.LOSE_FAT: "Fat loss and conditioning",
            PrimaryGoal.BUILD_MUSCLE: "Muscle building and hypertrophy",
            PrimaryGoal.GET_STRONGER: "Strength and power",
            PrimaryGoal.IMPROVE_ENDURANCE: "Endurance and stamina",
            PrimaryGoal.STAY_FIT: "General fitness and health",
        }[self]

    @property
    def block_goal(self) -> BlockGoal:
        """Goal for the first training block."""
        if self == PrimaryGoal.GET_STRONGER:
            return BlockGoal.STRENGTH
        if self == PrimaryGoal.BUILD_MUSCLE:
            return BlockGoal.HYPERTROPHY
        return BlockGoal.GENERAL


class Equipment(str, Enum):
    """Equipment that changes exercise selection."""

    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    BODYWEIGHT = "bodyweight"


@dataclass
class OnboardingProfile:
    """Answers collected by the onboarding questionnaire."""

    sessions_per_week: int | None = None  # 2-6, anything else falls back to 3
    preferred_days: list[DayOfWeek] = field(default_factory=list)
    equipment: list[Equipment] = field(default_factory=list)
    primary_goal: PrimaryGoal | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "sessions_per_week": self.sessions_per_week,
            "preferred_days": [d.value for d in self.preferred_days],
            "equipment": [e.value for e in self.equipment],
            "primary_goal": self.primary_goal.value if self.primary_goal else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "OnboardingProfile":
        """Create from dictionary."""
        goal = data.get("primary_goal")
        return cls(
            sessions_per_week=data.get("sessions_per_week"),
            preferred_days=[DayOfWeek(d) for d in data.get("preferred_days", [])],
            equipment=[Equipment(e) for e in data.get("equipment", [])],
            primary_goal=PrimaryGoal(goal) if goal else None,
        )
