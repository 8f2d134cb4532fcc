"""Data models for liftcoach."""

from .coaching import (
    BlockRecommendation,
    CoachInsight,
    CoachInsightInputs,
    InsightSeverity,
    RecommendedAction,
)
from .history import ExerciseLog, SetStatus, WorkoutHistoryEntry, WorkoutSet
from .metrics import (
    ActualExerciseLoad,
    AdherenceLabel,
    BlockLiftComparison,
    BlockMetrics,
    BlockSummary,
    KeyLiftSummary,
    WeeklyAdherenceMetrics,
    WeeklyStressMetrics,
)
from .profile import Equipment, OnboardingProfile, PrimaryGoal
from .program import (
    BlockGoal,
    DayFocus,
    DayOfWeek,
    ProgramDay,
    ProgramExercise,
    ProgramMultiWeek,
    ProgramWeek,
    TrainingBlock,
    TrainingPhase,
)

__all__ = [
    "ActualExerciseLoad",
    "AdherenceLabel",
    "BlockGoal",
    "BlockLiftComparison",
    "BlockMetrics",
    "BlockRecommendation",
    "BlockSummary",
    "CoachInsight",
    "CoachInsightInputs",
    "DayFocus",
    "DayOfWeek",
    "Equipment",
    "ExerciseLog",
    "InsightSeverity",
    "KeyLiftSummary",
    "OnboardingProfile",
    "PrimaryGoal",
    "ProgramDay",
    "ProgramExercise",
    "ProgramMultiWeek",
    "ProgramWeek",
    "RecommendedAction",
    "SetStatus",
    "TrainingBlock",
    "TrainingPhase",
    "WeeklyAdherenceMetrics",
    "WeeklyStressMetrics",
    "WorkoutHistoryEntry",
    "WorkoutSet",
]
