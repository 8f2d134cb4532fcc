"""Coaching output models: insights and block recommendations."""

from dataclasses import dataclass, field
from enum import Enum

from .metrics import KeyLiftSummary, WeeklyAdherenceMetrics, WeeklyStressMetrics
from .program import TrainingPhase


class InsightSeverity(str, Enum):
    """How urgently an insight should be surfaced."""

    CRITICAL = "critical"
    WARNING = "warning"
    SUCCESS = "success"
    INFO = "info"

    @property
    def rank(self) -> int:
        """Sort rank; lower is shown first."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    InsightSeverity.CRITICAL: 0,
    InsightSeverity.WARNING: 1,
    InsightSeverity.SUCCESS: 2,
    InsightSeverity.INFO: 3,
}


@dataclass
class CoachInsight:
    """A short coaching message derived from one week's metrics."""

    id: str
    severity: InsightSeverity
    title: str
    message: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "severity": self.severity.value,
            "title": self.title,
            "message": self.message,
        }


@dataclass
class CoachInsightInputs:
    """Everything the insight rules look at for one week."""

    week_number: int
    phase: TrainingPhase
    adherence: WeeklyAdherenceMetrics
    stress: WeeklyStressMetrics
    key_lifts: list[KeyLiftSummary] = field(default_factory=list)


class RecommendedAction(str, Enum):
    """What to do with the next block."""

    ADVANCE = "advance"
    REPEAT = "repeat"
    ADJUST = "adjust"


@dataclass
class BlockRecommendation:
    """Recommendation for the block that follows a completed one."""

    title: str
    message: str
    recommended_action: RecommendedAction

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "message": self.message,
            "recommended_action": self.recommended_action.value,
        }
