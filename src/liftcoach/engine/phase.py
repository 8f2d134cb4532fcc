"""Decide whether the next week builds or deloads."""

from loguru import logger

from ..models.history import WorkoutHistoryEntry
from ..models.program import ProgramWeek, TrainingPhase
from .actual_loads import total_volume_for_week

DELOAD_LOOKBACK_WEEKS = 3
VOLUME_RETENTION_RATIO = 0.95


def is_high_volume_trend(volumes: list[float]) -> bool:
    """Whether volume held within 5% week over week across the lookback.

    Args:
        volumes: Weekly volumes, oldest first
    """
    if len(volumes) < DELOAD_LOOKBACK_WEEKS or volumes[0] <= 0:
        return False
    return all(
        later >= earlier * VOLUME_RETENTION_RATIO
        for earlier, later in zip(volumes, volumes[1:])
    )


def determine_next_phase(
    recent_weeks: list[ProgramWeek], history: list[WorkoutHistoryEntry]
) -> TrainingPhase:
    """Phase for the week after ``recent_weeks``.

    Three consecutive build weeks with sustained volume trigger a deload.
    Any deload inside the lookback resets the count.

    Args:
        recent_weeks: Most recent weeks, oldest first, ending with the week
            under evaluation; only the last three are considered
        history: Workout history for volume calculation

    Returns:
        TrainingPhase.DELOAD or TrainingPhase.BUILD
    """
    if len(recent_weeks) < DELOAD_LOOKBACK_WEEKS:
        return TrainingPhase.BUILD

    lookback = recent_weeks[-DELOAD_LOOKBACK_WEEKS:]
    if any(week.phase != TrainingPhase.BUILD for week in lookback):
        return TrainingPhase.BUILD

    volumes = [total_volume_for_week(history, week) for week in lookback]
    if is_high_volume_trend(volumes):
        logger.debug(f"Sustained volume {volumes} over {len(lookback)} build weeks, deloading")
        return TrainingPhase.DELOAD
    return TrainingPhase.BUILD
