"""Tests for data models."""

import json
from datetime import date, datetime, timezone

import pytest

from factories import build_entry, build_week
from liftcoach.models.history import SetStatus, WorkoutHistoryEntry, WorkoutSet
from liftcoach.models.profile import OnboardingProfile, PrimaryGoal
from liftcoach.models.program import (
    BlockGoal,
    ProgramMultiWeek,
    ProgramWeek,
    TrainingBlock,
    TrainingPhase,
    day_id_for_week,
)


class TestProgramWeek:
    """Tests for ProgramWeek model."""

    def test_id_derived_from_week_number(self):
        """Test the identifier comes from the week number."""
        week = build_week(7)
        assert week.id == "week-7"

    def test_is_deload(self):
        """Test the deload convenience property."""
        assert build_week(phase=TrainingPhase.DELOAD).is_deload
        assert not build_week().is_deload

    def test_planned_sets(self, sample_week):
        """Test planned sets sum across days."""
        # Day 1: 3 + 3, day 2: 2 + 3
        assert sample_week.planned_sets == 11

    def test_round_trip(self, sample_week):
        """Test week serialization round-trip through JSON."""
        data = json.loads(json.dumps(sample_week.to_dict()))
        restored = ProgramWeek.from_dict(data)

        assert restored == sample_week
        assert data["phase"] == "build"
        assert data["week_start_date"] == "2025-01-06"

    def test_from_dict_accepts_timestamp_start(self):
        """Test a full timestamp is accepted as the start date."""
        data = build_week().to_dict()
        data["week_start_date"] = "2025-01-06T00:00:00.000Z"
        assert ProgramWeek.from_dict(data).week_start_date == date(2025, 1, 6)

    def test_day_id_for_week(self):
        """Test day ids are re-keyed rather than accumulating suffixes."""
        assert day_id_for_week("monday-0-week2", 3) == "monday-0-week3"
        assert day_id_for_week("custom-day", 2) == "custom-day-week2"


class TestTrainingBlock:
    """Tests for TrainingBlock model."""

    def test_active_block_contains_later_weeks(self):
        """Test an open block contains every week from its start."""
        block = TrainingBlock(goal=BlockGoal.STRENGTH, start_week_index=2)
        assert block.is_active
        assert block.contains(2)
        assert block.contains(10)
        assert not block.contains(1)

    def test_closed_block_range(self):
        """Test a closed block is inclusive at both ends."""
        block = TrainingBlock(goal=BlockGoal.GENERAL, start_week_index=0, end_week_index=3)
        assert block.contains(0)
        assert block.contains(3)
        assert not block.contains(4)

    def test_goal_display_name(self):
        """Test human-readable goal names."""
        assert BlockGoal.RETURN_TO_TRAINING.display_name == "Return to Training"
        assert BlockGoal.GENERAL.display_name == "General Fitness"


class TestProgramMultiWeek:
    """Tests for ProgramMultiWeek model."""

    def test_round_trip(self, sample_program):
        """Test program serialization round-trip."""
        restored = ProgramMultiWeek.from_dict(sample_program.to_dict())
        assert restored == sample_program

    def test_current_and_previous_week(self, sample_program):
        """Test week lookups."""
        assert sample_program.current_week.week_number == 4
        assert sample_program.previous_week(3).week_number == 3
        assert sample_program.previous_week(0) is None

    def test_weeks_for_block(self, sample_program):
        """Test block week selection."""
        sample_program.blocks = [
            TrainingBlock(goal=BlockGoal.STRENGTH, start_week_index=0, end_week_index=1),
            TrainingBlock(goal=BlockGoal.STRENGTH, start_week_index=2),
        ]
        first, second = sample_program.blocks
        assert [w.week_number for w in sample_program.weeks_for_block(first)] == [1, 2]
        assert [w.week_number for w in sample_program.weeks_for_block(second)] == [3, 4]
        assert sample_program.active_block is second
        assert sample_program.block_for_week(1) is first

    def test_summary_marks_deload(self, sample_program):
        """Test the text summary labels deload weeks."""
        sample_program.weeks[3].phase = TrainingPhase.DELOAD
        summary = sample_program.get_summary()
        assert "Week 4 (Deload)" in summary
        assert "Block 1 (Strength)" in summary


class TestWorkoutHistory:
    """Tests for workout history models."""

    def test_set_volume_with_missing_values(self):
        """Test missing reps or load contribute no volume."""
        assert WorkoutSet("squat", 0, SetStatus.COMPLETED, performed_reps=5).volume == 0
        assert WorkoutSet("squat", 0, SetStatus.COMPLETED, performed_load_kg=100).volume == 0
        assert (
            WorkoutSet(
                "squat", 0, SetStatus.COMPLETED, performed_reps=5, performed_load_kg=100
            ).volume
            == 500
        )

    def test_entry_round_trip(self):
        """Test history entry serialization round-trip."""
        entry = build_entry(datetime(2025, 1, 7, 18, 0), {"squat": [(5, 100, 8)]})
        restored = WorkoutHistoryEntry.from_dict(json.loads(json.dumps(entry.to_dict())))
        assert restored == entry

    def test_from_dict_parses_utc_suffix(self):
        """Test ISO timestamps ending in Z are parsed as UTC."""
        data = build_entry(datetime(2025, 1, 7, 18, 0), {}).to_dict()
        data["completed_at"] = "2025-01-07T18:00:00.000Z"
        entry = WorkoutHistoryEntry.from_dict(data)

        assert entry.completed_at.tzinfo is not None
        assert entry.completed_at_utc == datetime(2025, 1, 7, 18, 0)

    def test_completed_at_utc_converts_offsets(self):
        """Test aware timestamps are normalised to naive UTC."""
        entry = build_entry(
            datetime(2025, 1, 7, 1, 0, tzinfo=timezone.utc).astimezone(), {}
        )
        assert entry.completed_at_utc == datetime(2025, 1, 7, 1, 0)

    def test_from_dict_rejects_unknown_status(self):
        """Test invalid set status raises."""
        with pytest.raises(ValueError):
            WorkoutSet.from_dict({"exercise_id": "squat", "status": "maybe"})

    def test_from_dict_coerces_numeric_strings(self):
        """Test numbers sent as strings are stored as numbers."""
        logged = WorkoutSet.from_dict(
            {
                "exercise_id": "squat",
                "status": "completed",
                "target_load_kg": "95",
                "performed_reps": "5",
                "performed_load_kg": "100",
                "rpe": "8.5",
            }
        )
        assert logged.performed_reps == 5
        assert logged.performed_load_kg == 100.0
        assert logged.target_load_kg == 95.0
        assert logged.rpe == 8.5
        assert logged.volume == 500

    @pytest.mark.parametrize("field", ["performed_reps", "performed_load_kg", "rpe"])
    def test_from_dict_rejects_non_numeric(self, field):
        """Test non-numeric set values raise."""
        with pytest.raises(ValueError):
            WorkoutSet.from_dict({"exercise_id": "squat", "status": "completed", field: "five"})

    @pytest.mark.parametrize("completed_at", [123, None, ["2025-01-07"]])
    def test_from_dict_rejects_non_timestamp(self, completed_at):
        """Test completed_at must be an ISO string or a datetime."""
        data = build_entry(datetime(2025, 1, 7, 18, 0), {}).to_dict()
        data["completed_at"] = completed_at
        with pytest.raises(ValueError):
            WorkoutHistoryEntry.from_dict(data)


class TestOnboardingProfile:
    """Tests for OnboardingProfile model."""

    def test_goal_mapping(self):
        """Test primary goals map to block goals."""
        assert PrimaryGoal.GET_STRONGER.block_goal == BlockGoal.STRENGTH
        assert PrimaryGoal.BUILD_MUSCLE.block_goal == BlockGoal.HYPERTROPHY
        assert PrimaryGoal.LOSE_FAT.block_goal == BlockGoal.GENERAL

    def test_round_trip(self):
        """Test profile serialization round-trip."""
        profile = OnboardingProfile(sessions_per_week=4, primary_goal=PrimaryGoal.STAY_FIT)
        assert OnboardingProfile.from_dict(profile.to_dict()) == profile
