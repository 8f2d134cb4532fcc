"""Tests for the starter program generator."""

from datetime import date

import pytest

from liftcoach.engine.starter import (
    generate_first_week,
    generate_starter_program,
    pick_exercises_for_day,
    sessions_per_week,
    training_days,
)
from liftcoach.models.profile import Equipment, OnboardingProfile, PrimaryGoal
from liftcoach.models.program import BlockGoal, DayFocus, DayOfWeek, TrainingPhase

TODAY = date(2025, 3, 3)


class TestSchedule:
    """Tests for session count and training days."""

    @pytest.mark.parametrize("requested,expected", [(None, 3), (1, 3), (2, 2), (6, 6), (7, 3)])
    def test_sessions_per_week(self, requested, expected):
        """Test out-of-range requests fall back to three."""
        assert sessions_per_week(OnboardingProfile(sessions_per_week=requested)) == expected

    def test_default_schedule(self):
        """Test the default days for four sessions."""
        days = training_days(OnboardingProfile(sessions_per_week=4))
        assert days == [DayOfWeek.MONDAY, DayOfWeek.TUESDAY, DayOfWeek.THURSDAY, DayOfWeek.FRIDAY]

    def test_preferred_days_trimmed(self):
        """Test preferred days are cut to the session count."""
        profile = OnboardingProfile(
            sessions_per_week=2,
            preferred_days=[DayOfWeek.TUESDAY, DayOfWeek.THURSDAY, DayOfWeek.SATURDAY],
        )
        assert training_days(profile) == [DayOfWeek.TUESDAY, DayOfWeek.THURSDAY]


class TestPickExercisesForDay:
    """Tests for pick_exercises_for_day."""

    def test_barbell_full_body(self):
        """Test a full-body barbell day for strength."""
        exercises = pick_exercises_for_day(
            DayFocus.FULL, [Equipment.BARBELL], PrimaryGoal.GET_STRONGER
        )
        assert [ex.name for ex in exercises] == [
            "Barbell Back Squat",
            "Conventional Deadlift",
            "Barbell Bench Press",
            "Barbell Row",
            "Overhead Press",
        ]
        assert all(ex.sets == 4 and ex.reps == "3-6" for ex in exercises)
        assert exercises[0].id == "barbell-back-squat"

    def test_dumbbell_lower(self):
        """Test dumbbells without a barbell."""
        exercises = pick_exercises_for_day(DayFocus.LOWER, [Equipment.DUMBBELL], None)
        assert [ex.name for ex in exercises] == ["Goblet Squat", "DB Romanian Deadlift"]
        assert exercises[0].sets == 3
        assert exercises[0].reps == "8-10"

    def test_bodyweight_upper(self):
        """Test no equipment falls back to bodyweight."""
        exercises = pick_exercises_for_day(DayFocus.UPPER, [], PrimaryGoal.IMPROVE_ENDURANCE)
        assert [ex.id for ex in exercises] == ["push-up", "inverted-row", "pike-push-up"]
        assert exercises[0].reps == "12-20"

    def test_barbell_wins_over_dumbbell(self):
        """Test the best equipment tier is used."""
        exercises = pick_exercises_for_day(
            DayFocus.LOWER, [Equipment.DUMBBELL, Equipment.BARBELL], None
        )
        assert exercises[0].name == "Barbell Back Squat"


class TestGenerateFirstWeek:
    """Tests for generate_first_week."""

    def test_full_body_week(self):
        """Test three sessions are all full body."""
        profile = OnboardingProfile(
            sessions_per_week=3,
            equipment=[Equipment.BARBELL],
            primary_goal=PrimaryGoal.BUILD_MUSCLE,
        )
        week = generate_first_week(profile, today=TODAY)

        assert week.week_number == 1
        assert week.week_start_date == TODAY
        assert week.phase == TrainingPhase.BUILD
        assert week.focus == "Muscle building and hypertrophy"
        assert [day.id for day in week.days] == [
            "monday-0-week1",
            "wednesday-1-week1",
            "friday-2-week1",
        ]
        assert {day.focus for day in week.days} == {DayFocus.FULL}

    def test_upper_lower_split(self):
        """Test four sessions alternate upper and lower."""
        week = generate_first_week(OnboardingProfile(sessions_per_week=4), today=TODAY)
        assert [day.focus for day in week.days] == [
            DayFocus.UPPER,
            DayFocus.LOWER,
            DayFocus.UPPER,
            DayFocus.LOWER,
        ]
        assert week.focus == "Strength and muscle"


class TestGenerateStarterProgram:
    """Tests for generate_starter_program."""

    @pytest.mark.parametrize(
        "goal,block_goal",
        [
            (PrimaryGoal.GET_STRONGER, BlockGoal.STRENGTH),
            (PrimaryGoal.BUILD_MUSCLE, BlockGoal.HYPERTROPHY),
            (PrimaryGoal.LOSE_FAT, BlockGoal.GENERAL),
            (None, BlockGoal.GENERAL),
        ],
    )
    def test_first_block_goal(self, goal, block_goal):
        """Test the first block's goal follows the primary goal."""
        program = generate_starter_program(OnboardingProfile(primary_goal=goal), today=TODAY)
        assert program.blocks[0].goal == block_goal

    def test_shape(self):
        """Test one week, one active block starting at week 0."""
        program = generate_starter_program(OnboardingProfile(), today=TODAY)
        assert len(program.weeks) == 1
        assert program.current_week_index == 0
        assert len(program.blocks) == 1
        assert program.blocks[0].start_week_index == 0
        assert program.blocks[0].is_active

    def test_explicit_block_goal(self):
        """Test an explicit block goal overrides the profile."""
        program = generate_starter_program(
            OnboardingProfile(primary_goal=PrimaryGoal.GET_STRONGER),
            today=TODAY,
            block_goal=BlockGoal.RETURN_TO_TRAINING,
        )
        assert program.blocks[0].goal == BlockGoal.RETURN_TO_TRAINING
