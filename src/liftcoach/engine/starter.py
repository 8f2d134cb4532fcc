"""Starter program: build week 1 and the first block from onboarding answers.

Deterministic rules only; exercise selection depends on the equipment
available and the primary goal.
"""

import re
from datetime import date

from ..models.profile import Equipment, OnboardingProfile, PrimaryGoal
from ..models.program import (
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

DEFAULT_SESSIONS_PER_WEEK = 3

DEFAULT_SCHEDULES = {
    2: [DayOfWeek.MONDAY, DayOfWeek.THURSDAY],
    3: [DayOfWeek.MONDAY, DayOfWeek.WEDNESDAY, DayOfWeek.FRIDAY],
    4: [DayOfWeek.MONDAY, DayOfWeek.TUESDAY, DayOfWeek.THURSDAY, DayOfWeek.FRIDAY],
    5: [
        DayOfWeek.MONDAY,
        DayOfWeek.TUESDAY,
        DayOfWeek.WEDNESDAY,
        DayOfWeek.FRIDAY,
        DayOfWeek.SATURDAY,
    ],
    6: [
        DayOfWeek.MONDAY,
        DayOfWeek.TUESDAY,
        DayOfWeek.WEDNESDAY,
        DayOfWeek.THURSDAY,
        DayOfWeek.FRIDAY,
        DayOfWeek.SATURDAY,
    ],
}

# (name, notes) per equipment tier
LOWER_BODY = {
    Equipment.BARBELL: [
        ("Barbell Back Squat", "Keep chest up, knees tracking over toes"),
        ("Conventional Deadlift", "Maintain neutral spine, drive through heels"),
    ],
    Equipment.DUMBBELL: [
        ("Goblet Squat", "Hold dumbbell at chest, squat deep"),
        ("DB Romanian Deadlift", "Slight knee bend, hinge at hips"),
    ],
    Equipment.BODYWEIGHT: [
        ("Bodyweight Squat", "Control the descent, full range of motion"),
        ("Split Squat", "Rear foot elevated if possible"),
    ],
}

UPPER_BODY = {
    Equipment.BARBELL: [
        ("Barbell Bench Press", "Lower to chest, press explosively"),
        ("Barbell Row", "Pull to lower chest, squeeze shoulder blades"),
        ("Overhead Press", "Press straight overhead, core tight"),
    ],
    Equipment.DUMBBELL: [
        ("DB Bench Press", "Lower dumbbells to chest level"),
        ("DB Row", "Single arm or bent-over, pull to hip"),
        ("DB Shoulder Press", "Press dumbbells overhead, controlled"),
    ],
    Equipment.BODYWEIGHT: [
        ("Push-up", "Hands shoulder-width, full range"),
        ("Inverted Row", "Use table edge or rings if available"),
        ("Pike Push-up", "Hips high, press shoulders overhead"),
    ],
}

SETS_REPS_BY_GOAL = {
    PrimaryGoal.LOSE_FAT: (3, "10-15"),
    PrimaryGoal.BUILD_MUSCLE: (4, "8-12"),
    PrimaryGoal.GET_STRONGER: (4, "3-6"),
    PrimaryGoal.IMPROVE_ENDURANCE: (3, "12-20"),
}
DEFAULT_SETS_REPS = (3, "8-10")


def _exercise_id(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


def _equipment_tier(equipment: list[Equipment]) -> Equipment:
    if Equipment.BARBELL in equipment:
        return Equipment.BARBELL
    if Equipment.DUMBBELL in equipment:
        return Equipment.DUMBBELL
    return Equipment.BODYWEIGHT


def sessions_per_week(profile: OnboardingProfile) -> int:
    """Sessions per week, falling back to 3 outside the 2-6 range."""
    if profile.sessions_per_week and 2 <= profile.sessions_per_week <= 6:
        return profile.sessions_per_week
    return DEFAULT_SESSIONS_PER_WEEK


def training_days(profile: OnboardingProfile) -> list[DayOfWeek]:
    """Preferred days trimmed to the session count, or a default schedule."""
    count = sessions_per_week(profile)
    if profile.preferred_days:
        return profile.preferred_days[:count]
    return DEFAULT_SCHEDULES[count]


def pick_exercises_for_day(
    focus: DayFocus, equipment: list[Equipment], primary_goal: PrimaryGoal | None
) -> list[ProgramExercise]:
    """Pick exercises for a full, upper or lower day."""
    tier = _equipment_tier(equipment)
    sets, reps = SETS_REPS_BY_GOAL.get(primary_goal, DEFAULT_SETS_REPS)

    picks: list[tuple[str, str]] = []
    if focus in (DayFocus.FULL, DayFocus.LOWER):
        picks.extend(LOWER_BODY[tier])
    if focus in (DayFocus.FULL, DayFocus.UPPER):
        picks.extend(UPPER_BODY[tier])

    return [
        ProgramExercise(id=_exercise_id(name), name=name, sets=sets, reps=reps, notes=notes)
        for name, notes in picks
    ]


def generate_first_week(profile: OnboardingProfile, today: date | None = None) -> ProgramWeek:
    """Build week 1 from onboarding answers.

    Up to three sessions train the full body; more alternate upper and
    lower days.
    """
    days_of_week = training_days(profile)
    full_body = sessions_per_week(profile) <= 3

    days = []
    for index, day_of_week in enumerate(days_of_week):
        if full_body:
            focus, description = DayFocus.FULL, "Full body strength focus"
        elif index % 2 == 0:
            focus, description = DayFocus.UPPER, "Upper body push/pull focus"
        else:
            focus, description = DayFocus.LOWER, "Lower body squat/hinge focus"

        days.append(
            ProgramDay(
                id=f"{day_of_week.value}-{index}-week1",
                day_of_week=day_of_week,
                focus=focus,
                description=description,
                exercises=pick_exercises_for_day(focus, profile.equipment, profile.primary_goal),
            )
        )

    return ProgramWeek(
        week_number=1,
        week_start_date=today or date.today(),
        focus=profile.primary_goal.week_focus if profile.primary_goal else "Strength and muscle",
        days=days,
        phase=TrainingPhase.BUILD,
    )


def generate_starter_program(
    profile: OnboardingProfile,
    today: date | None = None,
    block_goal: BlockGoal | None = None,
) -> ProgramMultiWeek:
    """Build a one-week program with its first active block."""
    if block_goal is None:
        block_goal = profile.primary_goal.block_goal if profile.primary_goal else BlockGoal.GENERAL
    return ProgramMultiWeek(
        weeks=[generate_first_week(profile, today)],
        blocks=[TrainingBlock(goal=block_goal, start_week_index=0)],
        current_week_index=0,
    )
