"""Training block (mesocycle) bookkeeping and block-level metrics."""

from dataclasses import dataclass, replace

from loguru import logger

from ..models.history import WorkoutHistoryEntry
from ..models.metrics import BlockLiftComparison, BlockMetrics, BlockSummary
from ..models.program import ProgramMultiWeek, ProgramWeek, TrainingBlock, TrainingPhase
from .adherence import calculate_weekly_adherence
from .key_lifts import summarize_key_lifts
from .numbers import mean, percent_change, ratio
from .stress import calculate_weekly_stress
from .windows import completed_sets, history_for_week, rpe_values

MIN_WEEKS_PER_BLOCK = 4
BLOCK_KEY_LIFTS = 5


@dataclass
class BlockTransition:
    """Outcome of evaluating the active block."""

    close_block: bool
    block_index: int | None = None  # index of the active block in program.blocks
    end_week_index: int | None = None
    new_block: TrainingBlock | None = None
    weeks_in_block: int = 0


def _active_block_index(program: ProgramMultiWeek) -> int | None:
    active = [i for i, block in enumerate(program.blocks) if block.is_active]
    if len(active) != 1:
        logger.warning(f"Expected exactly one active block, found {len(active)}")
    return active[0] if active else None


def evaluate_block_transition(
    program: ProgramMultiWeek, next_phase: TrainingPhase
) -> BlockTransition:
    """Decide whether to close the active block.

    The block closes once it spans at least four weeks and the current week
    is a deload. The next block starts at the index of the week about to be
    generated and keeps the same goal.

    Args:
        program: Program snapshot before the next week is added
        next_phase: Phase chosen for the next week

    Returns:
        The transition to apply (``close_block`` False when nothing changes)
    """
    block_index = _active_block_index(program)
    if block_index is None:
        return BlockTransition(close_block=False)

    block = program.blocks[block_index]
    current = program.current_week_index
    weeks_in_block = current - block.start_week_index + 1
    current_week = program.current_week

    should_close = (
        weeks_in_block >= MIN_WEEKS_PER_BLOCK
        and current_week is not None
        and current_week.phase == TrainingPhase.DELOAD
    )
    logger.debug(
        f"Block {block_index + 1}: {weeks_in_block} weeks, current phase "
        f"{current_week.phase.value if current_week else None}, next phase {next_phase.value}, "
        f"close={should_close}"
    )
    if not should_close:
        return BlockTransition(
            close_block=False, block_index=block_index, weeks_in_block=weeks_in_block
        )

    return BlockTransition(
        close_block=True,
        block_index=block_index,
        end_week_index=current,
        new_block=TrainingBlock(goal=block.goal, start_week_index=len(program.weeks)),
        weeks_in_block=weeks_in_block,
    )


def apply_block_transition(
    blocks: list[TrainingBlock], transition: BlockTransition
) -> list[TrainingBlock]:
    """Return a new block list with the transition applied."""
    updated = [replace(block) for block in blocks]
    if not transition.close_block:
        return updated

    updated[transition.block_index] = replace(
        updated[transition.block_index], end_week_index=transition.end_week_index
    )
    updated.append(transition.new_block)
    return updated


def calculate_block_metrics(
    block_weeks: list[ProgramWeek], history: list[WorkoutHistoryEntry]
) -> BlockSummary:
    """Aggregate adherence, stress and lift progress across a block.

    Adherence and RPE are summed over every week. Volume change and lift
    progress compare the first week with the last, so both need at least
    two weeks.
    """
    planned_sessions = completed_sessions = planned_sets = completed_set_count = 0
    rpes: list[float] = []

    for week in block_weeks:
        adherence = calculate_weekly_adherence(week, history)
        planned_sessions += adherence.planned_sessions
        completed_sessions += adherence.completed_sessions
        planned_sets += adherence.planned_sets
        completed_set_count += adherence.completed_sets
        rpes.extend(rpe_values(completed_sets(history_for_week(history, week))))

    volume_change_percent = None
    key_lifts: list[BlockLiftComparison] = []

    if len(block_weeks) >= 2:
        first_week, last_week = block_weeks[0], block_weeks[-1]

        first_volume = calculate_weekly_stress(first_week, None, history).total_volume
        last_volume = calculate_weekly_stress(last_week, None, history).total_volume
        if last_volume > 0:
            volume_change_percent = percent_change(last_volume, first_volume)

        key_lifts = _compare_key_lifts(first_week, last_week, history)

    lift_progress_count = sum(
        1 for lift in key_lifts if lift.change_percent is not None and lift.change_percent > 0
    )

    metrics = BlockMetrics(
        session_adherence=ratio(completed_sessions, planned_sessions),
        set_adherence=ratio(completed_set_count, planned_sets),
        volume_change_percent=volume_change_percent,
        avg_rpe=mean(rpes),
        lift_progress_count=lift_progress_count,
        total_key_lifts=len(key_lifts),
    )

    return BlockSummary(
        metrics=metrics,
        planned_sessions=planned_sessions,
        completed_sessions=completed_sessions,
        planned_sets=planned_sets,
        completed_sets=completed_set_count,
        week_count=len(block_weeks),
        key_lifts=key_lifts,
    )


def _compare_key_lifts(
    first_week: ProgramWeek, last_week: ProgramWeek, history: list[WorkoutHistoryEntry]
) -> list[BlockLiftComparison]:
    """Match first- and last-week key lifts by name and rank by change."""
    loads: dict[str, list[float | None]] = {}
    for lift in summarize_key_lifts(first_week, None, history):
        loads[lift.exercise_name] = [lift.this_week_load_kg, None]
    for lift in summarize_key_lifts(last_week, None, history):
        loads.setdefault(lift.exercise_name, [None, None])[1] = lift.this_week_load_kg

    comparisons = [
        BlockLiftComparison(
            exercise_name=name,
            first_week_load_kg=first,
            last_week_load_kg=last,
            change_percent=percent_change(last, first),
        )
        for name, (first, last) in loads.items()
    ]
    # Known changes first, largest first
    comparisons.sort(
        key=lambda c: (c.change_percent is None, -(c.change_percent or 0.0))
    )
    return comparisons[:BLOCK_KEY_LIFTS]
