"""Integrity diagnostics for stored program and history data.

Checks are pure and report-only: nothing here repairs the data.
"""

from dataclasses import dataclass
from datetime import datetime, time, timedelta
from enum import Enum

from ..models.history import WorkoutHistoryEntry
from ..models.program import ProgramMultiWeek

HISTORY_DATE_BUFFER = timedelta(days=14)


class DiagnosticSeverity(str, Enum):
    """How serious an integrity issue is."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class DiagnosticIssue:
    """A single integrity problem."""

    id: str
    severity: DiagnosticSeverity
    message: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"id": self.id, "severity": self.severity.value, "message": self.message}


def run_diagnostics(
    program: ProgramMultiWeek | None, history: list[WorkoutHistoryEntry]
) -> list[DiagnosticIssue]:
    """Run every integrity check; an empty list means the data is consistent."""
    if program is None:
        return []

    issues = []
    issues.extend(check_program_integrity(program))
    issues.extend(check_block_integrity(program))
    if history:
        issues.extend(check_history_dates(history, program))
    return issues


def check_program_integrity(program: ProgramMultiWeek) -> list[DiagnosticIssue]:
    """Check the current week index and that weeks and days are populated."""
    issues = []
    last_index = len(program.weeks) - 1

    if not 0 <= program.current_week_index <= last_index:
        issues.append(
            DiagnosticIssue(
                id="invalid-current-week-index",
                severity=DiagnosticSeverity.ERROR,
                message=(
                    f"Current week index ({program.current_week_index}) is out of bounds. "
                    f"Valid range: 0-{last_index}"
                ),
            )
        )

    if not program.weeks:
        issues.append(
            DiagnosticIssue(
                id="no-weeks",
                severity=DiagnosticSeverity.ERROR,
                message=(
                    "Program has no weeks defined. A valid program must have at least one week."
                ),
            )
        )

    for idx, week in enumerate(program.weeks):
        if not week.days:
            issues.append(
                DiagnosticIssue(
                    id=f"week-{idx}-no-days",
                    severity=DiagnosticSeverity.WARNING,
                    message=f"Week {idx + 1} has no training days defined.",
                )
            )
        for day_idx, day in enumerate(week.days):
            if not day.exercises:
                issues.append(
                    DiagnosticIssue(
                        id=f"week-{idx}-day-{day_idx}-no-exercises",
                        severity=DiagnosticSeverity.WARNING,
                        message=(
                            f"Week {idx + 1}, Day {day_idx + 1} ({day.day_of_week.value}) "
                            "has no exercises."
                        ),
                    )
                )

    return issues


def check_block_integrity(program: ProgramMultiWeek) -> list[DiagnosticIssue]:
    """Check block bounds, ordering, overlap and the single active block."""
    issues = []
    blocks = program.blocks
    last_index = len(program.weeks) - 1

    if not blocks:
        return [
            DiagnosticIssue(
                id="no-blocks",
                severity=DiagnosticSeverity.INFO,
                message=(
                    "No training blocks defined. "
                    "Blocks help organize mesocycles and progression."
                ),
            )
        ]

    for idx, block in enumerate(blocks):
        if not 0 <= block.start_week_index <= last_index:
            issues.append(
                DiagnosticIssue(
                    id=f"block-{idx}-invalid-start",
                    severity=DiagnosticSeverity.ERROR,
                    message=(
                        f"Block {idx + 1} start index ({block.start_week_index}) is out of "
                        f"bounds. Valid range: 0-{last_index}"
                    ),
                )
            )

        if block.end_week_index is None:
            continue
        if not 0 <= block.end_week_index <= last_index:
            issues.append(
                DiagnosticIssue(
                    id=f"block-{idx}-invalid-end",
                    severity=DiagnosticSeverity.ERROR,
                    message=(
                        f"Block {idx + 1} end index ({block.end_week_index}) is out of bounds. "
                        f"Valid range: 0-{last_index}"
                    ),
                )
            )
        if block.start_week_index > block.end_week_index:
            issues.append(
                DiagnosticIssue(
                    id=f"block-{idx}-inverted",
                    severity=DiagnosticSeverity.ERROR,
                    message=(
                        f"Block {idx + 1} has start index ({block.start_week_index}) greater "
                        f"than end index ({block.end_week_index})"
                    ),
                )
            )

    active_count = sum(1 for block in blocks if block.is_active)
    if active_count != 1:
        issues.append(
            DiagnosticIssue(
                id="active-block-count",
                severity=DiagnosticSeverity.WARNING,
                message=f"Expected exactly one active block, found {active_count}.",
            )
        )

    week_to_block: dict[int, int] = {}
    for block_idx, block in enumerate(blocks):
        # Active blocks are open-ended and skipped here
        if block.end_week_index is None:
            continue
        for week_idx in range(block.start_week_index, block.end_week_index + 1):
            if week_idx in week_to_block:
                other_idx = week_to_block[week_idx]
                issues.append(
                    DiagnosticIssue(
                        id=f"overlapping-blocks-{block_idx}-{other_idx}",
                        severity=DiagnosticSeverity.ERROR,
                        message=(
                            f"Week {week_idx + 1} belongs to both Block {block_idx + 1} and "
                            f"Block {other_idx + 1}. Blocks must not overlap."
                        ),
                    )
                )
            week_to_block[week_idx] = block_idx

    return issues


def check_history_dates(
    history: list[WorkoutHistoryEntry], program: ProgramMultiWeek
) -> list[DiagnosticIssue]:
    """Flag sessions logged well outside the program's date range."""
    if not program.weeks:
        return []

    first = datetime.combine(program.weeks[0].week_start_date, time.min)
    last = datetime.combine(program.weeks[-1].week_start_date, time.min) + HISTORY_DATE_BUFFER

    outliers = [e for e in history if e.completed_at_utc < first or e.completed_at_utc > last]
    if not outliers:
        return []

    return [
        DiagnosticIssue(
            id="history-date-outliers",
            severity=DiagnosticSeverity.WARNING,
            message=(
                f"{len(outliers)} workout session(s) have dates outside the program's week "
                "range. This may indicate stale data or incorrect dates."
            ),
        )
    ]
