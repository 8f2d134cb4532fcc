"""Data access layer for liftcoach."""

import json
from pathlib import Path

import aiosqlite
from loguru import logger

from ..models.history import WorkoutHistoryEntry
from ..models.program import ProgramMultiWeek
from .engine import get_db_path


class ProgramRepository:
    """Repository for the multi-week program snapshot."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def load(self) -> ProgramMultiWeek | None:
        """Load the stored program.

        Returns None when nothing is stored or the stored snapshot is
        unreadable.
        """
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT data FROM program_state WHERE id = 1")
            row = await cursor.fetchone()

        if row is None:
            return None
        try:
            return ProgramMultiWeek.from_dict(json.loads(row["data"]))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Invalid program snapshot in database: {e}")
            return None

    async def save(self, program: ProgramMultiWeek) -> None:
        """Replace the stored program with ``program``."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO program_state (id, data, updated_at)
                VALUES (1, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(id) DO UPDATE SET
                    data = excluded.data,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (json.dumps(program.to_dict()),),
            )
            await db.commit()
        logger.info(
            f"Saved program: {len(program.weeks)} weeks, {len(program.blocks)} blocks, "
            f"current week {program.current_week_index + 1}"
        )

    async def clear(self) -> None:
        """Delete the stored program."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM program_state")
            await db.commit()


class HistoryRepository:
    """Repository for the workout history log."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def load_all(self) -> list[WorkoutHistoryEntry]:
        """Load every history entry, oldest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT data FROM workout_history ORDER BY completed_at, id"
            )
            rows = await cursor.fetchall()
            return [WorkoutHistoryEntry.from_dict(json.loads(row["data"])) for row in rows]

    async def add(self, entry: WorkoutHistoryEntry) -> bool:
        """Append an entry.

        Returns:
            False if an entry with the same id was already stored
        """
        return await self.add_many([entry]) == 1

    async def add_many(self, entries: list[WorkoutHistoryEntry]) -> int:
        """Append entries, skipping ids that are already stored.

        Returns:
            Number of entries inserted
        """
        inserted = 0
        async with aiosqlite.connect(self.db_path) as db:
            for entry in entries:
                cursor = await db.execute(
                    """
                    INSERT OR IGNORE INTO workout_history
                    (id, completed_at, program_day_id, data)
                    VALUES (?, ?, ?, ?)
                    """,
                    (
                        entry.id,
                        entry.completed_at_utc.isoformat(),
                        entry.program_day_id,
                        json.dumps(entry.to_dict()),
                    ),
                )
                inserted += cursor.rowcount
            await db.commit()

        if inserted < len(entries):
            logger.info(f"Skipped {len(entries) - inserted} history entries already stored")
        return inserted

    async def count(self) -> int:
        """Number of stored sessions."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT COUNT(*) FROM workout_history")
            row = await cursor.fetchone()
            return row[0]
