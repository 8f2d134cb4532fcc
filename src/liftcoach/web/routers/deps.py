"""Shared route helpers."""

from fastapi import HTTPException

from ...db.repositories import HistoryRepository, ProgramRepository
from ...models.history import WorkoutHistoryEntry
from ...models.program import ProgramMultiWeek


async def load_program() -> ProgramMultiWeek:
    """Load the stored program or respond 404."""
    program = await ProgramRepository().load()
    if program is None:
        raise HTTPException(status_code=404, detail="No program found")
    return program


async def load_history() -> list[WorkoutHistoryEntry]:
    """Load the full workout history."""
    return await HistoryRepository().load_all()
