"""Workout history routes."""

from fastapi import APIRouter, Body, HTTPException

from ...db.repositories import HistoryRepository
from ...models.history import WorkoutHistoryEntry

router = APIRouter(prefix="/history", tags=["history"])


@router.get("")
async def list_history():
    """Every logged session, oldest first."""
    entries = await HistoryRepository().load_all()
    return {"entries": [entry.to_dict() for entry in entries]}


@router.post("")
async def add_history(payload: dict = Body(...)):
    """Append a logged session."""
    try:
        entry = WorkoutHistoryEntry.from_dict(payload)
    except (KeyError, TypeError, ValueError) as e:
        raise HTTPException(status_code=422, detail=f"Invalid history entry: {e}")

    created = await HistoryRepository().add(entry)
    return {"status": "created" if created else "exists", "id": entry.id}
