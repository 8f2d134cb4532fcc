"""Program routes."""

from fastapi import APIRouter, Depends, HTTPException

from ...db.repositories import ProgramRepository
from ...engine.diagnostics import run_diagnostics
from ...engine.renewal import generate_next_week_and_block
from ...models.history import WorkoutHistoryEntry
from ...models.program import ProgramMultiWeek
from .deps import load_history, load_program

router = APIRouter(tags=["program"])


@router.get("/program")
async def get_program(program: ProgramMultiWeek = Depends(load_program)):
    """The stored multi-week program."""
    return program.to_dict()


@router.post("/program/next-week")
async def next_week(
    program: ProgramMultiWeek = Depends(load_program),
    history: list[WorkoutHistoryEntry] = Depends(load_history),
):
    """Generate and store the next week."""
    if not program.weeks:
        raise HTTPException(status_code=409, detail="Program has no weeks to renew")

    renewed = generate_next_week_and_block(program, history)
    await ProgramRepository().save(renewed)

    week = renewed.weeks[-1]
    return {
        "week": week.to_dict(),
        "current_week_index": renewed.current_week_index,
        "blocks": [block.to_dict() for block in renewed.blocks],
    }


@router.get("/diagnostics")
async def diagnostics(
    program: ProgramMultiWeek = Depends(load_program),
    history: list[WorkoutHistoryEntry] = Depends(load_history),
):
    """Integrity issues in the stored data."""
    return {"issues": [issue.to_dict() for issue in run_diagnostics(program, history)]}
