"""Weekly dashboard routes."""

from fastapi import APIRouter, Depends, HTTPException

from ...engine.dashboard import DEFAULT_INSIGHT_LIMIT, build_weekly_dashboard
from ...models.history import WorkoutHistoryEntry
from ...models.program import ProgramMultiWeek
from .deps import load_history, load_program

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/{week_index}")
async def weekly_dashboard(
    week_index: int,
    limit: int = DEFAULT_INSIGHT_LIMIT,
    program: ProgramMultiWeek = Depends(load_program),
    history: list[WorkoutHistoryEntry] = Depends(load_history),
):
    """Metrics and top insights for the week at ``week_index`` (0-based)."""
    try:
        board = build_weekly_dashboard(program, week_index, history, insight_limit=limit)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return board.to_dict()
