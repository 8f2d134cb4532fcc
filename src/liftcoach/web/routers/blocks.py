"""Training block routes."""

from fastapi import APIRouter, Depends, HTTPException

from ...engine.blocks import calculate_block_metrics
from ...engine.recommendations import get_next_block_recommendation
from ...models.history import WorkoutHistoryEntry
from ...models.program import ProgramMultiWeek
from .deps import load_history, load_program

router = APIRouter(prefix="/blocks", tags=["blocks"])


@router.get("/{block_index}/summary")
async def block_summary(
    block_index: int,
    program: ProgramMultiWeek = Depends(load_program),
    history: list[WorkoutHistoryEntry] = Depends(load_history),
):
    """Aggregated metrics and next-block recommendation for a block (0-based)."""
    if not 0 <= block_index < len(program.blocks):
        raise HTTPException(status_code=404, detail=f"Block {block_index} not found")

    block = program.blocks[block_index]
    block_weeks = program.weeks_for_block(block)
    if not block_weeks:
        raise HTTPException(status_code=404, detail="No weeks found for this block")

    summary = calculate_block_metrics(block_weeks, history)
    return {
        "block": block.to_dict(),
        "summary": summary.to_dict(),
        "recommendation": get_next_block_recommendation(summary.metrics).to_dict(),
    }
