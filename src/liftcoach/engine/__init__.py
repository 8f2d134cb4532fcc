"""Periodization and progression engine.

Pure functions over program and history snapshots; nothing here touches
storage.
"""

from .actual_loads import get_actual_loads_for_week
from .adherence import calculate_weekly_adherence
from .blocks import apply_block_transition, calculate_block_metrics, evaluate_block_transition
from .dashboard import build_weekly_dashboard
from .diagnostics import run_diagnostics
from .insights import generate_coach_insights, sort_insights_by_priority
from .key_lifts import summarize_key_lifts
from .phase import determine_next_phase
from .recommendations import get_next_block_recommendation
from .renewal import generate_next_week, generate_next_week_and_block
from .starter import generate_starter_program
from .stress import calculate_weekly_stress

__all__ = [
    "apply_block_transition",
    "build_weekly_dashboard",
    "calculate_block_metrics",
    "calculate_weekly_adherence",
    "calculate_weekly_stress",
    "determine_next_phase",
    "evaluate_block_transition",
    "generate_coach_insights",
    "generate_next_week",
    "generate_next_week_and_block",
    "generate_starter_program",
    "get_actual_loads_for_week",
    "get_next_block_recommendation",
    "run_diagnostics",
    "sort_insights_by_priority",
    "summarize_key_lifts",
]
