"""Next-block recommendations.

Block metrics run through a fixed priority list; the first rule that
applies decides the recommendation, even when a later rule would fit
the numbers better.
"""

from loguru import logger

from ..models.coaching import BlockRecommendation, RecommendedAction
from ..models.metrics import BlockMetrics
from .numbers import as_percent, fixed
from .rules import Rule, first_match


def _known(value: float | None) -> bool:
    return value is not None


def _low_attendance(m: BlockMetrics) -> BlockRecommendation:
    return BlockRecommendation(
        title="Repeat Block with Consistency Focus",
        message=(
            f"Session attendance was {as_percent(m.session_adherence)}%. Before progressing, "
            "focus on consistent training. Consider repeating this block's structure with "
            "similar loads to build the habit."
        ),
        recommended_action=RecommendedAction.REPEAT,
    )


def _low_set_completion(m: BlockMetrics) -> BlockRecommendation:
    return BlockRecommendation(
        title="Adjust Volume or Intensity",
        message=(
            f"You showed up ({as_percent(m.session_adherence)}% of sessions), but only completed "
            f"{as_percent(m.set_adherence)}% of planned sets. Consider reducing volume by 10-15% "
            "or lowering intensity in the next block."
        ),
        recommended_action=RecommendedAction.ADJUST,
    )


def _high_stress_limited_progress(m: BlockMetrics) -> BlockRecommendation:
    return BlockRecommendation(
        title="High Stress, Limited Progress",
        message=(
            f"Average RPE was {fixed(m.avg_rpe)} with {fixed(m.volume_change_percent, 0)}% "
            "volume increase, but fewer than half your key lifts improved. Consider swapping "
            "1-2 main exercises or adjusting rep ranges to manage fatigue better."
        ),
        recommended_action=RecommendedAction.ADJUST,
    )


def _strong_block(m: BlockMetrics) -> BlockRecommendation:
    return BlockRecommendation(
        title="Strong Block - Advance Programming",
        message=(
            f"Excellent adherence ({as_percent(m.session_adherence)}% sessions), sustainable "
            f"volume increase ({fixed(m.volume_change_percent, 0)}%), and "
            f"{m.lift_progress_count} of {m.total_key_lifts} key lifts improved. You're ready to "
            "increase volume or intensity by 5-10% in the next block."
        ),
        recommended_action=RecommendedAction.ADVANCE,
    )


def _solid_progress(m: BlockMetrics) -> BlockRecommendation:
    return BlockRecommendation(
        title="Solid Progress - Continue Forward",
        message=(
            f"Good adherence ({as_percent(m.session_adherence)}% sessions) and "
            f"{m.lift_progress_count} of {m.total_key_lifts} lifts improved. Maintain current "
            "structure with small progressive overload (2-5%) in the next block."
        ),
        recommended_action=RecommendedAction.ADVANCE,
    )


def _minor_adjustments(m: BlockMetrics) -> BlockRecommendation:
    return BlockRecommendation(
        title="Repeat with Minor Adjustments",
        message=(
            f"Attendance was {as_percent(m.session_adherence)}% with {m.lift_progress_count} "
            "lifts improving. Consider repeating this block's structure but adjusting 1-2 "
            "exercises that felt less effective."
        ),
        recommended_action=RecommendedAction.REPEAT,
    )


def _volume_without_progress(m: BlockMetrics) -> BlockRecommendation:
    return BlockRecommendation(
        title="Reduce Volume or Change Exercises",
        message=(
            f"Volume increased {fixed(m.volume_change_percent, 0)}% but only "
            f"{m.lift_progress_count} of {m.total_key_lifts} lifts improved. High volume without "
            "progress suggests poor recovery or exercise mismatch. Reduce volume by 15-20% or "
            "swap struggling movements."
        ),
        recommended_action=RecommendedAction.ADJUST,
    )


def _manage_fatigue(m: BlockMetrics) -> BlockRecommendation:
    return BlockRecommendation(
        title="Manage Fatigue and RPE",
        message=(
            f"Average RPE was {fixed(m.avg_rpe)}—extremely high. Even if you made progress, "
            "this level of fatigue is unsustainable. Reduce intensity by working at RPE 7-8 in "
            "the next block and prioritize recovery."
        ),
        recommended_action=RecommendedAction.ADJUST,
    )


def _maintain(m: BlockMetrics) -> BlockRecommendation:
    return BlockRecommendation(
        title="Maintain Current Approach",
        message=(
            f"Block completed with {as_percent(m.session_adherence)}% session adherence and "
            f"{m.lift_progress_count} of {m.total_key_lifts} lifts improving. Continue with "
            "similar structure and modest progression (2-5%) in the next block."
        ),
        recommended_action=RecommendedAction.ADVANCE,
    )


RECOMMENDATION_RULES = (
    Rule("consistency-focus", lambda m: m.session_adherence < 0.7, _low_attendance),
    Rule(
        "reduce-volume-or-intensity",
        lambda m: m.session_adherence >= 0.7 and m.set_adherence < 0.7,
        _low_set_completion,
    ),
    Rule(
        "high-stress-limited-progress",
        lambda m: (
            _known(m.avg_rpe)
            and m.avg_rpe >= 8.5
            and _known(m.volume_change_percent)
            and m.volume_change_percent > 15
            and m.lift_progress_ratio < 0.5
        ),
        _high_stress_limited_progress,
    ),
    Rule(
        "strong-block",
        lambda m: (
            m.session_adherence >= 0.9
            and m.set_adherence >= 0.85
            and _known(m.volume_change_percent)
            and 5 <= m.volume_change_percent <= 20
            and m.lift_progress_ratio >= 0.6
        ),
        _strong_block,
    ),
    Rule(
        "solid-progress",
        lambda m: (
            m.session_adherence >= 0.8
            and m.set_adherence >= 0.75
            and m.lift_progress_ratio >= 0.4
        ),
        _solid_progress,
    ),
    Rule(
        "minor-adjustments",
        lambda m: 0.7 <= m.session_adherence < 0.8 and m.lift_progress_ratio >= 0.3,
        _minor_adjustments,
    ),
    Rule(
        "volume-without-progress",
        lambda m: (
            _known(m.volume_change_percent)
            and m.volume_change_percent > 20
            and m.lift_progress_ratio < 0.3
        ),
        _volume_without_progress,
    ),
    Rule("manage-fatigue", lambda m: _known(m.avg_rpe) and m.avg_rpe >= 9.0, _manage_fatigue),
)


def get_next_block_recommendation(metrics: BlockMetrics) -> BlockRecommendation:
    """Recommend how the next block should differ from this one.

    Args:
        metrics: Aggregated metrics of the finished (or active) block

    Returns:
        The recommendation of the first matching rule, or a
        "maintain current approach" fallback
    """
    rule = first_match(RECOMMENDATION_RULES, metrics)
    if rule is None:
        logger.debug("No block rule matched, maintaining current approach")
        return _maintain(metrics)
    logger.debug(f"Block recommendation rule: {rule.name}")
    return rule.build(metrics)
