"""Tests for next-block recommendations."""

import pytest

from liftcoach.engine.recommendations import get_next_block_recommendation
from liftcoach.models.coaching import RecommendedAction
from liftcoach.models.metrics import BlockMetrics


def _metrics(session, sets, volume, rpe, progressed, key_lifts):
    return BlockMetrics(
        session_adherence=session,
        set_adherence=sets,
        volume_change_percent=volume,
        avg_rpe=rpe,
        lift_progress_count=progressed,
        total_key_lifts=key_lifts,
    )


class TestGetNextBlockRecommendation:
    """Tests for get_next_block_recommendation."""

    @pytest.mark.parametrize(
        "metrics,title,action",
        [
            (
                _metrics(0.65, 0.95, 10, 7, 4, 5),
                "Repeat Block with Consistency Focus",
                RecommendedAction.REPEAT,
            ),
            (
                _metrics(0.8, 0.6, 10, 7, 3, 5),
                "Adjust Volume or Intensity",
                RecommendedAction.ADJUST,
            ),
            (
                _metrics(0.95, 0.9, 20, 8.7, 1, 5),
                "High Stress, Limited Progress",
                RecommendedAction.ADJUST,
            ),
            (
                _metrics(0.95, 0.9, 10, 7.5, 4, 5),
                "Strong Block - Advance Programming",
                RecommendedAction.ADVANCE,
            ),
            (
                _metrics(0.85, 0.8, 25, 7.5, 2, 5),
                "Solid Progress - Continue Forward",
                RecommendedAction.ADVANCE,
            ),
            (
                _metrics(0.75, 0.8, 5, 7, 2, 5),
                "Repeat with Minor Adjustments",
                RecommendedAction.REPEAT,
            ),
            (
                _metrics(0.85, 0.8, 25, 8.0, 1, 5),
                "Reduce Volume or Change Exercises",
                RecommendedAction.ADJUST,
            ),
            (
                _metrics(0.85, 0.8, 10, 9.2, 1, 5),
                "Manage Fatigue and RPE",
                RecommendedAction.ADJUST,
            ),
            (
                _metrics(0.85, 0.8, None, None, 0, 0),
                "Maintain Current Approach",
                RecommendedAction.ADVANCE,
            ),
        ],
    )
    def test_each_rule(self, metrics, title, action):
        """Test every rule and the fallback."""
        recommendation = get_next_block_recommendation(metrics)
        assert recommendation.title == title
        assert recommendation.recommended_action == action

    def test_attendance_beats_everything(self):
        """Test low attendance wins even when the block was otherwise strong."""
        recommendation = get_next_block_recommendation(_metrics(0.65, 0.95, 10, 7, 4, 5))
        assert recommendation.recommended_action == RecommendedAction.REPEAT
        assert "Session attendance was 65%" in recommendation.message

    def test_first_match_wins(self):
        """Test high stress is reported before extreme RPE."""
        recommendation = get_next_block_recommendation(_metrics(0.95, 0.9, 20, 9.5, 1, 5))
        assert recommendation.title == "High Stress, Limited Progress"

    def test_strong_block_message(self):
        """Test the strong block message reports the numbers."""
        recommendation = get_next_block_recommendation(_metrics(0.95, 0.9, 10, 7.5, 4, 5))
        assert "95% sessions" in recommendation.message
        assert "(10%)" in recommendation.message
        assert "4 of 5 key lifts improved" in recommendation.message

    def test_percentages_round_half_up(self):
        """Test adherence percentages round half up."""
        recommendation = get_next_block_recommendation(_metrics(0.875, 0.8, None, None, 0, 0))
        assert "88% session adherence" in recommendation.message

    def test_unknown_volume_skips_volume_rules(self):
        """Test rules that need a volume change do not fire without one."""
        recommendation = get_next_block_recommendation(_metrics(0.95, 0.9, None, 8.7, 0, 5))
        assert recommendation.title == "Maintain Current Approach"

    def test_to_dict(self):
        """Test serialization uses the action value."""
        data = get_next_block_recommendation(_metrics(0.65, 0.95, 10, 7, 4, 5)).to_dict()
        assert data["recommended_action"] == "repeat"

    def test_volume_change_rounds_half_up(self):
        """Test whole-percent volume changes round halves up."""
        recommendation = get_next_block_recommendation(_metrics(0.85, 0.8, 22.5, 8.0, 1, 5))
        assert recommendation.title == "Reduce Volume or Change Exercises"
        assert recommendation.message.startswith("Volume increased 23% but only 1 of 5")

    def test_extreme_rpe_message(self):
        """Test the fatigue message reports RPE to one decimal."""
        recommendation = get_next_block_recommendation(_metrics(0.85, 0.8, 10, 9.25, 1, 5))
        assert recommendation.message.startswith("Average RPE was 9.3—extremely high.")
