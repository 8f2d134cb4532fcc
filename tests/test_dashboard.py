"""Tests for the weekly dashboard."""

import pytest

from factories import at, build_entry
from liftcoach.engine.dashboard import build_weekly_dashboard


class TestBuildWeeklyDashboard:
    """Tests for build_weekly_dashboard."""

    def test_second_week(self, sample_program):
        """Test the dashboard compares against the previous week."""
        week1, week2 = sample_program.weeks[:2]
        history = [
            build_entry(
                at(week1.week_start_date),
                {"squat": [(5, 100, 8)] * 3, "bench": [(5, 60, 8)] * 3},
            ),
            build_entry(
                at(week2.week_start_date),
                {"squat": [(5, 105, 8)] * 3, "bench": [(5, 60, 8)] * 3},
            ),
        ]
        board = build_weekly_dashboard(sample_program, 1, history)

        assert board.week is week2
        assert board.adherence.session_adherence == 1.0
        assert board.stress.volume_change_percent == pytest.approx(75 / 2400 * 100)
        assert board.key_lifts[0].exercise_id == "squat"
        assert board.key_lifts[0].change_percent == pytest.approx(5.0)
        assert [insight.id for insight in board.insights] == ["high-adherence", "productive-stress"]

    def test_insight_limit(self, sample_program):
        """Test the insight list is cut after sorting."""
        week1 = sample_program.weeks[0]
        history = [build_entry(at(week1.week_start_date), {"squat": [(5, 100, 8)] * 3})]
        board = build_weekly_dashboard(sample_program, 0, history, insight_limit=1)
        assert [insight.id for insight in board.insights] == ["high-adherence"]

        board = build_weekly_dashboard(sample_program, 0, history, insight_limit=None)
        assert [insight.id for insight in board.insights] == ["high-adherence", "week-1-start"]

    def test_out_of_range(self, sample_program):
        """Test an unknown week index raises."""
        with pytest.raises(IndexError):
            build_weekly_dashboard(sample_program, 4, [])
        with pytest.raises(IndexError):
            build_weekly_dashboard(sample_program, -1, [])

    def test_to_dict(self, sample_program):
        """Test serialization."""
        data = build_weekly_dashboard(sample_program, 0, []).to_dict()
        assert data["week_number"] == 1
        assert data["phase"] == "build"
        assert data["week_start_date"] == "2025-01-06"
        assert data["adherence"]["adherence_label"] == "Under target this week"
        assert [insight["id"] for insight in data["insights"]] == ["low-adherence"]
