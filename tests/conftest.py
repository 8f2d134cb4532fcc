"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from factories import DEFAULT_EXERCISES, build_program, build_week
from liftcoach.models.program import TrainingPhase


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def data_dir(monkeypatch):
    """Point LIFTCOACH_DATA_DIR at a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.setenv("LIFTCOACH_DATA_DIR", tmpdir)
        yield Path(tmpdir)


@pytest.fixture
def sample_week():
    """A two-day build week starting on 2025-01-06."""
    return build_week(
        days=[
            DEFAULT_EXERCISES,
            [("deadlift", "Conventional Deadlift", 2), ("bench", "Barbell Bench Press", 3)],
        ]
    )


@pytest.fixture
def sample_program():
    """Four build weeks in one active block, currently in week 4."""
    return build_program([TrainingPhase.BUILD] * 4)
