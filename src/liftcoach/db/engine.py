"""Database engine setup and initialization."""

import os
from pathlib import Path

import aiosqlite
from loguru import logger

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
DATA_DIR_ENV = "LIFTCOACH_DATA_DIR"


def get_data_dir() -> Path:
    """Get the data directory, honouring ``LIFTCOACH_DATA_DIR``."""
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else DATA_DIR


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "liftcoach.db"


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Single program snapshot; saving replaces it whole
        await db.execute("""
            CREATE TABLE IF NOT EXISTS program_state (
                id INTEGER PRIMARY KEY CHECK (id = 1),
                data TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Append-only workout log
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_history (
                id TEXT PRIMARY KEY,
                completed_at TIMESTAMP NOT NULL,
                program_day_id TEXT NOT NULL,
                data TEXT NOT NULL,
                imported_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_history_completed
            ON workout_history(completed_at)
        """)

        await db.commit()

    logger.debug(f"Database schema ready at {db_path}")
