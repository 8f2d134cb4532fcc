"""Database layer for liftcoach."""

from .engine import get_data_dir, get_db_path, init_db
from .repositories import HistoryRepository, ProgramRepository

__all__ = [
    "get_data_dir",
    "get_db_path",
    "HistoryRepository",
    "init_db",
    "ProgramRepository",
]
