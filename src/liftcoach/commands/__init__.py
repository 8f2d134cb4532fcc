"""CLI commands for liftcoach."""

from .block import block
from .dashboard import dashboard
from .doctor import doctor
from .history import history
from .init import init
from .program import program
from .serve import serve

__all__ = [
    "block",
    "dashboard",
    "doctor",
    "history",
    "init",
    "program",
    "serve",
]
