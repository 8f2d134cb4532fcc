"""liftcoach: periodization and progression engine for strength training."""

__version__ = "0.1.0"
