"""Polling progress timer with pause and completion hooks."""

from .timer import (
    MissingDurationError,
    RestartPolicy,
    TimerError,
    TimerProgress,
    TimerState,
)

__version__ = "0.1.0"

__all__ = [
    "TimerProgress",
    "TimerState",
    "RestartPolicy",
    "TimerError",
    "MissingDurationError",
]
