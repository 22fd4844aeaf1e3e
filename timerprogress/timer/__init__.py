"""Timer package."""

from .callbacks import CallbackRegistry
from .engine import TimerProgress, TimerState, TimeWindow
from .errors import MissingDurationError, TimerError, UnknownEventError
from .options import DEFAULT_DELAY_MS, RestartPolicy, TimerOptions, resolve_options
from .ticker import QtTicker, Ticker, wall_clock_ms

__all__ = [
    "TimerProgress",
    "TimerState",
    "TimeWindow",
    "TimerOptions",
    "RestartPolicy",
    "resolve_options",
    "CallbackRegistry",
    "Ticker",
    "QtTicker",
    "wall_clock_ms",
    "TimerError",
    "MissingDurationError",
    "UnknownEventError",
    "DEFAULT_DELAY_MS",
]
