"""Exceptions raised by the timer package."""


class TimerError(Exception):
    """Base class for timer errors."""


class MissingDurationError(TimerError, ValueError):
    """Raised when ``start()`` has neither an override nor a configured duration."""


class UnknownEventError(TimerError, ValueError):
    """Raised when a hook is registered for an event that doesn't exist."""
