"""Periodic tick sources.

The timer never schedules itself; it asks a ``Ticker`` to call it every
``delay`` ms and tells it to cancel on ``kill()``.
"""

from __future__ import annotations

from typing import Callable, Protocol

from PyQt6.QtCore import QDateTime, QObject, QTimer


class Ticker(Protocol):
    def start(self, interval_ms: int, callback: Callable[[], None]) -> None: ...

    def cancel(self) -> None: ...


Clock = Callable[[], int]


def wall_clock_ms() -> int:
    """Milliseconds since the epoch."""
    return QDateTime.currentMSecsSinceEpoch()


class QtTicker:
    """``Ticker`` backed by a repeating ``QTimer``.  Needs a running Qt
    event loop to actually fire."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._qt_timer = QTimer(parent)
        self._callback: Callable[[], None] | None = None

    @property
    def active(self) -> bool:
        return self._qt_timer.isActive()

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        if self._callback is not None:
            self._qt_timer.timeout.disconnect(self._callback)
        self._callback = callback
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(callback)
        self._qt_timer.start()

    def cancel(self) -> None:
        self._qt_timer.stop()
        if self._callback is not None:
            self._qt_timer.timeout.disconnect(self._callback)
            self._callback = None
