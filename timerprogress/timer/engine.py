"""Polling progress timer.

States
------
STOPPED   No time window.  Every tick reports ``(False, 0, -1)``.
RUNNING   A window ``start / current / stop`` is open.

Transitions
-----------
Any → RUNNING      (start, or restart on completion)
Any → STOPPED      (stop, or completion without restart)

There is no PAUSED state.  Each tick asks the pause hooks whether the
timer is paused *this tick*; if so the whole window slides forward by the
time since the previous tick, so progress stays put while remaining time
is pushed out.

Wall-clock time is re-sampled on every tick, so scheduler jitter never
accumulates: progress is always ``(current - start) / (stop - start)``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Callable

from PyQt6.QtCore import QObject, pyqtSignal

from .callbacks import CallbackRegistry
from .errors import MissingDurationError
from .options import RestartPolicy, TimerOptions, resolve_options
from .ticker import Clock, QtTicker, Ticker, wall_clock_ms

logger = logging.getLogger(__name__)

STOPPED_PROGRESS = 0.0
STOPPED_REMAINING = -1


# ── state ─────────────────────────────────────────────────────────────────


class TimerState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


@dataclass(frozen=True)
class TimeWindow:
    """The running span.  All timestamps are ms since the epoch."""

    start: int
    current: int
    stop: int
    duration: int

    @classmethod
    def opened_at(cls, now: int, duration: int) -> TimeWindow:
        return cls(start=now, current=now, stop=now + duration, duration=duration)

    def shifted(self, delta: int) -> TimeWindow:
        return replace(self, start=self.start + delta, stop=self.stop + delta)


# ── engine ────────────────────────────────────────────────────────────────


class TimerProgress(QObject):
    """Timer that reports completion percentage and runs hooks on
    pause and completion.

    Options (keyword arguments)
    ---------------------------
    duration    ms the timer lasts; may instead be passed to ``start()``.
    delay       ms between ticks, default 1000.
    restart     True: always restart on completion.  False: always stop.
                Omitted: restart iff a complete hook returns True.
    auto_start  start immediately; defaults to True when ``duration`` is set.
    update      ``hook(running, progress, remaining)`` called every tick.
    pause       ``hook() -> bool``; True freezes progress for that tick.
    complete    ``hook() -> bool``; True asks for a restart.

    Signals
    -------
    updated(running: bool, progress: float, remaining: int)
        Emitted after the update hooks on every tick.
    state_changed(new_state: TimerState)
        Emitted whenever a window opens (start or restart) or closes.
    run_finished(data: dict)
        Emitted once per completion.  Keys: ``duration_ms``,
        ``start_time``, ``end_time``, ``paused_ms``, ``restarted``,
        ``run_id``.
    """

    updated = pyqtSignal(bool, float, int)
    state_changed = pyqtSignal(object)
    run_finished = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        ticker: Ticker | None = None,
        clock: Clock | None = None,
        history_enabled: bool = False,
        **options: Any,
    ) -> None:
        super().__init__(parent)

        self._options: TimerOptions
        self._options, self._callbacks = resolve_options(options)
        self._clock: Clock = clock or wall_clock_ms
        self._history_enabled = history_enabled

        # ── run state ─────────────────────────────────────────────────
        self._window: TimeWindow | None = None
        self._paused_ms: int = 0
        self._killed: bool = False

        # ── history tracking ──────────────────────────────────────────
        self._run_id: int | None = None

        if self._options.auto_start:
            self.start(self._options.duration)

        # ── periodic source ───────────────────────────────────────────
        self._ticker: Ticker = ticker if ticker is not None else QtTicker(self)
        self._ticker.start(self._options.delay, self.tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def options(self) -> TimerOptions:
        return self._options

    @property
    def delay(self) -> int:
        return self._options.delay

    @property
    def state(self) -> TimerState:
        return TimerState.STOPPED if self._window is None else TimerState.RUNNING

    @property
    def is_running(self) -> bool:
        return self._window is not None

    @property
    def is_killed(self) -> bool:
        return self._killed

    @property
    def window(self) -> TimeWindow | None:
        """Current window, or None when stopped."""
        return self._window

    @property
    def paused_ms(self) -> int:
        """Time the current run has spent paused."""
        return self._paused_ms

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def on(self, event: str, hook: Callable) -> Callable:
        """Append a hook for ``update``, ``pause`` or ``complete``.

        Returns the hook so callers can keep a reference to it.
        """
        return self._callbacks.register(event, hook)

    def start(self, duration: int | None = None) -> None:
        """Open a fresh window.

        A missing or zero ``duration`` falls back to the configured one.
        Zero and negative spans are allowed and complete on the next tick.
        """
        duration = duration or self._options.duration
        if duration is None:
            raise MissingDurationError(
                "no duration given to start() and none configured"
            )
        self._open_window(duration)

    def stop(self) -> None:
        """Close the window.  The tick source keeps running."""
        was_running = self._window is not None
        self._window = None
        self._run_id = None  # an interrupted run stays incomplete
        if was_running:
            logger.debug("Timer stopped")
            self.state_changed.emit(TimerState.STOPPED)

    def kill(self) -> None:
        """Detach from the tick source for good."""
        if self._killed:
            return
        self._killed = True
        self._ticker.cancel()
        logger.debug("Timer killed")

    # ══════════════════════════════════════════════════════════════════
    #  QUERIES
    # ══════════════════════════════════════════════════════════════════

    def progress(self) -> float:
        """Percentage of the window elapsed, clamped to 0-100.

        0.0 when stopped.
        """
        w = self._window
        if w is None:
            return STOPPED_PROGRESS
        total = w.stop - w.start
        if total <= 0:
            return 100.0
        percentage = (w.current - w.start) / total * 100
        return min(100.0, max(0.0, percentage))

    def remaining(self) -> int:
        """ms until the window closes, never below 0.  -1 when stopped."""
        w = self._window
        if w is None:
            return STOPPED_REMAINING
        return max(0, w.stop - w.current)

    def elapsed(self) -> int:
        w = self._window
        if w is None:
            return 0
        return w.current - w.start

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — tick
    # ══════════════════════════════════════════════════════════════════

    def tick(self) -> None:
        """One scheduler tick.  Hook exceptions propagate to the caller."""
        if self._killed:
            logger.warning("Tick received after kill(); ignoring")
            return

        if self._window is None:
            self._report(False, STOPPED_PROGRESS, STOPPED_REMAINING)
            return

        now = self._clock()
        window = self._window

        paused = self._paused()
        if self._window is not window:
            return  # a pause hook started or stopped the timer itself

        if paused:
            delta = now - window.current
            window = window.shifted(delta)
            self._paused_ms += delta
            logger.debug("Paused; window shifted by %d ms", delta)

        self._window = replace(window, current=now)
        self._report(True, self.progress(), self.remaining())

        if self._complete():
            self._finish_run()

    def _paused(self) -> bool:
        if self._window is None:
            return False  # a stopped timer is never paused
        return self._callbacks.any_pause()

    def _complete(self) -> bool:
        return self._window is not None and self.remaining() <= 0

    def _report(self, running: bool, progress: float, remaining: int) -> None:
        self._callbacks.run_update(running, progress, remaining)
        self.updated.emit(running, progress, remaining)

    def _finish_run(self) -> None:
        window = self._window
        run_id = self._run_id
        paused_ms = self._paused_ms
        wants_restart = self._callbacks.run_complete()
        policy = self._options.restart_policy

        if self._window is not window:
            # a complete hook called start() or stop(); that beats the policy
            restart = self._window is not None
        elif policy is RestartPolicy.FORCE_RESTART:
            restart = True
        elif policy is RestartPolicy.FORCE_STOP:
            restart = False
        else:
            restart = wants_restart

        logger.info(
            "Timer complete after %d ms (policy=%s, hooks=%s); %s",
            window.duration, policy.value, wants_restart,
            "restarting" if restart else "stopping",
        )

        end_time = datetime.fromtimestamp(window.current / 1000)
        if self._history_enabled:
            self._persist_finished(run_id, end_time, paused_ms, restarted=restart)

        self.run_finished.emit({
            "duration_ms": window.duration,
            "start_time": datetime.fromtimestamp(window.start / 1000),
            "end_time": end_time,
            "paused_ms": paused_ms,
            "restarted": restart,
            "run_id": run_id,
        })

        if self._window is not window:
            return
        if restart:
            # reuse the stored span as-is, even if it is zero
            self._open_window(window.duration)
        else:
            self.stop()

    def _open_window(self, duration: int) -> None:
        now = self._clock()
        self._window = TimeWindow.opened_at(now, duration)
        self._paused_ms = 0
        self._run_id = None
        logger.debug("Timer started for %d ms", duration)

        if self._history_enabled:
            self._persist_start(now, duration)

        self.state_changed.emit(TimerState.RUNNING)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — run history
    # ══════════════════════════════════════════════════════════════════

    def _persist_start(self, now: int, duration: int) -> None:
        from ..database.db import get_session
        from ..database.models import TimerRun

        with get_session() as db:
            record = TimerRun(
                start_time=datetime.fromtimestamp(now / 1000),
                duration_ms=duration,
                completed=False,
            )
            db.add(record)
            db.flush()
            self._run_id = record.id

    def _persist_finished(
        self, run_id: int | None, end_time: datetime, paused_ms: int,
        *, restarted: bool,
    ) -> None:
        if run_id is None:
            return
        from ..database.db import get_session
        from ..database.models import TimerRun

        with get_session() as db:
            record = db.get(TimerRun, run_id)
            if record:
                record.end_time = end_time
                record.paused_ms = paused_ms
                record.completed = True
                record.restarted = restarted
