"""Ordered hook sequences for the ``update``, ``pause`` and ``complete`` events."""

from __future__ import annotations

from typing import Callable

from .errors import UnknownEventError

UpdateHook = Callable[[bool, float, int], None]
PauseHook = Callable[[], bool]
CompleteHook = Callable[[], bool]

EVENTS = ("update", "pause", "complete")


class CallbackRegistry:
    """Per-timer hook lists.  Insertion order is call order.

    There is no removal API; hooks live as long as the timer does.
    """

    def __init__(self) -> None:
        self.update: list[UpdateHook] = []
        self.pause: list[PauseHook] = []
        self.complete: list[CompleteHook] = []

    def register(self, event: str, hook: Callable) -> Callable:
        if event not in EVENTS:
            raise UnknownEventError(
                f"unknown event {event!r}, expected one of {', '.join(EVENTS)}"
            )
        if not callable(hook):
            raise TypeError(
                f"hook for {event!r} must be callable, got {type(hook).__name__}"
            )
        getattr(self, event).append(hook)
        return hook

    def __len__(self) -> int:
        return len(self.update) + len(self.pause) + len(self.complete)

    # ── dispatch ──────────────────────────────────────────────────────

    def run_update(self, running: bool, progress: float, remaining: int) -> None:
        for hook in self.update:
            hook(running, progress, remaining)

    def any_pause(self) -> bool:
        """True as soon as one pause hook says so.  Empty ⇒ never paused."""
        for hook in self.pause:
            if hook():
                return True
        return False

    def run_complete(self) -> bool:
        """Call every complete hook; True if any of them returned truthy.

        Unlike ``any_pause`` this never short-circuits, so hooks later in
        the list still see the completion.
        """
        result = False
        for hook in self.complete:
            if hook():
                result = True
        return result
