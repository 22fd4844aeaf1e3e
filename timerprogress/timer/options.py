"""Turn a raw options bag into a canonical ``TimerOptions``.

Resolution is permissive: falsy numbers fall back to defaults, non-callable
hooks are skipped and unknown keys are ignored (with a warning).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from .callbacks import EVENTS, CallbackRegistry

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 1000

_KNOWN_KEYS = frozenset({"duration", "delay", "restart", "auto_start", *EVENTS})


class RestartPolicy(Enum):
    FORCE_RESTART = "force_restart"
    FORCE_STOP = "force_stop"
    AUTO_DECIDE = "auto_decide"  # ask the complete hooks


@dataclass(frozen=True)
class TimerOptions:
    duration: int | None = None      # ms; None ⇒ must be given to start()
    delay: int = DEFAULT_DELAY_MS    # ms between ticks
    restart_policy: RestartPolicy = RestartPolicy.AUTO_DECIDE
    auto_start: bool = False


def resolve_options(
    raw: Mapping[str, Any] | None = None,
) -> tuple[TimerOptions, CallbackRegistry]:
    """Return the canonical options plus a registry seeded with any hooks
    found under ``update`` / ``pause`` / ``complete``."""
    raw = raw or {}

    unknown = sorted(set(raw) - _KNOWN_KEYS)
    if unknown:
        logger.warning("Ignoring unknown timer options: %s", ", ".join(unknown))

    duration = raw.get("duration") or None
    delay = raw.get("delay") or DEFAULT_DELAY_MS

    if "restart" in raw:
        policy = (
            RestartPolicy.FORCE_RESTART if raw["restart"]
            else RestartPolicy.FORCE_STOP
        )
    else:
        policy = RestartPolicy.AUTO_DECIDE

    if "auto_start" in raw:
        auto_start = bool(raw["auto_start"])
    else:
        auto_start = duration is not None

    callbacks = CallbackRegistry()
    for event in EVENTS:
        hook = raw.get(event)
        if callable(hook):
            callbacks.register(event, hook)
        elif hook is not None:
            logger.warning("Ignoring non-callable %r hook: %r", event, hook)

    options = TimerOptions(
        duration=duration,
        delay=delay,
        restart_policy=policy,
        auto_start=auto_start,
    )
    return options, callbacks
