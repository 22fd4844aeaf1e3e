"""User defaults with JSON persistence.

Settings are stored at:
    ~/.config/timerprogress/settings.json

Usage::

    settings = load_settings()
    settings.delay_ms = 250
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "timerprogress"
SETTINGS_PATH = CONFIG_DIR / "settings.json"


@dataclass
class Settings:
    """Defaults for timers started from the command line."""

    # ── timer ─────────────────────────────────────────────────────────
    duration_ms: int = 60 * 1000
    delay_ms: int = 1000
    restart: bool | None = None            # None ⇒ ask the complete hooks

    # ── history ───────────────────────────────────────────────────────
    history_enabled: bool = False

    # ── logging ───────────────────────────────────────────────────────
    log_level: str = "WARNING"

    def timer_options(self) -> dict[str, Any]:
        """Options bag for ``TimerProgress``.  ``restart`` is left out when
        unset so the complete hooks decide."""
        options: dict[str, Any] = {
            "duration": self.duration_ms,
            "delay": self.delay_ms,
        }
        if self.restart is not None:
            options["restart"] = self.restart
        return options


def load_settings(path: Path = SETTINGS_PATH) -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Unreadable settings at %s (%s); using defaults", path, exc)
        return Settings()


def save_settings(settings: Settings, path: Path = SETTINGS_PATH) -> None:
    """Write settings to disk as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
