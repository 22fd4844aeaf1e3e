"""Console demo: python -m timerprogress [DURATION_MS] [DELAY_MS]."""

import logging
import sys

from PyQt6.QtCore import QCoreApplication

from .settings import load_settings
from .timer import TimerProgress, TimerState

BAR_WIDTH = 30
USAGE = "usage: python -m timerprogress [DURATION_MS] [DELAY_MS]"


def _parse_args(argv: list[str], defaults: dict) -> dict:
    options = dict(defaults)
    try:
        if len(argv) > 0:
            options["duration"] = int(argv[0])
        if len(argv) > 1:
            options["delay"] = int(argv[1])
    except ValueError:
        sys.exit(USAGE)
    if (options.get("duration") or 0) <= 0:
        sys.exit(USAGE)
    return options


def _log_level(name: str) -> int:
    """Numeric level for ``name``; WARNING when the name is unknown."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def _render(running: bool, progress: float, remaining: int) -> None:
    if not running:
        return
    filled = round(BAR_WIDTH * progress / 100)
    bar = "#" * filled + "-" * (BAR_WIDTH - filled)
    print(f"\r[{bar}] {progress:5.1f}%  {remaining / 1000:6.1f}s left",
          end="", flush=True)


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=_log_level(settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QCoreApplication(sys.argv)
    app.setApplicationName("TimerProgress")

    if settings.history_enabled:
        from .database.db import init_db
        init_db()

    options = _parse_args(sys.argv[1:], settings.timer_options())
    timer = TimerProgress(
        history_enabled=settings.history_enabled,
        update=_render,
        **options,
    )

    def on_state(state: TimerState) -> None:
        if state is TimerState.STOPPED:
            print()
            timer.kill()
            app.quit()

    timer.state_changed.connect(on_state)
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
