"""Run history database package."""

from .db import configure_engine, get_session, init_db, recent_runs
from .models import TimerRun

__all__ = ["configure_engine", "get_session", "init_db", "recent_runs", "TimerRun"]
