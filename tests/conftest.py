"""Shared pytest fixtures for TimerProgress tests."""

import sys
import pytest

from PyQt6.QtCore import QCoreApplication

from timerprogress.database.db import configure_engine, init_db
from timerprogress.timer.engine import TimerProgress

from helpers import FakeClock, ManualTicker


@pytest.fixture(scope="session")
def qapp():
    """A single QCoreApplication instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ticker():
    return ManualTicker()


@pytest.fixture
def make_timer(clock, ticker):
    """Factory for timers wired to the fake clock and manual ticker."""
    def _make(**options):
        return TimerProgress(ticker=ticker, clock=clock, **options)
    return _make
