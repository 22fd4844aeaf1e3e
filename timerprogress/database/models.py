"""SQLAlchemy ORM models for the run history."""

from datetime import datetime
from sqlalchemy import Column, Integer, Boolean, DateTime
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class TimerRun(Base):
    """One opened time window, finalized when it completes."""

    __tablename__ = "timer_runs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    start_time = Column(DateTime, nullable=False, default=datetime.now)
    end_time = Column(DateTime, nullable=True)
    duration_ms = Column(Integer, nullable=False, default=0)
    paused_ms = Column(Integer, nullable=False, default=0)
    completed = Column(Boolean, nullable=False, default=False)
    restarted = Column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return (
            f"<TimerRun id={self.id} duration={self.duration_ms}ms "
            f"completed={self.completed} restarted={self.restarted}>"
        )
