"""DailySchedule model — the hours and KPI committed to for one date."""

from datetime import datetime

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import JSON

from journal.utils.clock import utcnow


class DailySchedule(SQLModel, table=True):
    __tablename__ = "schedules"

    id: int | None = Field(default=None, primary_key=True)
    date: str = Field(unique=True, index=True)  # YYYY-MM-DD
    trading_hours: list[int] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    kpi_per_hour: float
    min_hours: int
    created_at: datetime = Field(default_factory=utcnow)
