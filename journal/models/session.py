"""TradingSession model — the recorded outcome of one hour on one date."""

from datetime import datetime

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field

from journal.utils.clock import utcnow


class TradingSession(SQLModel, table=True):
    __tablename__ = "sessions"
    __table_args__ = (UniqueConstraint("date", "hour", name="uq_sessions_date_hour"),)

    id: int | None = Field(default=None, primary_key=True)
    date: str = Field(index=True)  # YYYY-MM-DD
    hour: int  # 0-23
    balance: float  # positive = profit, negative = loss
    token: str = ""  # asset traded
    kpi: float  # KPI in effect when recorded
    penalty: float = 0.0  # surcharge from a losing previous hour
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
