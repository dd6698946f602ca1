"""Database models."""

from journal.models.schedule import DailySchedule
from journal.models.session import TradingSession

__all__ = [
    "DailySchedule",
    "TradingSession",
]
