"""Pydantic schemas for the daily schedule API."""

from datetime import datetime
from pydantic import BaseModel

from journal.schemas.session import TradingSessionRead


class DailyScheduleCreate(BaseModel):
    # Range and size rules live in the schedule store so that they produce
    # the same errors for every caller.
    date: str
    trading_hours: list[int]
    kpi_per_hour: float
    min_hours: int

    model_config = {"allow_inf_nan": False}


class DailyScheduleRead(BaseModel):
    id: int
    date: str
    trading_hours: list[int]
    kpi_per_hour: float
    min_hours: int
    created_at: datetime

    model_config = {"from_attributes": True}


class DailyScheduleSaved(BaseModel):
    success: bool = True
    id: int
    schedule: DailyScheduleRead


class HourSlotRead(BaseModel):
    hour: int
    label: str
    session: TradingSessionRead | None = None
    previous_loss: float
    required_minimum: float
