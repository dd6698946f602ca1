"""Pydantic schema for the statistics API."""

from pydantic import BaseModel


class StatisticsRead(BaseModel):
    daily_balance: float
    monthly_balance: float
    yearly_balance: float
    total_sessions: int
    profit_sessions: int
    loss_sessions: int

    model_config = {"from_attributes": True}
