"""Pydantic schemas for the trading session API."""

from datetime import datetime
from pydantic import BaseModel, field_validator


class TradingSessionWrite(BaseModel):
    date: str
    hour: int
    balance: float
    token: str | None = None
    kpi: float

    model_config = {"allow_inf_nan": False}

    @field_validator("token")
    @classmethod
    def _trim_token(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip()


class TradingSessionRead(BaseModel):
    id: int
    date: str
    hour: int
    balance: float
    token: str
    kpi: float
    penalty: float
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TradingSessionSaved(BaseModel):
    success: bool = True
    id: int


class RequiredMinimumRead(BaseModel):
    date: str
    hour: int
    kpi: float
    previous_loss: float
    required_minimum: float
