"""Daily schedule API — one schedule per date, plus the hourly grid view."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from journal.database import get_session
from journal.schemas.schedule import DailyScheduleCreate, DailyScheduleRead, DailyScheduleSaved, HourSlotRead
from journal.services.grid import build_hour_grid
from journal.services.schedule_store import get_schedule, upsert_schedule

router = APIRouter(prefix="/daily-schedule", tags=["schedule"])


@router.get("", response_model=DailyScheduleRead | None)
def read_schedule(date: str | None = None, session: Session = Depends(get_session)):
    """Schedule for ``date``; null means none was set up yet."""
    return get_schedule(session, date)


@router.post("", response_model=DailyScheduleSaved)
def save_schedule(data: DailyScheduleCreate, session: Session = Depends(get_session)):
    schedule = upsert_schedule(
        session,
        date=data.date,
        trading_hours=data.trading_hours,
        kpi_per_hour=data.kpi_per_hour,
        min_hours=data.min_hours,
    )
    return {"success": True, "id": schedule.id, "schedule": schedule}


@router.get("/grid", response_model=list[HourSlotRead] | None)
def read_grid(date: str | None = None, session: Session = Depends(get_session)):
    return build_hour_grid(session, date)
