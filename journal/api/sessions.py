"""Trading session API — record and correct hourly outcomes."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from journal.database import get_session
from journal.schemas.session import (
    RequiredMinimumRead,
    TradingSessionRead,
    TradingSessionSaved,
    TradingSessionWrite,
)
from journal.services.session_store import (
    create_or_replace_session,
    list_sessions,
    required_minimum_for,
    update_session_by_id,
)

router = APIRouter(prefix="/trading-sessions", tags=["sessions"])


@router.get("", response_model=list[TradingSessionRead])
def read_sessions(date: str | None = None, session: Session = Depends(get_session)):
    return list_sessions(session, date)


@router.post("", response_model=TradingSessionSaved)
def record_session(data: TradingSessionWrite, session: Session = Depends(get_session)):
    record = create_or_replace_session(session, **data.model_dump())
    return {"success": True, "id": record.id}


@router.get("/required-minimum", response_model=RequiredMinimumRead)
def read_required_minimum(date: str, hour: int, kpi: float, session: Session = Depends(get_session)):
    """Suggested floor for an hour, shown before the outcome is entered."""
    return required_minimum_for(session, date, hour, kpi)


@router.put("/{session_id}")
def update_session(session_id: int, data: TradingSessionWrite, session: Session = Depends(get_session)):
    update_session_by_id(session, session_id, **data.model_dump())
    return {"success": True}
