"""Statistics API — daily, monthly and yearly balances."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from journal.config import settings
from journal.database import get_session
from journal.schemas.statistics import StatisticsRead
from journal.services.errors import ValidationError
from journal.services.statistics import compute_statistics
from journal.utils.clock import parse_date_key, today_in

router = APIRouter(prefix="/statistics", tags=["statistics"])


@router.get("", response_model=StatisticsRead)
def read_statistics(date: str | None = None, session: Session = Depends(get_session)):
    """Totals for the day, month and year of ``date`` (default: today)."""
    if date:
        try:
            today = parse_date_key(date)
        except ValueError as e:
            raise ValidationError(str(e))
    else:
        today = today_in(settings.timezone)
    return compute_statistics(session, today).to_dict()
