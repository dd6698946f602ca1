"""Session store — one TradingSession per (date, hour).

Both write paths read the previous hour's session to derive the stored
penalty, then write, inside one database transaction. No lock spans the two
hours: concurrent writers get last-writer-wins on ``penalty``, and rewriting
hour h-1 later does not touch the penalty already stored on hour h.
"""

import logging

from sqlmodel import Session, select, col

from journal.config import settings
from journal.models.session import TradingSession
from journal.services.errors import NotFoundError, ValidationError, store_errors
from journal.services.penalty import compute_penalty, compute_required_minimum
from journal.services.schedule_store import ensure_finite, validate_date
from journal.utils.clock import utcnow

logger = logging.getLogger(__name__)


def validate_hour(hour) -> int:
    if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
        raise ValidationError(f"Invalid hour {hour!r}, expected 0-23")
    return hour


def list_sessions(session: Session, date: str | None = None, limit: int | None = None) -> list[TradingSession]:
    """Sessions of one date by ascending hour, or the most recent ones overall."""
    if date:
        validate_date(date)
        stmt = (
            select(TradingSession)
            .where(TradingSession.date == date)
            .order_by(col(TradingSession.hour).asc())
        )
    else:
        stmt = (
            select(TradingSession)
            .order_by(col(TradingSession.date).desc(), col(TradingSession.hour).desc())
            .limit(limit or settings.recent_sessions_limit)
        )
    with store_errors(session, "fetch sessions"):
        return list(session.exec(stmt).all())


def get_session_at(session: Session, date: str, hour: int) -> TradingSession | None:
    return session.exec(
        select(TradingSession).where(TradingSession.date == date, TradingSession.hour == hour)
    ).first()


def get_previous_session(session: Session, date: str, hour: int) -> TradingSession | None:
    """Session for the hour before ``hour`` on the same date; hour 0 has none."""
    if hour - 1 < 0:
        return None
    return get_session_at(session, date, hour - 1)


def _previous_balance(session: Session, date: str, hour: int) -> float | None:
    previous = get_previous_session(session, date, hour)
    return previous.balance if previous is not None else None


def required_minimum_for(session: Session, date: str, hour: int, kpi: float) -> dict:
    """Suggested floor for ``hour`` given what was recorded the hour before."""
    ensure_finite("kpi", kpi)
    validate_date(date)
    validate_hour(hour)
    with store_errors(session, "fetch previous session"):
        previous_balance = _previous_balance(session, date, hour)
    previous_loss = abs(previous_balance) if previous_balance is not None and previous_balance < 0 else 0.0
    return {
        "date": date,
        "hour": hour,
        "kpi": kpi,
        "previous_loss": previous_loss,
        "required_minimum": compute_required_minimum(previous_balance, kpi),
    }


def create_or_replace_session(
    session: Session,
    date: str,
    hour: int,
    balance: float,
    token: str | None,
    kpi: float,
) -> TradingSession:
    """Record the outcome for (date, hour), replacing whatever was there."""
    validate_date(date)
    validate_hour(hour)
    ensure_finite("balance", balance)
    ensure_finite("kpi", kpi)

    with store_errors(session, "create session"):
        penalty = compute_penalty(_previous_balance(session, date, hour), kpi)
        now = utcnow()

        record = get_session_at(session, date, hour)
        if record is None:
            record = TradingSession(date=date, hour=hour, balance=balance, kpi=kpi)
        record.balance = balance
        record.token = token or ""
        record.kpi = kpi
        record.penalty = penalty
        record.created_at = now
        record.updated_at = now

        session.add(record)
        session.commit()
        session.refresh(record)

    logger.info(f"Recorded session {date} {hour:02d}:00 balance={balance} penalty={penalty}")
    return record


def update_session_by_id(
    session: Session,
    session_id: int,
    date: str,
    hour: int,
    balance: float,
    token: str | None,
    kpi: float,
) -> TradingSession:
    """Overwrite the fields of an existing session addressed by its id."""
    validate_date(date)
    validate_hour(hour)
    ensure_finite("balance", balance)
    ensure_finite("kpi", kpi)

    with store_errors(session, "update session"):
        record = session.get(TradingSession, session_id)
        if record is None:
            raise NotFoundError("Session not found")

        occupant = get_session_at(session, date, hour)
        if occupant is not None and occupant.id != record.id:
            raise ValidationError(f"Another session already exists for {date} hour {hour}")

        penalty = compute_penalty(_previous_balance(session, date, hour), kpi)

        record.date = date
        record.hour = hour
        record.balance = balance
        record.token = token or ""
        record.kpi = kpi
        record.penalty = penalty
        record.updated_at = utcnow()

        session.add(record)
        session.commit()
        session.refresh(record)

    logger.info(f"Updated session {session_id} ({date} {hour:02d}:00) balance={balance} penalty={penalty}")
    return record
