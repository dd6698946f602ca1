"""Schedule store — one DailySchedule per calendar date.

Upserts replace the whole document for a date; nothing from an earlier
schedule survives a later upsert, ``created_at`` included.
"""

import logging
import math

from sqlmodel import Session, select

from journal.models.schedule import DailySchedule
from journal.services.errors import ValidationError, store_errors
from journal.utils.clock import parse_date_key, utcnow

logger = logging.getLogger(__name__)


def validate_date(date: str | None) -> str:
    if not date:
        raise ValidationError("Date parameter required")
    try:
        parse_date_key(date)
    except ValueError as e:
        raise ValidationError(str(e))
    return date


def ensure_finite(name: str, value: float) -> float:
    """NaN and the infinities cannot be stored or summed."""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValidationError(f"{name} must be a finite number")
    return value


def normalize_trading_hours(trading_hours) -> list[int]:
    """Check the hour collection and return it deduplicated, ascending."""
    if not isinstance(trading_hours, (list, tuple, set)) or len(trading_hours) == 0:
        raise ValidationError("Trading hours must be a non-empty array")
    hours = set()
    for hour in trading_hours:
        if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
            raise ValidationError(f"Invalid trading hour {hour!r}, expected 0-23")
        hours.add(hour)
    return sorted(hours)


def get_schedule(session: Session, date: str) -> DailySchedule | None:
    """Schedule for ``date``, or None if none was created yet."""
    validate_date(date)
    with store_errors(session, "fetch schedule"):
        return session.exec(select(DailySchedule).where(DailySchedule.date == date)).first()


def upsert_schedule(
    session: Session,
    date: str,
    trading_hours,
    kpi_per_hour: float,
    min_hours: int,
) -> DailySchedule:
    """Create or wholesale-replace the schedule for ``date``."""
    if date is None or trading_hours is None or kpi_per_hour is None or min_hours is None:
        logger.warning(
            f"Missing schedule fields: date={date} trading_hours={trading_hours} "
            f"kpi_per_hour={kpi_per_hour} min_hours={min_hours}"
        )
        raise ValidationError("Missing required fields")
    validate_date(date)
    ensure_finite("kpi_per_hour", kpi_per_hour)
    if kpi_per_hour <= 0:
        raise ValidationError("kpi_per_hour must be positive")
    if min_hours <= 0:
        raise ValidationError("min_hours must be positive")

    hours = normalize_trading_hours(trading_hours)
    if len(hours) < min_hours:
        logger.warning(f"Insufficient hours for {date}: {len(hours)} < {min_hours}")
        raise ValidationError(f"Minimum {min_hours} hours required")

    with store_errors(session, "save schedule"):
        schedule = session.exec(select(DailySchedule).where(DailySchedule.date == date)).first()
        if schedule is None:
            schedule = DailySchedule(date=date, kpi_per_hour=kpi_per_hour, min_hours=min_hours)
        schedule.trading_hours = hours
        schedule.kpi_per_hour = float(kpi_per_hour)
        schedule.min_hours = int(min_hours)
        schedule.created_at = utcnow()

        session.add(schedule)
        session.commit()
        session.refresh(schedule)

    logger.info(f"Saved schedule for {date}: hours={hours} kpi={kpi_per_hour} min={min_hours}")
    return schedule
