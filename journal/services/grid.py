"""Hourly grid — the day's scheduled hours joined with what was recorded."""

from sqlmodel import Session

from journal.services.penalty import compute_required_minimum
from journal.services.schedule_store import get_schedule
from journal.services.session_store import list_sessions
from journal.utils.clock import hour_label


def build_hour_grid(session: Session, date: str) -> list[dict] | None:
    """One slot per scheduled hour, or None when ``date`` has no schedule.

    The suggested floor of a slot uses the schedule's KPI and the balance of
    the session recorded the hour before, scheduled or not.
    """
    schedule = get_schedule(session, date)
    if schedule is None:
        return None

    by_hour = {s.hour: s for s in list_sessions(session, date)}
    slots = []
    for hour in schedule.trading_hours:
        previous = by_hour.get(hour - 1)
        previous_balance = previous.balance if previous is not None else None
        slots.append({
            "hour": hour,
            "label": hour_label(hour),
            "session": by_hour.get(hour),
            "previous_loss": abs(previous_balance) if previous_balance is not None and previous_balance < 0 else 0.0,
            "required_minimum": compute_required_minimum(previous_balance, schedule.kpi_per_hour),
        })
    return slots
