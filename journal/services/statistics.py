"""Statistics aggregator — balances summed per day, month and year."""

import logging
from dataclasses import dataclass, asdict
from datetime import date

from sqlmodel import Session, select, col

from journal.models.session import TradingSession
from journal.services.errors import store_errors

logger = logging.getLogger(__name__)


@dataclass
class Statistics:
    daily_balance: float = 0.0
    monthly_balance: float = 0.0
    yearly_balance: float = 0.0
    total_sessions: int = 0
    profit_sessions: int = 0
    loss_sessions: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def window_keys(today: date) -> tuple[str, str, str]:
    """Day, month and year prefixes matched against session dates."""
    day = today.isoformat()
    return day, day[:7], day[:4]


def _sessions_with_prefix(session: Session, prefix: str) -> list[TradingSession]:
    stmt = select(TradingSession).where(col(TradingSession.date).startswith(prefix))
    return list(session.exec(stmt).all())


def compute_statistics(session: Session, today: date) -> Statistics:
    """Re-derive every figure from the stored sessions; nothing is cached."""
    day, month, year = window_keys(today)

    with store_errors(session, "fetch statistics"):
        daily = session.exec(select(TradingSession).where(TradingSession.date == day)).all()
        monthly = _sessions_with_prefix(session, month)
        yearly = _sessions_with_prefix(session, year)

    stats = Statistics(
        daily_balance=sum(s.balance for s in daily),
        monthly_balance=sum(s.balance for s in monthly),
        yearly_balance=sum(s.balance for s in yearly),
        total_sessions=len(yearly),
        profit_sessions=sum(1 for s in yearly if s.balance > 0),
        loss_sessions=sum(1 for s in yearly if s.balance < 0),
    )
    logger.debug(f"Statistics for {day}: {stats}")
    return stats
