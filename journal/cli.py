"""CLI tool for admin operations.

Usage:
    python -m journal.cli init-db
    python -m journal.cli stats [YYYY-MM-DD]
"""

import sys

from sqlmodel import Session

from journal.config import settings
from journal.database import make_engine, create_db_and_tables
from journal.services.statistics import compute_statistics
from journal.utils.clock import parse_date_key, today_in


def init_db():
    """Create the journal tables."""
    engine = make_engine(settings.database_url)
    create_db_and_tables(engine)
    print("Tables created.")


def show_stats(day: str | None = None):
    """Print balances for the day, month and year of ``day``."""
    try:
        today = parse_date_key(day) if day else today_in(settings.timezone)
    except ValueError as e:
        print(str(e))
        sys.exit(1)

    engine = make_engine(settings.database_url)
    create_db_and_tables(engine)
    with Session(engine) as session:
        stats = compute_statistics(session, today)

    print(f"Statistics for {today.isoformat()}")
    print(f"  Daily balance:   {stats.daily_balance:,.2f}")
    print(f"  Monthly balance: {stats.monthly_balance:,.2f}")
    print(f"  Yearly balance:  {stats.yearly_balance:,.2f}")
    print(
        f"  Sessions:        {stats.total_sessions} "
        f"({stats.profit_sessions} profit / {stats.loss_sessions} loss)"
    )


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m journal.cli <command>")
        print("Commands: init-db, stats [YYYY-MM-DD]")
        sys.exit(1)

    command = sys.argv[1]
    if command == "init-db":
        init_db()
    elif command == "stats":
        show_stats(sys.argv[2] if len(sys.argv) > 2 else None)
    else:
        print(f"Unknown command: {command}")
        sys.exit(1)


if __name__ == "__main__":
    main()
