"""SQLModel engine construction and session management."""

import logging

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

logger = logging.getLogger(__name__)


def make_engine(database_url: str) -> Engine:
    """Build the engine for ``database_url``."""
    # SQLite needs check_same_thread=False; PostgreSQL does not
    connect_args = {}
    kwargs = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # In-memory databases live and die with one connection
            kwargs["poolclass"] = StaticPool

    return create_engine(
        database_url,
        echo=False,
        connect_args=connect_args,
        **kwargs,
    )


def create_db_and_tables(engine: Engine):
    """Create all tables. Called on startup."""
    import journal.models  # noqa: F401  registers the tables on SQLModel.metadata

    SQLModel.metadata.create_all(engine)
    logger.info("Journal tables ready")


def get_session(request: Request) -> Session:
    """Dependency that yields a session on the app's engine."""
    with Session(request.app.state.engine) as session:
        yield session
