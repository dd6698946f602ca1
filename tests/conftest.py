"""Shared fixtures: an in-memory SQLite engine and a client bound to it."""

import os

import pytest

# Settings are read at import time; give them a database before anything imports the app
os.environ.setdefault("TJ_DATABASE_URL", "sqlite://")

from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session  # noqa: E402

from journal.database import make_engine, create_db_and_tables  # noqa: E402


@pytest.fixture
def engine():
    engine = make_engine("sqlite://")
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    from journal.main import app

    app.state.engine = engine
    with TestClient(app) as test_client:
        yield test_client
    app.state.engine = None
