"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from journal.config import settings
from journal.database import make_engine, create_db_and_tables
from journal.services.errors import JournalError
from journal.utils.logging import setup_logging
from journal.api import schedule, sessions, statistics, system

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    setup_logging()
    # Tests may hand in their own engine before startup
    owns_engine = getattr(app.state, "engine", None) is None
    if owns_engine:
        app.state.engine = make_engine(settings.database_url)
    create_db_and_tables(app.state.engine)

    yield

    if owns_engine:
        app.state.engine.dispose()
        app.state.engine = None


app = FastAPI(
    title="Trading Journal",
    description="Daily trading journal with hourly KPI targets and loss penalties",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(JournalError)
async def journal_error_handler(request: Request, exc: JournalError):
    body = {"error": exc.message}
    if exc.details:
        body["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Rejected inputs may be NaN or infinite, which JSON cannot carry back
    details = [{k: v for k, v in err.items() if k != "input"} for err in exc.errors()]
    logger.warning(f"Rejected {request.method} {request.url.path}: {details}")
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": jsonable_encoder(details)},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# Mount routers
app.include_router(schedule.router)
app.include_router(sessions.router)
app.include_router(statistics.router)
app.include_router(system.router)
