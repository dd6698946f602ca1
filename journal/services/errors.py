"""Error kinds raised by the journal services and mapped to HTTP at the edge."""

import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

logger = logging.getLogger(__name__)


class JournalError(Exception):
    """Base journal error carrying the HTTP status it surfaces as."""

    status_code = 500

    def __init__(self, message: str, details=None):
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(JournalError):
    """Malformed or missing input; the caller can resubmit corrected data."""

    status_code = 400


class NotFoundError(JournalError):
    status_code = 404


class StoreError(JournalError):
    """The datastore failed or was unreachable. Never retried."""

    status_code = 500


@contextmanager
def store_errors(session: Session, action: str):
    """Roll back and re-raise datastore failures as StoreError."""
    try:
        yield
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception(f"Store failure while trying to {action}")
        raise StoreError(f"Failed to {action}") from e
