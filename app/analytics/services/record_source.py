"""Where the reporting pipeline gets its records from.

Reports depend on the ``RecordSource`` protocol rather than on a database
handle, so they can be fed from SQL in the application and from plain lists
in tests. ``get_record_source`` is the FastAPI dependency.
"""

import uuid
from collections.abc import Awaitable, Callable
from typing import Protocol, TypeVar

import structlog
from fastapi import Depends
from sqlalchemy.orm import Session

from app.analytics.schemas.records import EventRecord, TicketRecord, UserRecord
from app.auth.models.user import User
from app.db.session import get_db
from app.events.models import Event, Ticket

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class RecordSource(Protocol):
    async def fetch_events(self) -> list[EventRecord]: ...

    async def fetch_users(self) -> list[UserRecord]: ...

    async def fetch_tickets(self, user_id: str | None = None) -> list[TicketRecord]: ...


class SqlRecordSource:
    """Reads records through a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    async def fetch_events(self) -> list[EventRecord]:
        return [EventRecord.model_validate(event) for event in self.db.query(Event).all()]

    async def fetch_users(self) -> list[UserRecord]:
        return [UserRecord.model_validate(user) for user in self.db.query(User).all()]

    async def fetch_tickets(self, user_id: str | None = None) -> list[TicketRecord]:
        query = self.db.query(Ticket)
        if user_id is not None:
            query = query.filter(Ticket.user_id == _as_uuid(user_id))
        return [TicketRecord.model_validate(ticket) for ticket in query.all()]


def _as_uuid(value: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


async def fetch_or_empty(fetch: Callable[[], Awaitable[list[T]]], kind: str) -> list[T]:
    """Await a fetch, degrading to an empty list when the source fails."""
    try:
        return await fetch()
    except Exception as e:
        logger.warning("record_fetch_failed", kind=kind, error=str(e))
        return []


def get_record_source(db: Session = Depends(get_db)) -> RecordSource:
    return SqlRecordSource(db)
