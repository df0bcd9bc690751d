"""Event persistence and ownership rules."""

import logging
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.auth.models.user import User, UserType
from app.core.exceptions import ForbiddenError, NotFoundError
from app.events.models import Event, EventStatus
from app.events.schemas.event import EventCreate, EventUpdate

logger = logging.getLogger(__name__)


def default_organizer_email(organizer: str) -> str:
    """Placeholder contact address derived from the organizer name."""
    return f"{''.join(organizer.lower().split())}@example.com"


class EventService:
    @staticmethod
    def list_events(
        db: Session,
        category: str | None = None,
        status: EventStatus | None = None,
        search: str | None = None,
        organizer_id: UUID | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> tuple[list[Event], int]:
        """Return one page of events matching the filters and the total match count.

        ``search`` matches title, location, city and category, case-insensitively.
        """
        query = db.query(Event)

        if category:
            query = query.filter(Event.category == category)
        if status:
            query = query.filter(Event.status == status)
        if organizer_id:
            query = query.filter(Event.organizer_id == organizer_id)
        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(
                or_(
                    Event.title.ilike(pattern),
                    Event.location.ilike(pattern),
                    Event.city.ilike(pattern),
                    Event.category.ilike(pattern),
                )
            )

        total = query.count()
        events = query.order_by(Event.created_at.desc()).offset(skip).limit(limit).all()
        return events, total

    @staticmethod
    def get_event(db: Session, event_id: UUID) -> Event:
        event = db.query(Event).filter(Event.id == event_id).first()
        if event is None:
            raise NotFoundError("Event not found", resource="event")
        return event

    @staticmethod
    def create_event(db: Session, data: EventCreate, owner: User) -> Event:
        event = Event(
            **data.model_dump(exclude={"organizer_email"}),
            organizer_email=data.organizer_email or default_organizer_email(data.organizer),
            organizer_id=owner.id,
        )
        db.add(event)
        db.commit()
        db.refresh(event)
        logger.info(f"Event {event.id} created by user {owner.id}")
        return event

    @staticmethod
    def update_event(db: Session, event: Event, data: EventUpdate) -> Event:
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(event, field, value)
        db.commit()
        db.refresh(event)
        return event

    @staticmethod
    def update_status(db: Session, event: Event, status: EventStatus) -> Event:
        previous = event.status
        event.status = status
        db.commit()
        db.refresh(event)
        logger.info(f"Event {event.id} status changed from {previous.value} to {status.value}")
        return event

    @staticmethod
    def delete_event(db: Session, event: Event) -> None:
        db.delete(event)
        db.commit()
        logger.info(f"Event {event.id} deleted")

    @staticmethod
    def ensure_can_manage(event: Event, user: User) -> None:
        """Only the organizer who owns the event, or an admin, may change it."""
        if user.user_type == UserType.ADMIN:
            return
        if event.organizer_id is None or event.organizer_id != user.id:
            raise ForbiddenError("You can only manage your own events")
