"""User directory, profile and per-user event/ticket listings."""

import logging
from datetime import datetime, timedelta
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from app.analytics.services.aggregation import is_before, resolve_timestamp
from app.auth.models.user import User, UserType
from app.auth.schemas.user import ProfileUpdate
from app.core.constants import ACTIVE_EVENT_WINDOW_DAYS
from app.core.datetime_utils import utcnow
from app.core.exceptions import NotFoundError
from app.events.models import Event, Ticket
from app.events.schemas.ticket import TicketResponse
from app.users.schemas.user_events import (
    EventsTab,
    UserEvent,
    UserEventCounts,
    UserEventsResponse,
)

logger = logging.getLogger(__name__)

UNTITLED_EVENT = "Untitled Event"
UNKNOWN_LOCATION = "Location not specified"
UNKNOWN_CITY = "City not specified"
UNCATEGORIZED = "Uncategorized"
COMPLETED = "completed"


def attendee_status(date: datetime | None, now: datetime) -> str:
    """Status shown to attendees, derived from the event date alone.

    Past events are completed; events more than a week out are upcoming;
    anything in between is active.
    """
    when = resolve_timestamp(date, now=now)
    if is_before(when, now):
        return COMPLETED
    if is_before(now + timedelta(days=ACTIVE_EVENT_WINDOW_DAYS), when):
        return "upcoming"
    return "active"


def _matches(event: UserEvent, category: str | None, search: str | None) -> bool:
    if category and category != "all" and event.category != category:
        return False
    if search:
        needle = search.lower()
        haystack = (event.title, event.location, event.category)
        return any(needle in value.lower() for value in haystack)
    return True


class UserService:
    @staticmethod
    def get_user(db: Session, user_id: UUID) -> User:
        user = db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise NotFoundError("User not found", resource="user")
        return user

    @staticmethod
    def list_users(
        db: Session,
        user_type: UserType | None = None,
        search: str | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> tuple[list[User], int]:
        query = db.query(User)
        if user_type:
            query = query.filter(User.user_type == user_type)
        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(
                or_(
                    User.name.ilike(pattern),
                    User.email.ilike(pattern),
                    User.username.ilike(pattern),
                )
            )
        total = query.count()
        users = query.order_by(User.created_at.desc()).offset(skip).limit(limit).all()
        return users, total

    @staticmethod
    def update_profile(db: Session, user: User, data: ProfileUpdate) -> User:
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(user, field, value)
        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def get_user_tickets(
        db: Session, user_id: UUID, event_id: UUID | None = None
    ) -> list[TicketResponse]:
        query = (
            db.query(Ticket)
            .options(joinedload(Ticket.event))
            .filter(Ticket.user_id == user_id)
        )
        if event_id:
            query = query.filter(Ticket.event_id == event_id)
        tickets = query.order_by(Ticket.purchase_date.desc()).all()

        return [
            TicketResponse(
                id=str(t.id),
                ticket_number=t.ticket_number,
                event_id=str(t.event_id),
                event_name=t.event.title if t.event else UNTITLED_EVENT,
                user_id=str(t.user_id),
                quantity=t.quantity,
                unit_price=t.unit_price,
                total_amount=t.total_amount,
                status=t.status,
                payment_method=t.payment_method,
                payment_status=t.payment_status,
                purchase_date=t.purchase_date,
                check_in_time=t.check_in_time,
                event_date=t.event.date if t.event else None,
                location=t.event.location if t.event else None,
                city=t.event.city if t.event else None,
                created_at=t.created_at,
            )
            for t in tickets
        ]

    @staticmethod
    def get_user_events(
        db: Session,
        user: User,
        tab: EventsTab = EventsTab.ATTENDING,
        category: str | None = None,
        search: str | None = None,
        now: datetime | None = None,
    ) -> UserEventsResponse:
        """Events for one dashboard tab, plus the size of every tab.

        Saved events are not tracked, so the saved tab is always empty.
        """
        now = now or utcnow()
        attended = UserService._attended_events(db, user.id, now)
        organized = UserService._organized_events(db, user.id)

        counts = UserEventCounts(
            attending=sum(1 for e in attended if e.status != COMPLETED),
            organizing=len(organized),
            past=sum(1 for e in attended if e.status == COMPLETED),
        )

        if tab == EventsTab.ATTENDING:
            events = [e for e in attended if e.status != COMPLETED]
        elif tab == EventsTab.PAST:
            events = [e for e in attended if e.status == COMPLETED]
        elif tab == EventsTab.ORGANIZING:
            events = organized
        else:
            events = []

        events = [e for e in events if _matches(e, category, search)]
        return UserEventsResponse(tab=tab, events=events, counts=counts)

    @staticmethod
    def _attended_events(db: Session, user_id: UUID, now: datetime) -> list[UserEvent]:
        tickets = (
            db.query(Ticket)
            .options(joinedload(Ticket.event))
            .filter(Ticket.user_id == user_id)
            .order_by(Ticket.purchase_date)
            .all()
        )

        by_event: dict[UUID, list[Ticket]] = {}
        for ticket in tickets:
            if ticket.event is not None:
                by_event.setdefault(ticket.event_id, []).append(ticket)

        results = []
        for event_tickets in by_event.values():
            event = event_tickets[0].event
            item = UserService._to_user_event(event, role="attendee")
            item.status = attendee_status(event.date, now)
            item.registration_date = event_tickets[0].purchase_date
            item.ticket_count = sum(t.quantity for t in event_tickets)
            item.ticket_numbers = [t.ticket_number for t in event_tickets if t.ticket_number]
            results.append(item)
        return results

    @staticmethod
    def _organized_events(db: Session, user_id: UUID) -> list[UserEvent]:
        events = (
            db.query(Event)
            .filter(Event.organizer_id == user_id)
            .order_by(Event.created_at.desc())
            .all()
        )
        return [UserService._to_user_event(e, role="organizer") for e in events]

    @staticmethod
    def _to_user_event(event: Event, role: str) -> UserEvent:
        return UserEvent(
            id=str(event.id),
            title=event.title or UNTITLED_EVENT,
            description=event.description,
            date=event.date,
            location=event.location or UNKNOWN_LOCATION,
            city=event.city or UNKNOWN_CITY,
            category=event.category or UNCATEGORIZED,
            tickets_sold=event.tickets_sold,
            total_tickets=event.total_tickets,
            revenue=event.revenue,
            status=event.status.value,
            role=role,
            image_url=event.image_url,
            organizer=event.organizer,
        )
