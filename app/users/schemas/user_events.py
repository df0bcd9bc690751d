from enum import Enum

from pydantic import BaseModel, Field

from app.core.datetime_utils import UTCDatetime


class EventsTab(str, Enum):
    ATTENDING = "attending"
    ORGANIZING = "organizing"
    PAST = "past"
    SAVED = "saved"


class UserEvent(BaseModel):
    """An event as it appears on a user's dashboard."""

    id: str
    title: str
    description: str | None = None
    date: UTCDatetime | None = None
    location: str
    city: str
    category: str
    tickets_sold: int = 0
    total_tickets: int = 0
    revenue: float = 0
    status: str = Field(
        description="Stored status for organizers; completed/active/upcoming for attendees"
    )
    role: str = Field(description="organizer or attendee")
    registration_date: UTCDatetime | None = None
    ticket_count: int | None = None
    ticket_numbers: list[str] = Field(default_factory=list)
    is_saved: bool = False
    image_url: str | None = None
    organizer: str | None = None


class UserEventCounts(BaseModel):
    attending: int = 0
    organizing: int = 0
    past: int = 0
    saved: int = 0


class UserEventsResponse(BaseModel):
    tab: EventsTab
    events: list[UserEvent]
    counts: UserEventCounts
