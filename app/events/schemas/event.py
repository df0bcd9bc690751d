from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.core.config import settings
from app.core.datetime_utils import UTCDatetime
from app.events.models import EventStatus


class EventBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    date: datetime
    location: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=120)
    category: str = Field(..., min_length=1, max_length=100)
    organizer: str = Field(..., min_length=1, max_length=255, description="Organizer display name")
    organizer_email: str | None = None
    total_tickets: int = Field(..., gt=0, description="Seats on offer")
    ticket_price: float = Field(default=0, ge=0)
    image_url: str | None = None


class EventCreate(EventBase):
    status: EventStatus = EventStatus.PENDING


class EventUpdate(BaseModel):
    """Partial update; only the fields present in the request are changed."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    date: datetime | None = None
    location: str | None = Field(None, min_length=1, max_length=255)
    city: str | None = Field(None, min_length=1, max_length=120)
    category: str | None = Field(None, min_length=1, max_length=100)
    organizer: str | None = Field(None, min_length=1, max_length=255)
    organizer_email: str | None = None
    total_tickets: int | None = Field(None, ge=0)
    ticket_price: float | None = Field(None, ge=0)
    tickets_sold: int | None = Field(None, ge=0)
    revenue: float | None = Field(None, ge=0)
    image_url: str | None = None


class EventStatusUpdate(BaseModel):
    status: EventStatus


class EventResponse(BaseModel):
    id: str
    title: str
    description: str
    date: UTCDatetime | None = None
    location: str
    city: str
    category: str | None = None
    organizer: str
    organizer_email: str | None = None
    organizer_id: str | None = None
    total_tickets: int
    ticket_price: float
    tickets_sold: int
    revenue: float
    status: EventStatus
    image_url: str
    created_at: UTCDatetime
    updated_at: UTCDatetime

    @field_validator("id", "organizer_id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        return str(value) if value is not None else None

    @classmethod
    def from_event(cls, event) -> "EventResponse":
        return cls(
            id=event.id,
            title=event.title,
            description=event.description,
            date=event.date,
            location=event.location,
            city=event.city,
            category=event.category,
            organizer=event.organizer,
            organizer_email=event.organizer_email,
            organizer_id=event.organizer_id,
            total_tickets=event.total_tickets,
            ticket_price=event.ticket_price,
            tickets_sold=event.tickets_sold,
            revenue=event.revenue,
            status=event.status,
            image_url=event.image_url or settings.DEFAULT_EVENT_IMAGE,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )


class EventStatusResponse(BaseModel):
    id: str
    status: EventStatus
    message: str
