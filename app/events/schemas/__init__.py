from app.events.schemas.event import (
    EventCreate,
    EventResponse,
    EventStatusResponse,
    EventStatusUpdate,
    EventUpdate,
)
from app.events.schemas.ticket import TicketResponse

__all__ = [
    "EventCreate",
    "EventResponse",
    "EventStatusResponse",
    "EventStatusUpdate",
    "EventUpdate",
    "TicketResponse",
]
