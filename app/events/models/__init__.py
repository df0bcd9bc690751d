from app.events.models.event import Event, EventStatus
from app.events.models.ticket import Ticket, TicketStatus

__all__ = ["Event", "EventStatus", "Ticket", "TicketStatus"]
