from pydantic import BaseModel

from app.core.datetime_utils import UTCDatetime
from app.events.models import TicketStatus


class TicketResponse(BaseModel):
    """A ticket together with the event it admits to."""

    id: str
    ticket_number: str
    event_id: str
    event_name: str
    user_id: str
    quantity: int
    unit_price: float
    total_amount: float
    status: TicketStatus
    payment_method: str | None = None
    payment_status: str | None = None
    purchase_date: UTCDatetime | None = None
    check_in_time: UTCDatetime | None = None
    event_date: UTCDatetime | None = None
    location: str | None = None
    city: str | None = None
    created_at: UTCDatetime
