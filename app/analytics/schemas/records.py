"""Typed snapshots of stored entities as seen by the reporting pipeline.

Records are validated at the boundary: numeric fields that are missing or
unparsable become ``0`` and timestamps that cannot be parsed become ``None``
(the bucketer later resolves ``None`` to "now"). Both snake_case attribute
names (ORM rows) and the camelCase keys of document-style payloads are
accepted.
"""

import enum
import math
from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from app.core.datetime_utils import parse_datetime


def _to_number(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, Decimal):
        value = float(value)
    if isinstance(value, int | float):
        return 0 if math.isnan(value) or math.isinf(value) else value
    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return 0
        return 0 if math.isnan(parsed) or math.isinf(parsed) else parsed
    return 0


def _to_int(value: Any) -> int:
    return int(_to_number(value))


def _to_label(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, enum.Enum):
        value = value.value
    text = str(value).strip()
    return text or None


def _to_id(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


class _Record(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True, extra="ignore")


class EventRecord(_Record):
    id: str | None = Field(default=None, validation_alias=AliasChoices("id", "eventId", "event_id"))
    title: str | None = Field(default=None, validation_alias=AliasChoices("title", "name"))
    date: datetime | None = None
    created_at: datetime | None = Field(
        default=None, validation_alias=AliasChoices("created_at", "createdAt")
    )
    revenue: float = 0
    tickets_sold: int = Field(default=0, validation_alias=AliasChoices("tickets_sold", "ticketsSold"))
    total_tickets: int = Field(
        default=0, validation_alias=AliasChoices("total_tickets", "totalTickets")
    )
    category: str | None = None
    status: str | None = None
    organizer_id: str | None = Field(
        default=None, validation_alias=AliasChoices("organizer_id", "userId", "organizerId")
    )
    location: str | None = None
    city: str | None = None

    _ids = field_validator("id", "organizer_id", mode="before")(_to_id)
    _labels = field_validator("title", "category", "status", "location", "city", mode="before")(
        _to_label
    )
    _timestamps = field_validator("date", "created_at", mode="before")(parse_datetime)
    _money = field_validator("revenue", mode="before")(_to_number)
    _counts = field_validator("tickets_sold", "total_tickets", mode="before")(_to_int)


class UserRecord(_Record):
    id: str | None = Field(default=None, validation_alias=AliasChoices("id", "userId", "user_id"))
    status: str | None = None
    created_at: datetime | None = Field(
        default=None, validation_alias=AliasChoices("created_at", "createdAt")
    )

    _ids = field_validator("id", mode="before")(_to_id)
    _labels = field_validator("status", mode="before")(_to_label)
    _timestamps = field_validator("created_at", mode="before")(parse_datetime)


class TicketRecord(_Record):
    id: str | None = Field(default=None, validation_alias=AliasChoices("id", "ticketId"))
    user_id: str | None = Field(default=None, validation_alias=AliasChoices("user_id", "userId"))
    event_id: str | None = Field(
        default=None, validation_alias=AliasChoices("event_id", "eventId")
    )
    quantity: int = 0
    price: float = Field(
        default=0, validation_alias=AliasChoices("price", "total_amount", "totalAmount")
    )
    purchase_date: datetime | None = Field(
        default=None, validation_alias=AliasChoices("purchase_date", "purchaseDate")
    )
    ticket_number: str | None = Field(
        default=None, validation_alias=AliasChoices("ticket_number", "ticketNumber")
    )
    status: str | None = None

    _ids = field_validator("id", "user_id", "event_id", mode="before")(_to_id)
    _labels = field_validator("ticket_number", "status", mode="before")(_to_label)
    _timestamps = field_validator("purchase_date", mode="before")(parse_datetime)
    _quantity = field_validator("quantity", mode="before")(_to_int)
    _money = field_validator("price", mode="before")(_to_number)
