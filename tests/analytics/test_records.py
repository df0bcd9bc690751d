import uuid
from datetime import UTC, datetime
from decimal import Decimal

import pytest

from app.analytics.schemas.records import EventRecord, TicketRecord, UserRecord
from app.events.models import EventStatus


class TestEventRecord:
    def test_missing_numbers_default_to_zero(self):
        record = EventRecord.model_validate({"title": "Gig"})

        assert record.revenue == 0
        assert record.tickets_sold == 0
        assert record.total_tickets == 0

    def test_garbage_numbers_default_to_zero(self):
        record = EventRecord.model_validate(
            {"revenue": "lots", "ticketsSold": None, "totalTickets": float("nan")}
        )

        assert record.revenue == 0
        assert record.tickets_sold == 0
        assert record.total_tickets == 0

    def test_numeric_strings_and_decimals_are_parsed(self):
        record = EventRecord.model_validate(
            {"revenue": Decimal("19.99"), "ticketsSold": "12", "totalTickets": "40"}
        )

        assert record.revenue == 19.99
        assert record.tickets_sold == 12
        assert record.total_tickets == 40

    def test_bad_dates_become_none(self):
        record = EventRecord.model_validate({"date": "31/02/2024", "createdAt": ""})

        assert record.date is None
        assert record.created_at is None

    @pytest.mark.parametrize(
        "stamp", ["0001-01-01T00:00:00+05:00", "9999-12-31T23:00:00-05:00"]
    )
    def test_out_of_range_offsets_become_none(self, stamp):
        record = EventRecord.model_validate({"createdAt": stamp, "date": stamp, "revenue": 10})

        assert record.created_at is None
        assert record.date is None
        assert record.revenue == 10

    def test_camel_case_document_keys(self):
        record = EventRecord.model_validate(
            {
                "eventId": "evt_1",
                "userId": "u1",
                "createdAt": "2024-05-01T10:00:00Z",
                "status": "active",
            }
        )

        assert record.id == "evt_1"
        assert record.organizer_id == "u1"
        assert record.created_at == datetime(2024, 5, 1, 10, 0, tzinfo=UTC)

    def test_enum_and_uuid_values_are_flattened(self):
        event_id = uuid.uuid4()

        record = EventRecord.model_validate({"id": event_id, "status": EventStatus.DRAFT})

        assert record.id == str(event_id)
        assert record.status == "draft"


class TestUserAndTicketRecords:
    def test_user_record(self):
        record = UserRecord.model_validate({"userId": "u1", "status": "active"})

        assert record.id == "u1"
        assert record.created_at is None

    def test_ticket_quantity_defaults_to_zero(self):
        record = TicketRecord.model_validate({"userId": "u1", "eventId": "e1"})

        assert record.quantity == 0
        assert record.price == 0

    def test_ticket_price_falls_back_to_total_amount(self):
        record = TicketRecord.model_validate({"totalAmount": 45, "quantity": 3})

        assert record.price == 45
        assert record.quantity == 3
