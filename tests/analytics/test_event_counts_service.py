from datetime import UTC, datetime

import pytest

from app.analytics.schemas.analytics import CountFilters, EventCounts
from app.analytics.schemas.records import EventRecord
from app.analytics.services.event_counts_service import EventCountsService, matches_filters
from tests.utils.helpers import StaticRecordSource

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


def _events(*payloads: dict) -> list[EventRecord]:
    return [EventRecord.model_validate(p) for p in payloads]


class TestBuildCounts:
    def test_should_zero_fill_empty_input(self):
        counts = EventCountsService.build_counts([], NOW)

        assert counts == EventCounts()
        assert counts.sellout_rate == 0
        assert counts.average_attendance == 0

    def test_should_split_upcoming_past_and_today(self):
        events = _events(
            {"date": "2024-07-01T10:00:00Z"},
            {"date": "2024-05-01T10:00:00Z"},
            {"date": "2024-06-15T09:00:00Z"},
            {"date": "2024-06-15T20:00:00Z"},
        )

        counts = EventCountsService.build_counts(events, NOW)

        assert counts.total_events == 4
        assert counts.upcoming_events == 2
        assert counts.past_events == 2
        assert counts.active_events == 2
        assert counts.upcoming_percentage == 50
        assert counts.past_percentage == 50

    def test_undated_events_only_count_in_totals(self):
        events = _events({"date": "2024-07-01"}, {"date": None, "category": "Tech"})

        counts = EventCountsService.build_counts(events, NOW)

        assert counts.total_events == 2
        assert counts.upcoming_events + counts.past_events == 1
        assert counts.by_category == {"Uncategorized": 1, "Tech": 1}
        assert counts.by_month == {"Jul 2024": 1}

    def test_should_compute_ticket_metrics(self):
        events = _events(
            {"revenue": 100, "ticketsSold": 10, "totalTickets": 20},
            {"revenue": 200, "ticketsSold": 5, "totalTickets": 20},
            {"revenue": 0, "ticketsSold": 0, "totalTickets": 20},
        )

        counts = EventCountsService.build_counts(events, NOW)

        assert counts.total_tickets_available == 60
        assert counts.total_tickets_sold == 15
        assert counts.total_revenue == 300
        assert counts.sellout_rate == 25
        assert counts.average_attendance == 5

    def test_status_defaults_to_draft(self):
        events = _events({"status": None}, {"status": "cancelled"}, {"status": "draft"})

        counts = EventCountsService.build_counts(events, NOW)

        assert counts.by_status == {"draft": 2, "cancelled": 1}
        assert counts.draft_events == 2
        assert counts.cancelled_events == 1

    def test_by_month_is_chronological(self):
        events = _events(
            {"date": "2024-02-01"},
            {"date": "2023-12-01"},
            {"date": "2024-01-05"},
            {"date": "2023-12-24"},
        )

        counts = EventCountsService.build_counts(events, NOW)

        assert list(counts.by_month.items()) == [
            ("Dec 2023", 2),
            ("Jan 2024", 1),
            ("Feb 2024", 1),
        ]

    def test_should_echo_filters(self):
        filters = CountFilters(category="Music")

        counts = EventCountsService.build_counts([], NOW, filters)

        assert counts.model_dump(by_alias=True)["filters"] == {
            "category": "Music",
            "status": None,
            "userId": None,
        }


class TestMatchesFilters:
    def test_empty_filters_match_everything(self):
        assert matches_filters(EventRecord(), CountFilters())

    @pytest.mark.parametrize(
        ("filters", "expected"),
        [
            (CountFilters(category="Music"), True),
            (CountFilters(category="Tech"), False),
            (CountFilters(status="active"), True),
            (CountFilters(status="draft"), False),
            (CountFilters(user_id="u1"), True),
            (CountFilters(user_id="u2"), False),
            (CountFilters(category="Music", status="active", user_id="u1"), True),
        ],
    )
    def test_filters_are_conjunctive(self, filters, expected):
        event = EventRecord.model_validate(
            {"category": "Music", "status": "active", "organizerId": "u1"}
        )

        assert matches_filters(event, filters) is expected


class TestGetCounts:
    @pytest.mark.asyncio
    async def test_should_apply_filters_before_counting(self):
        source = StaticRecordSource(
            events=[
                {"category": "Music", "organizerId": "u1", "date": "2024-07-01"},
                {"category": "Music", "organizerId": "u2", "date": "2024-07-01"},
                {"category": "Tech", "organizerId": "u1", "date": "2024-07-01"},
            ]
        )

        counts = await EventCountsService.get_counts(
            source, CountFilters(category="Music", user_id="u1"), now=NOW
        )

        assert counts.total_events == 1
        assert counts.by_category == {"Music": 1}
        assert counts.filters.user_id == "u1"
