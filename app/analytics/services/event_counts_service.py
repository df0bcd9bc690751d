"""Event count breakdowns for the events dashboard."""

from datetime import datetime

from app.analytics.schemas.analytics import CountFilters, EventCounts
from app.analytics.schemas.records import EventRecord
from app.analytics.services.aggregation import (
    average,
    count_by,
    is_before,
    is_same_day,
    month_year_label,
    month_year_sort_key,
    percentage,
    sellout_rate,
)
from app.analytics.services.record_source import RecordSource, fetch_or_empty
from app.core.datetime_utils import utcnow

UNCATEGORIZED = "Uncategorized"
DEFAULT_STATUS = "draft"


def matches_filters(event: EventRecord, filters: CountFilters) -> bool:
    if filters.category and event.category != filters.category:
        return False
    if filters.status and event.status != filters.status:
        return False
    if filters.user_id and event.organizer_id != filters.user_id:
        return False
    return True


class EventCountsService:
    @staticmethod
    async def get_counts(
        source: RecordSource,
        filters: CountFilters | None = None,
        now: datetime | None = None,
    ) -> EventCounts:
        filters = filters or CountFilters()
        events = await fetch_or_empty(source.fetch_events, "events")
        events = [e for e in events if matches_filters(e, filters)]
        return EventCountsService.build_counts(events, now or utcnow(), filters)

    @staticmethod
    def build_counts(
        events: list[EventRecord], now: datetime, filters: CountFilters | None = None
    ) -> EventCounts:
        """Count events by time, category, status and month.

        Events without a usable date are counted in the totals and the
        category/status breakdowns but in none of the time buckets.
        """
        by_status = count_by(events, lambda e: e.status or DEFAULT_STATUS)
        dated = [e for e in events if e.date is not None]

        upcoming = sum(1 for e in dated if is_before(now, e.date))
        past = len(dated) - upcoming
        by_month = count_by(dated, lambda e: month_year_label(e.date))

        total_events = len(events)
        tickets_available = sum(e.total_tickets for e in events)
        tickets_sold = sum(e.tickets_sold for e in events)

        return EventCounts(
            total_events=total_events,
            upcoming_events=upcoming,
            past_events=past,
            active_events=sum(1 for e in dated if is_same_day(e.date, now)),
            draft_events=by_status.get("draft", 0),
            cancelled_events=by_status.get("cancelled", 0),
            total_tickets_available=tickets_available,
            total_tickets_sold=tickets_sold,
            total_revenue=sum(e.revenue for e in events),
            average_attendance=average(tickets_sold, total_events),
            sellout_rate=sellout_rate(tickets_available, tickets_sold),
            by_category=count_by(events, lambda e: e.category or UNCATEGORIZED),
            by_status=by_status,
            by_month=dict(
                sorted(by_month.items(), key=lambda item: month_year_sort_key(item[0]))
            ),
            upcoming_percentage=percentage(upcoming, total_events),
            past_percentage=percentage(past, total_events),
            filters=filters or CountFilters(),
        )
