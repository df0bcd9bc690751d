"""Admin analytics snapshot: overview, monthly trends, rankings, breakdowns."""

import asyncio
from datetime import datetime, timedelta

import structlog

from app.analytics.schemas.analytics import (
    AnalyticsSnapshot,
    Breakdowns,
    EventStat,
    Overview,
    RevenueTrendPoint,
    TopEvent,
    UserGrowthPoint,
)
from app.analytics.schemas.records import EventRecord, UserRecord
from app.analytics.services.aggregation import (
    Contribution,
    conversion_rate,
    count_by,
    month_label,
    occupancy,
    ordered_by_month,
    reduce_records,
    resolve_timestamp,
    top_n,
)
from app.analytics.services.record_source import RecordSource, fetch_or_empty
from app.core.config import settings
from app.core.constants import ANALYTICS_RANGE_DAYS
from app.core.datetime_utils import utcnow

logger = structlog.get_logger(__name__)

UNTITLED_EVENT = "Untitled Event"
UNCATEGORIZED = "Uncategorized"
DEFAULT_EVENT_STATUS = "active"
ACTIVE_USER_STATUS = "active"


def range_start(range_key: str, now: datetime) -> datetime:
    """Start of the reporting window; unknown keys use the default range."""
    if range_key == "1y":
        try:
            return now.replace(year=now.year - 1)
        except ValueError:
            # Feb 29
            return now.replace(year=now.year - 1, day=28)
    days = ANALYTICS_RANGE_DAYS.get(range_key, ANALYTICS_RANGE_DAYS["30d"])
    return now - timedelta(days=days)


def event_timestamp(event: EventRecord, now: datetime) -> datetime:
    return resolve_timestamp(event.created_at, event.date, now=now)


def user_timestamp(user: UserRecord, now: datetime) -> datetime:
    return resolve_timestamp(user.created_at, now=now)


class AnalyticsService:
    """Builds the admin analytics snapshot from a record source."""

    @staticmethod
    async def get_snapshot(
        source: RecordSource,
        range_key: str | None = None,
        now: datetime | None = None,
    ) -> AnalyticsSnapshot:
        """Fetch events and users and aggregate those inside the range.

        Each fetch degrades on its own: a failed fetch contributes an empty list
        and the snapshot is still built from the other.
        """
        now = now or utcnow()
        range_key = range_key or settings.ANALYTICS_DEFAULT_RANGE
        start = range_start(range_key, now)

        events, users = await asyncio.gather(
            fetch_or_empty(source.fetch_events, "events"),
            fetch_or_empty(source.fetch_users, "users"),
        )

        events = [e for e in events if event_timestamp(e, now) >= start]
        users = [u for u in users if user_timestamp(u, now) >= start]

        logger.info(
            "analytics_snapshot",
            range=range_key,
            events=len(events),
            users=len(users),
        )
        return AnalyticsService.build_snapshot(events, users, now)

    @staticmethod
    def build_snapshot(
        events: list[EventRecord],
        users: list[UserRecord],
        now: datetime,
        top_events_limit: int | None = None,
        event_stats_limit: int | None = None,
    ) -> AnalyticsSnapshot:
        """Aggregate already-filtered records. Pure; never raises on data."""
        if top_events_limit is None:
            top_events_limit = settings.TOP_EVENTS_LIMIT
        if event_stats_limit is None:
            event_stats_limit = settings.EVENT_STATS_LIMIT

        tickets_sold = sum(e.tickets_sold for e in events)
        total_revenue = sum(e.revenue for e in events)
        active_users = sum(1 for u in users if u.status == ACTIVE_USER_STATUS)

        overview = Overview(
            total_users=len(users),
            total_events=len(events),
            tickets_sold=tickets_sold,
            total_revenue=total_revenue,
            active_users=active_users,
            conversion_rate=conversion_rate(tickets_sold, len(users)),
        )

        return AnalyticsSnapshot(
            overview=overview,
            revenue_trend=AnalyticsService.revenue_trend(events, now),
            user_growth=AnalyticsService.user_growth(users, now),
            event_stats=AnalyticsService.event_stats(events, event_stats_limit),
            top_events=AnalyticsService.top_events(events, top_events_limit),
            counts=Breakdowns(
                by_category=count_by(events, lambda e: e.category or UNCATEGORIZED),
                by_status=count_by(events, lambda e: e.status or DEFAULT_EVENT_STATUS),
            ),
        )

    @staticmethod
    def revenue_trend(events: list[EventRecord], now: datetime) -> list[RevenueTrendPoint]:
        buckets = reduce_records(
            events,
            lambda e: month_label(event_timestamp(e, now)),
            lambda e: Contribution(revenue=e.revenue, tickets=e.tickets_sold),
        )
        return [
            RevenueTrendPoint(month=month, revenue=bucket.revenue, tickets=bucket.tickets)
            for month, bucket in ordered_by_month(buckets)
        ]

    @staticmethod
    def user_growth(users: list[UserRecord], now: datetime) -> list[UserGrowthPoint]:
        buckets = reduce_records(
            users,
            lambda u: month_label(user_timestamp(u, now)),
            lambda u: Contribution(active=int(u.status == ACTIVE_USER_STATUS)),
        )
        return [
            UserGrowthPoint(month=month, users=bucket.count, active=bucket.active)
            for month, bucket in ordered_by_month(buckets)
        ]

    @staticmethod
    def event_stats(events: list[EventRecord], limit: int) -> list[EventStat]:
        """Events with the highest revenue."""
        return [
            EventStat(
                name=e.title or UNTITLED_EVENT,
                tickets=e.tickets_sold,
                revenue=e.revenue,
                capacity=occupancy(e.tickets_sold, e.total_tickets),
            )
            for e in top_n(events, lambda e: e.revenue, limit)
        ]

    @staticmethod
    def top_events(events: list[EventRecord], limit: int) -> list[TopEvent]:
        """Events with the most tickets sold."""
        return [
            TopEvent(
                id=e.id,
                name=e.title or UNTITLED_EVENT,
                tickets_sold=e.tickets_sold,
                revenue=e.revenue,
                status=e.status or DEFAULT_EVENT_STATUS,
            )
            for e in top_n(events, lambda e: e.tickets_sold, limit)
        ]
