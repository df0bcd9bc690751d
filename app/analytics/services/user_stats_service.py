"""Per-user statistics: events organized, events attended, tickets and spend."""

from datetime import datetime

from app.analytics.schemas.analytics import UserStats, UserStatsResponse, UserStatsSummary
from app.analytics.schemas.records import EventRecord, TicketRecord
from app.analytics.services.aggregation import (
    average_price,
    is_before,
    percentage,
    resolve_timestamp,
)
from app.analytics.services.record_source import RecordSource, fetch_or_empty
from app.core.datetime_utils import utcnow


class UserStatsService:
    @staticmethod
    async def get_user_stats(
        source: RecordSource, user_id: str, now: datetime | None = None
    ) -> UserStatsResponse:
        events = await fetch_or_empty(source.fetch_events, "events")
        tickets = await fetch_or_empty(lambda: source.fetch_tickets(user_id), "tickets")
        return UserStatsService.build_user_stats(user_id, events, tickets, now or utcnow())

    @staticmethod
    def build_user_stats(
        user_id: str,
        events: list[EventRecord],
        tickets: list[TicketRecord],
        now: datetime,
    ) -> UserStatsResponse:
        """Aggregate the user's events and tickets.

        ``tickets`` must already be limited to the user. An event with no
        usable date is treated as happening now, which makes it past.
        """
        organized = [e for e in events if e.organizer_id == user_id]
        attending_ids = {t.event_id for t in tickets if t.event_id}
        attending = [e for e in events if e.id in attending_ids]

        def upcoming(items: list[EventRecord]) -> int:
            return sum(1 for e in items if is_before(now, resolve_timestamp(e.date, now=now)))

        upcoming_organized = upcoming(organized)
        upcoming_attending = upcoming(attending)
        past_organized = len(organized) - upcoming_organized
        past_attending = len(attending) - upcoming_attending

        organized_tickets_sold = sum(e.tickets_sold for e in organized)
        organized_revenue = sum(e.revenue for e in organized)

        stats = UserStats(
            total_tickets=len(tickets),
            tickets_purchased=sum(t.quantity for t in tickets),
            organized_events=len(organized),
            attending_events=len(attending),
            upcoming_organized=upcoming_organized,
            past_organized=past_organized,
            upcoming_attending=upcoming_attending,
            past_attending=past_attending,
            organized_tickets_sold=organized_tickets_sold,
            organized_revenue=organized_revenue,
            total_spent=sum(t.price for t in tickets),
            average_ticket_price=average_price(organized_revenue, organized_tickets_sold),
            organized_completion_rate=percentage(past_organized, len(organized)),
            attendance_rate=percentage(past_attending, len(attending)),
        )
        summary = UserStatsSummary(
            message=(
                f"You have {len(organized)} organized events "
                f"and {len(attending)} events to attend"
            ),
            active_tickets=len(tickets),
        )
        return UserStatsResponse(user_id=user_id, stats=stats, summary=summary)
