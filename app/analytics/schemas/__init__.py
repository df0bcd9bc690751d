from app.analytics.schemas.analytics import (
    AnalyticsSnapshot,
    Breakdowns,
    CountFilters,
    EventCounts,
    EventStat,
    Overview,
    RevenueTrendPoint,
    TopEvent,
    UserGrowthPoint,
    UserStats,
    UserStatsResponse,
    UserStatsSummary,
)
from app.analytics.schemas.records import EventRecord, TicketRecord, UserRecord

__all__ = [
    "AnalyticsSnapshot",
    "Breakdowns",
    "CountFilters",
    "EventCounts",
    "EventRecord",
    "EventStat",
    "Overview",
    "RevenueTrendPoint",
    "TicketRecord",
    "TopEvent",
    "UserGrowthPoint",
    "UserRecord",
    "UserStats",
    "UserStatsResponse",
    "UserStatsSummary",
]
