"""Report payloads for the analytics, event counts and user stats endpoints.

Fields are declared in snake_case and serialized in camelCase.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============ Analytics snapshot ============


class Overview(CamelModel):
    """Top-level totals for the selected range."""

    total_users: int = Field(default=0, description="Users registered in range")
    total_events: int = Field(default=0, description="Events created in range")
    tickets_sold: int = Field(default=0, description="Tickets sold across events in range")
    total_revenue: float = Field(default=0, description="Revenue across events in range")
    active_users: int = Field(default=0, description="Users whose status is active")
    conversion_rate: float = Field(
        default=0, description="Tickets sold per user as a percentage, one decimal"
    )


class RevenueTrendPoint(CamelModel):
    month: str = Field(description="Short month label (Jan..Dec)")
    revenue: float = 0
    tickets: int = 0


class UserGrowthPoint(CamelModel):
    month: str = Field(description="Short month label (Jan..Dec)")
    users: int = 0
    active: int = 0


class EventStat(CamelModel):
    """An event ranked by revenue."""

    name: str
    tickets: int = 0
    revenue: float = 0
    capacity: int = Field(default=0, description="Occupancy percentage, capped at 100")


class TopEvent(CamelModel):
    """An event ranked by tickets sold."""

    id: str | None = None
    name: str
    tickets_sold: int = 0
    revenue: float = 0
    status: str


class Breakdowns(CamelModel):
    by_category: dict[str, int] = Field(default_factory=dict)
    by_status: dict[str, int] = Field(default_factory=dict)


class AnalyticsSnapshot(CamelModel):
    overview: Overview = Field(default_factory=Overview)
    revenue_trend: list[RevenueTrendPoint] = Field(default_factory=list)
    user_growth: list[UserGrowthPoint] = Field(default_factory=list)
    event_stats: list[EventStat] = Field(default_factory=list)
    top_events: list[TopEvent] = Field(default_factory=list)
    counts: Breakdowns = Field(default_factory=Breakdowns)


# ============ Event counts ============


class CountFilters(CamelModel):
    category: str | None = None
    status: str | None = None
    user_id: str | None = None


class EventCounts(CamelModel):
    total_events: int = 0
    upcoming_events: int = 0
    past_events: int = 0
    active_events: int = Field(default=0, description="Events taking place today")
    draft_events: int = 0
    cancelled_events: int = 0
    total_tickets_available: int = 0
    total_tickets_sold: int = 0
    total_revenue: float = 0
    average_attendance: int = Field(default=0, description="Tickets sold per event, rounded")
    sellout_rate: int = Field(default=0, description="Sold share of offered tickets")
    by_category: dict[str, int] = Field(default_factory=dict)
    by_status: dict[str, int] = Field(default_factory=dict)
    by_month: dict[str, int] = Field(
        default_factory=dict, description="Event counts keyed 'Mon YYYY', chronological"
    )
    upcoming_percentage: int = 0
    past_percentage: int = 0
    filters: CountFilters = Field(default_factory=CountFilters)


# ============ User stats ============


class UserStats(CamelModel):
    total_tickets: int = Field(default=0, description="Ticket records owned by the user")
    tickets_purchased: int = Field(default=0, description="Sum of ticket quantities")
    organized_events: int = 0
    attending_events: int = 0
    upcoming_organized: int = 0
    past_organized: int = 0
    upcoming_attending: int = 0
    past_attending: int = 0
    organized_tickets_sold: int = 0
    organized_revenue: float = 0
    total_spent: float = 0
    average_ticket_price: float = 0
    organized_completion_rate: int = 0
    attendance_rate: int = 0


class UserStatsSummary(CamelModel):
    message: str
    active_tickets: int = 0


class UserStatsResponse(CamelModel):
    user_id: str
    stats: UserStats
    summary: UserStatsSummary
