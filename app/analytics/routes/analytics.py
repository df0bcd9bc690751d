"""Analytics routes for the admin dashboard."""

from fastapi import APIRouter, Depends, Query

from app.analytics.schemas.analytics import AnalyticsSnapshot
from app.analytics.services.analytics_service import AnalyticsService
from app.analytics.services.record_source import RecordSource, get_record_source
from app.auth.dependencies import require_admin
from app.auth.models.user import User
from app.core.config import settings
from app.core.constants import AnalyticsRange
from app.core.datetime_utils import utcnow
from app.core.schemas import ApiResponse, success_response

router = APIRouter()


@router.get("/analytics", response_model=ApiResponse[AnalyticsSnapshot])
async def get_analytics(
    range_key: AnalyticsRange | None = Query(
        None, alias="range", description="Look-back window (default from settings)"
    ),
    source: RecordSource = Depends(get_record_source),
    admin: User = Depends(require_admin),
) -> ApiResponse[AnalyticsSnapshot]:
    """
    Analytics snapshot for the selected window.

    Returns:
    - overview totals (users, events, tickets, revenue, active users, conversion rate)
    - revenue and user growth per calendar month
    - top events by revenue and by tickets sold
    - event counts by category and status

    Sources that cannot be read contribute nothing instead of failing the request.
    """
    range_key = range_key or settings.ANALYTICS_DEFAULT_RANGE
    now = utcnow()
    snapshot = await AnalyticsService.get_snapshot(source, range_key, now=now)
    return success_response(snapshot, meta={"range": range_key, "generated_at": now.isoformat()})
