from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.analytics.schemas.analytics import CountFilters, EventCounts
from app.analytics.services.event_counts_service import EventCountsService
from app.analytics.services.record_source import RecordSource, get_record_source
from app.auth.dependencies import get_current_user, require_admin, require_organizer
from app.auth.models.user import User
from app.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from app.core.schemas import ApiResponse, PaginatedResponse, paginated_response, success_response
from app.db.session import get_db
from app.events.models import EventStatus
from app.events.schemas.event import (
    EventCreate,
    EventResponse,
    EventStatusResponse,
    EventStatusUpdate,
    EventUpdate,
)
from app.events.services.event_service import EventService

router = APIRouter()


@router.get("", response_model=PaginatedResponse[EventResponse])
async def list_events(
    category: str | None = Query(None, description="Filter by category"),
    event_status: EventStatus | None = Query(None, alias="status", description="Filter by status"),
    search: str | None = Query(None, description="Search title, location, city and category"),
    organizer_id: UUID | None = Query(None, description="Only events owned by this user"),
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
) -> PaginatedResponse[EventResponse]:
    events, total = EventService.list_events(
        db,
        category=category,
        status=event_status,
        search=search,
        organizer_id=organizer_id,
        skip=(page - 1) * limit,
        limit=limit,
    )
    return paginated_response(
        [EventResponse.from_event(e) for e in events], total=total, page=page, limit=limit
    )


@router.get("/counts", response_model=ApiResponse[EventCounts])
async def get_event_counts(
    category: str | None = Query(None),
    event_status: str | None = Query(None, alias="status"),
    user_id: str | None = Query(None, alias="userId", description="Only events owned by this user"),
    source: RecordSource = Depends(get_record_source),
) -> ApiResponse[EventCounts]:
    """
    Event counts for dashboards.

    Returns totals, upcoming/past/today counts, ticket and revenue sums,
    breakdowns by category, status and month (``"Mon YYYY"``, chronological),
    and the filters that were applied.
    """
    filters = CountFilters(category=category, status=event_status, user_id=user_id)
    counts = await EventCountsService.get_counts(source, filters)
    return success_response(counts)


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(event_id: UUID, db: Session = Depends(get_db)) -> EventResponse:
    return EventResponse.from_event(EventService.get_event(db, event_id))


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    data: EventCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_organizer),
) -> EventResponse:
    """Create an event owned by the current organizer (or admin)."""
    return EventResponse.from_event(EventService.create_event(db, data, current_user))


@router.put("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: UUID,
    data: EventUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> EventResponse:
    event = EventService.get_event(db, event_id)
    EventService.ensure_can_manage(event, current_user)
    return EventResponse.from_event(EventService.update_event(db, event, data))


@router.patch("/{event_id}/status", response_model=EventStatusResponse)
async def update_event_status(
    event_id: UUID,
    data: EventStatusUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> EventStatusResponse:
    event = EventService.update_status(db, EventService.get_event(db, event_id), data.status)
    return EventStatusResponse(
        id=str(event.id),
        status=event.status,
        message=f"Event status updated to {event.status.value}",
    )


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> None:
    event = EventService.get_event(db, event_id)
    EventService.ensure_can_manage(event, current_user)
    EventService.delete_event(db, event)
