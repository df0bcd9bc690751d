from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.analytics.schemas.analytics import UserStatsResponse
from app.analytics.services.record_source import RecordSource, get_record_source
from app.analytics.services.user_stats_service import UserStatsService
from app.auth.dependencies import get_current_user, require_admin
from app.auth.models.user import User, UserType
from app.auth.schemas.user import ProfileUpdate, UserResponse
from app.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from app.core.schemas import ApiResponse, PaginatedResponse, paginated_response, success_response
from app.db.session import get_db
from app.events.schemas.ticket import TicketResponse
from app.users.schemas.user_events import EventsTab, UserEventsResponse
from app.users.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=PaginatedResponse[UserResponse])
async def list_users(
    user_type: UserType | None = Query(None, description="Filter by account type"),
    search: str | None = Query(None, description="Search name, email and username"),
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> PaginatedResponse[UserResponse]:
    users, total = UserService.list_users(
        db, user_type=user_type, search=search, skip=(page - 1) * limit, limit=limit
    )
    return paginated_response(
        [UserResponse.from_user(u) for u in users], total=total, page=page, limit=limit
    )


@router.get("/me", response_model=UserResponse)
async def get_profile(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.from_user(current_user)


@router.put("/me", response_model=UserResponse)
async def update_profile(
    data: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    return UserResponse.from_user(UserService.update_profile(db, current_user, data))


@router.get("/me/events", response_model=UserEventsResponse)
async def get_my_events(
    tab: EventsTab = Query(EventsTab.ATTENDING),
    category: str | None = Query(None, description="Category, or 'all'"),
    search: str | None = Query(None, description="Search title, location and category"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserEventsResponse:
    """
    Events on the user's dashboard.

    - attending: events the user holds tickets for that are not over yet
    - past: events the user held tickets for that are over
    - organizing: events the user owns
    - saved: always empty
    """
    return UserService.get_user_events(db, current_user, tab=tab, category=category, search=search)


@router.get("/me/tickets", response_model=list[TicketResponse])
async def get_my_tickets(
    event_id: UUID | None = Query(None, description="Only tickets for this event"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[TicketResponse]:
    return UserService.get_user_tickets(db, current_user.id, event_id=event_id)


@router.get("/me/stats", response_model=ApiResponse[UserStatsResponse])
async def get_my_stats(
    current_user: User = Depends(get_current_user),
    source: RecordSource = Depends(get_record_source),
) -> ApiResponse[UserStatsResponse]:
    stats = await UserStatsService.get_user_stats(source, str(current_user.id))
    return success_response(stats)


@router.get("/{user_id}/stats", response_model=ApiResponse[UserStatsResponse])
async def get_user_stats(
    user_id: UUID,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
    source: RecordSource = Depends(get_record_source),
) -> ApiResponse[UserStatsResponse]:
    user = UserService.get_user(db, user_id)
    stats = await UserStatsService.get_user_stats(source, str(user.id))
    return success_response(stats)
