"""Core schema definitions for standardized API responses."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Standard API response envelope.

    Example success response:
        {
            "success": true,
            "data": { ... },
            "meta": { "range": "30d", "generated_at": "..." }
        }
    """

    success: bool = True
    data: T | None = None
    error: dict[str, Any] | None = None
    meta: dict[str, Any] | None = None


class PaginationMeta(BaseModel):
    """Pagination metadata for list responses."""

    total: int = Field(..., description="Total number of items")
    page: int = Field(..., ge=1, description="Current page number")
    limit: int = Field(..., ge=1, le=100, description="Items per page")
    pages: int = Field(..., ge=0, description="Total number of pages")

    @classmethod
    def from_query(cls, total: int, page: int, limit: int) -> "PaginationMeta":
        pages = (total + limit - 1) // limit if limit > 0 else 0
        return cls(total=total, page=page, limit=limit, pages=pages)


class PaginatedResponse(BaseModel, Generic[T]):
    """Paginated list response with metadata."""

    success: bool = True
    data: list[T]
    meta: PaginationMeta


def success_response(data: T, meta: dict[str, Any] | None = None) -> ApiResponse[T]:
    """Wrap data in a successful API response."""
    return ApiResponse(success=True, data=data, meta=meta)


def paginated_response(
    data: list[T],
    total: int,
    page: int,
    limit: int,
) -> PaginatedResponse[T]:
    """Create a paginated response.

    Args:
        data: List of items for current page.
        total: Total number of items.
        page: Current page number.
        limit: Items per page.
    """
    return PaginatedResponse(
        data=data,
        meta=PaginationMeta.from_query(total, page, limit),
    )
