"""Application-wide constants.

This module centralizes magic numbers and fixed vocabularies that are used
across multiple modules. For environment-specific configuration, see
config.py.
"""

from typing import Literal

# =============================================================================
# Pagination Defaults
# =============================================================================

DEFAULT_PAGE_SIZE: int = 20

# Maximum page size to prevent abuse
MAX_PAGE_SIZE: int = 100

# =============================================================================
# Reporting
# =============================================================================

AnalyticsRange = Literal["7d", "30d", "90d", "1y"]

# Look-back windows accepted by the analytics endpoint, in days
ANALYTICS_RANGE_DAYS: dict[str, int] = {
    "7d": 7,
    "30d": 30,
    "90d": 90,
    "1y": 365,
}

# Events farther away than this are "upcoming" rather than "active" for attendees
ACTIVE_EVENT_WINDOW_DAYS: int = 7

# =============================================================================
# Uploads
# =============================================================================

UPLOAD_ALLOWED_MIME_TYPES: tuple[str, ...] = (
    "image/png",
    "image/jpeg",
    "image/gif",
    "image/webp",
)

UPLOAD_ALLOWED_FOLDERS: tuple[str, ...] = (
    "event-images",
    "avatars",
)

# =============================================================================
# Frontend URL Paths
# =============================================================================
# Note: These are paths relative to FRONTEND_URL from config.py

PASSWORD_RESET_PATH: str = "/reset-password"
