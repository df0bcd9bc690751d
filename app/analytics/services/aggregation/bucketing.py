"""Timestamp resolution and calendar bucket labels."""

from datetime import datetime
from typing import Any

from app.core.datetime_utils import ensure_utc, parse_datetime

MONTH_LABELS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def resolve_timestamp(*candidates: Any, now: datetime) -> datetime:
    """Return the first candidate that parses as a timestamp, else ``now``.

    Candidates are tried in order, so callers pass the preferred field first
    (e.g. ``created_at`` before ``date``).
    """
    for candidate in candidates:
        parsed = parse_datetime(candidate)
        if parsed is not None:
            return parsed
    return ensure_utc(now)


def month_label(timestamp: datetime) -> str:
    return MONTH_LABELS[timestamp.month - 1]


def month_year_label(timestamp: datetime) -> str:
    """Return a label such as ``"Mar 2024"``."""
    return f"{month_label(timestamp)} {timestamp.year}"


def month_index(label: str) -> int:
    """Position of a month label in the calendar; unknown labels sort last."""
    try:
        return MONTH_LABELS.index(label)
    except ValueError:
        return len(MONTH_LABELS)


def month_year_sort_key(label: str) -> tuple[int, int]:
    """Chronological sort key for ``"Mon YYYY"`` labels."""
    month, _, year = label.partition(" ")
    try:
        year_number = int(year)
    except ValueError:
        year_number = 0
    return year_number, month_index(month)


def is_same_day(a: datetime, b: datetime) -> bool:
    """Compare calendar days in UTC."""
    return ensure_utc(a).date() == ensure_utc(b).date()


def is_before(timestamp: datetime, reference: datetime) -> bool:
    return ensure_utc(timestamp) < ensure_utc(reference)
