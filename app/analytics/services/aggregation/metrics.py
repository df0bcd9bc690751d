"""Derived metrics computed from aggregated totals.

Every function here is total: a zero or missing denominator yields ``0``
instead of raising, and rounding is half-up (``2.5 -> 3``), not banker's.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero at ``digits`` decimal places."""
    if not math.isfinite(value):
        return 0.0
    try:
        quantum = Decimal(1).scaleb(-digits)
        return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return 0.0


def _ratio(part: float, whole: float) -> float:
    if not whole:
        return 0.0
    return part / whole


def conversion_rate(tickets_sold: int, total_users: int) -> float:
    """Tickets sold per registered user, as a percentage with one decimal."""
    return round_half_up(_ratio(tickets_sold, total_users) * 100, 1)


def sellout_rate(tickets_available: int, tickets_sold: int) -> int:
    """Share of offered tickets that were sold, as a whole percentage."""
    return int(round_half_up(_ratio(tickets_sold, tickets_available) * 100))


def occupancy(tickets_sold: int, capacity: int) -> int:
    """Seats filled as a whole percentage, capped at 100."""
    return min(int(round_half_up(_ratio(tickets_sold, capacity) * 100)), 100)


def average_price(revenue: float, tickets_sold: int) -> float:
    """Average ticket price with two decimals."""
    return round_half_up(_ratio(revenue, tickets_sold), 2)


def average(total: float, count: int) -> int:
    return int(round_half_up(_ratio(total, count)))


def percentage(part: int, whole: int) -> int:
    return int(round_half_up(_ratio(part, whole) * 100))
