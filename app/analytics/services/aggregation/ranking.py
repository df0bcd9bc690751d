"""Top-N selection."""

from collections.abc import Callable, Iterable
from typing import TypeVar

R = TypeVar("R")


def top_n(records: Iterable[R], metric: Callable[[R], float], n: int) -> list[R]:
    """Return the ``n`` records with the highest metric, highest first.

    Ties keep their input order, so repeated calls over the same input give
    the same ranking.
    """
    if n <= 0:
        return []
    return sorted(records, key=metric, reverse=True)[:n]
