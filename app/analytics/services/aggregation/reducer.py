"""Single-pass grouping of records into keyed accumulators."""

from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import NamedTuple, TypeVar

import structlog

from app.analytics.services.aggregation.bucketing import month_index

logger = structlog.get_logger(__name__)

R = TypeVar("R")
K = TypeVar("K", bound=Hashable)


class Contribution(NamedTuple):
    """What a single record adds to its bucket."""

    count: int = 1
    revenue: float = 0
    tickets: int = 0
    active: int = 0


@dataclass
class Bucket:
    count: int = 0
    revenue: float = 0
    tickets: int = 0
    active: int = 0

    def add(self, contribution: Contribution) -> None:
        self.count += contribution.count
        self.revenue += contribution.revenue
        self.tickets += contribution.tickets
        self.active += contribution.active


def reduce_records(
    records: Iterable[R],
    key_fn: Callable[[R], K],
    contribute: Callable[[R], Contribution],
    seed: Callable[[], Bucket] = Bucket,
) -> dict[K, Bucket]:
    """Fold records into one bucket per key.

    Buckets are created from ``seed`` the first time their key is seen, so the
    result keeps first-seen key order. A record whose key or contribution
    cannot be computed adds nothing and the reduction carries on.
    """
    buckets: dict[K, Bucket] = {}
    for record in records:
        try:
            key = key_fn(record)
            contribution = contribute(record)
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning("record_skipped", error=str(e))
            continue
        bucket = buckets.get(key)
        if bucket is None:
            bucket = buckets[key] = seed()
        bucket.add(contribution)
    return buckets


def count_by(records: Iterable[R], key_fn: Callable[[R], K]) -> dict[K, int]:
    """Count records per key."""
    return {
        key: bucket.count
        for key, bucket in reduce_records(records, key_fn, lambda _: Contribution()).items()
    }


def ordered_by_month(buckets: dict[str, Bucket]) -> list[tuple[str, Bucket]]:
    """Order month-keyed buckets Jan..Dec regardless of insertion order."""
    return sorted(buckets.items(), key=lambda item: month_index(item[0]))
