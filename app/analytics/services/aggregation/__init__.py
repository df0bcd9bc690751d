"""Reusable building blocks for the reporting endpoints.

- bucketing: Timestamp resolution and month labels
- reducer: Single-pass grouping of records into buckets
- metrics: Rates, averages and half-up rounding
- ranking: Stable top-N selection
"""

from app.analytics.services.aggregation.bucketing import (
    MONTH_LABELS,
    is_before,
    is_same_day,
    month_label,
    month_year_label,
    month_year_sort_key,
    resolve_timestamp,
)
from app.analytics.services.aggregation.metrics import (
    average,
    average_price,
    conversion_rate,
    occupancy,
    percentage,
    round_half_up,
    sellout_rate,
)
from app.analytics.services.aggregation.ranking import top_n
from app.analytics.services.aggregation.reducer import (
    Bucket,
    Contribution,
    count_by,
    ordered_by_month,
    reduce_records,
)

__all__ = [
    # Bucketing
    "MONTH_LABELS",
    "resolve_timestamp",
    "month_label",
    "month_year_label",
    "month_year_sort_key",
    "is_before",
    "is_same_day",
    # Reduction
    "Bucket",
    "Contribution",
    "reduce_records",
    "count_by",
    "ordered_by_month",
    # Metrics
    "round_half_up",
    "conversion_rate",
    "sellout_rate",
    "occupancy",
    "average_price",
    "average",
    "percentage",
    # Ranking
    "top_n",
]
