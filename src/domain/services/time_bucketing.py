"""
Time-Bucketing Engine - Domain Service

Re-groups an order set into an ordered series of (label, revenue) buckets
whose grain follows the requested granularity:

- ``day``: hour of day, all 24 buckets always present (``"0:00"`` .. ``"23:00"``)
- ``week`` / ``month`` / ``custom``: calendar day ``yyyy-mm-dd``, sparse
- ``year``: calendar month ``yyyy-mm``, sparse

Sparse series only contain buckets with at least one order and are sorted by
label, which is chronological for these zero-padded formats.
"""

from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, Iterator

from src.domain.entities.analytics import Granularity, RevenueBucket
from src.domain.entities.order import Order

HOURS_IN_DAY = 24

_SPARSE_FORMATS = {
    Granularity.WEEK: "%Y-%m-%d",
    Granularity.MONTH: "%Y-%m-%d",
    Granularity.CUSTOM: "%Y-%m-%d",
    Granularity.YEAR: "%Y-%m",
}


def _hourly(orders: Iterable[Order]) -> Iterator[RevenueBucket]:
    by_hour = [Decimal(0)] * HOURS_IN_DAY
    for order in orders:
        by_hour[order.created_at.hour] += order.total_amount

    for hour, revenue in enumerate(by_hour):
        yield RevenueBucket(label=f"{hour}:00", revenue=revenue)


def _sparse(orders: Iterable[Order], label_format: str) -> Iterator[RevenueBucket]:
    totals: Dict[str, Decimal] = defaultdict(Decimal)
    for order in orders:
        totals[order.created_at.strftime(label_format)] += order.total_amount

    for label in sorted(totals):
        yield RevenueBucket(label=label, revenue=totals[label])


def bucket_revenue(
    orders: Iterable[Order], granularity: Granularity
) -> Iterator[RevenueBucket]:
    """Lazily produce the revenue series for ``orders`` at ``granularity``."""
    if granularity is Granularity.DAY:
        return _hourly(orders)
    return _sparse(orders, _SPARSE_FORMATS[granularity])
