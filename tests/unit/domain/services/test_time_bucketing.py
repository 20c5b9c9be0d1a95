from __future__ import annotations

from decimal import Decimal

import pytest

from src.domain.entities.analytics import Granularity
from src.domain.services.revenue_aggregator import aggregate_revenue
from src.domain.services.time_bucketing import bucket_revenue
from tests.conftest import utc


def test_day_granularity_emits_all_24_hours(make_order) -> None:
    orders = [
        make_order(total="10.50", created_at=utc(2025, 6, 15, 14, 1)),
        make_order(total="20.25", created_at=utc(2025, 6, 15, 14, 30)),
        make_order(total="5", created_at=utc(2025, 6, 15, 14, 59)),
    ]

    buckets = list(bucket_revenue(orders, Granularity.DAY))

    assert len(buckets) == 24
    assert buckets[0].label == "0:00"
    assert buckets[23].label == "23:00"
    assert buckets[14].revenue == Decimal("35.75")
    assert all(bucket.revenue == 0 for i, bucket in enumerate(buckets) if i != 14)


def test_day_granularity_without_orders_is_all_zero() -> None:
    buckets = list(bucket_revenue([], Granularity.DAY))

    assert len(buckets) == 24
    assert sum(bucket.revenue for bucket in buckets) == 0


@pytest.mark.parametrize(
    "granularity", [Granularity.WEEK, Granularity.MONTH, Granularity.CUSTOM]
)
def test_daily_buckets_are_sparse_and_sorted(make_order, granularity) -> None:
    orders = [
        make_order(total=30, created_at=utc(2025, 6, 12, 8)),
        make_order(total=10, created_at=utc(2025, 6, 9, 20)),
        make_order(total=5, created_at=utc(2025, 6, 12, 22)),
    ]

    buckets = list(bucket_revenue(orders, granularity))

    assert [(bucket.label, bucket.revenue) for bucket in buckets] == [
        ("2025-06-09", Decimal(10)),
        ("2025-06-12", Decimal(35)),
    ]


def test_year_granularity_buckets_by_month(make_order) -> None:
    orders = [
        make_order(total=100, created_at=utc(2024, 12, 31, 23)),
        make_order(total=40, created_at=utc(2025, 1, 2)),
        make_order(total=60, created_at=utc(2025, 1, 28)),
    ]

    buckets = list(bucket_revenue(orders, Granularity.YEAR))

    assert [bucket.label for bucket in buckets] == ["2024-12", "2025-01"]
    assert buckets[1].revenue == Decimal(100)


@pytest.mark.parametrize("granularity", list(Granularity))
def test_bucket_total_matches_aggregate_total(make_order, granularity) -> None:
    orders = [
        make_order(total="19.99", created_at=utc(2025, 6, 15, 1)),
        make_order(total="0.01", created_at=utc(2025, 6, 15, 9)),
        make_order(total="1250", created_at=utc(2025, 6, 15, 23)),
    ]

    buckets = bucket_revenue(orders, granularity)

    assert sum(bucket.revenue for bucket in buckets) == (
        aggregate_revenue(orders).total_revenue
    )
