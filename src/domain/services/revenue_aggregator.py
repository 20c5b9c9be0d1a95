"""
Revenue Aggregator - Domain Service

Reduces an order set into totals and independent status / product-type
breakdowns. Pure function of its input.
"""

from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence

from src.domain.entities.analytics import DailySales, MonthlyRevenue, RevenueAggregate
from src.domain.entities.order import Order, OrderStatus
from src.domain.entities.report import OrderStatusCounts


def aggregate_revenue(orders: Iterable[Order]) -> RevenueAggregate:
    """
    Aggregate an order set.

    The total covers every order regardless of status. The status map
    partitions orders by their status; the product-type map descends into
    every line item and sums ``unit_price * quantity`` by the item's tag, so a
    single order can feed several product-type buckets.
    """
    aggregate = RevenueAggregate()

    for order in orders:
        aggregate.order_count += 1
        aggregate.total_revenue += order.total_amount
        aggregate.revenue_by_status[order.status] += order.total_amount
        for item in order.items:
            aggregate.revenue_by_product_type[item.product_type] += item.line_revenue

    return aggregate


def count_by_status(orders: Iterable[Order]) -> Dict[OrderStatus, int]:
    counts = {status: 0 for status in OrderStatus}
    for order in orders:
        counts[order.status] += 1
    return counts


def status_counts(orders: Iterable[Order]) -> OrderStatusCounts:
    counts = count_by_status(orders)
    return OrderStatusCounts(
        completed=counts[OrderStatus.COMPLETED],
        pending=counts[OrderStatus.PENDING],
        processing=counts[OrderStatus.PROCESSING],
        cancelled=counts[OrderStatus.CANCELLED],
    )


def sales_by_date(orders: Iterable[Order]) -> List[DailySales]:
    """Order count and revenue per yyyy-mm-dd day, chronologically sorted."""
    counts: Dict[str, int] = defaultdict(int)
    revenue: Dict[str, Decimal] = defaultdict(Decimal)

    for order in orders:
        day = order.created_at.strftime("%Y-%m-%d")
        counts[day] += 1
        revenue[day] += order.total_amount

    return [
        DailySales(date=day, count=counts[day], revenue=revenue[day])
        for day in sorted(counts)
    ]


def revenue_by_month(orders: Sequence[Order]) -> List[MonthlyRevenue]:
    """Total revenue per yyyy-mm month, chronologically sorted."""
    monthly: Dict[str, Decimal] = defaultdict(Decimal)
    for order in orders:
        monthly[order.created_at.strftime("%Y-%m")] += order.total_amount

    return [
        MonthlyRevenue(month=month, revenue=monthly[month])
        for month in sorted(monthly)
    ]
