"""Comparative Growth Calculator - Domain Service."""

from __future__ import annotations

from decimal import Decimal

from src.domain.entities.analytics import GrowthComparison, RevenueAggregate

HUNDRED = Decimal(100)


def compare_growth(
    current: RevenueAggregate, previous: RevenueAggregate
) -> GrowthComparison:
    """
    Compute period-over-period growth in percent.

    A previous total of zero yields a growth of ``0`` rather than an infinite
    or undefined value, whatever the current total is.
    """
    current_total = current.total_revenue
    previous_total = previous.total_revenue

    growth = Decimal(0)
    if previous_total > 0:
        growth = (current_total - previous_total) / previous_total * HUNDRED

    return GrowthComparison(
        current_total=current_total,
        previous_total=previous_total,
        growth_pct=growth,
    )
