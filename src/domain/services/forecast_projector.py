"""
Forecast Projector - Domain Service

Projects monthly revenue forward from a baseline using compounding monthly
growth and optional per-calendar-month seasonal multipliers, then rolls the
projection up into quarters and a total.

Seasonal factors scale the emitted value of a month only; the running value
that compounds into the following month is the unseasonalised one. Values are
rounded to cents when emitted, never mid-calculation.
"""

from __future__ import annotations

import math
from collections import defaultdict
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Mapping, Sequence

from dateutil.relativedelta import relativedelta

from src.domain.entities.analytics import (
    ForecastPoint,
    MonthlyRevenue,
    QuarterlyForecast,
    RevenueForecast,
)
from src.domain.entities.order import QUALIFYING_STATUSES, Order
from src.domain.services.money import money_sum, round_money, to_decimal
from src.domain.services.revenue_aggregator import revenue_by_month

DEFAULT_BASELINE = Decimal(1000)
DAYS_PER_MONTH = 30
ONE = Decimal(1)
HUNDRED = Decimal(100)


def build_monthly_history(orders: Sequence[Order]) -> List[MonthlyRevenue]:
    """Monthly revenue of qualifying (completed or processing) orders."""
    return revenue_by_month(
        [order for order in orders if order.status in QUALIFYING_STATUSES]
    )


def resolve_baseline(
    history: Sequence[MonthlyRevenue],
    recent_orders: Sequence[Order] = (),
    default: Decimal = DEFAULT_BASELINE,
) -> Decimal:
    """
    Pick the monthly revenue the projection grows from.

    Mean of the historical months when there are any; otherwise the mean
    value of the given recent orders scaled to a month; otherwise ``default``.
    """
    if history:
        return money_sum(month.revenue for month in history) / len(history)

    if recent_orders:
        mean_order = money_sum(order.total_amount for order in recent_orders) / len(
            recent_orders
        )
        return mean_order * DAYS_PER_MONTH

    return to_decimal(default)


def _quarter_label(month_label: str) -> str:
    year, month = month_label.split("-")
    return f"{year}-Q{math.ceil(int(month) / 3)}"


def rollup_quarters(monthly: Sequence[ForecastPoint]) -> List[QuarterlyForecast]:
    quarters: Dict[str, Decimal] = defaultdict(Decimal)
    for point in monthly:
        quarters[_quarter_label(point.month)] += point.projected_revenue

    return [
        QuarterlyForecast(quarter=quarter, projected_revenue=round_money(revenue))
        for quarter, revenue in quarters.items()
    ]


def project_forecast(
    baseline: Decimal,
    months: int,
    monthly_growth_pct: Decimal,
    seasonal_factors: Mapping[int, Decimal],
    now: datetime,
) -> RevenueForecast:
    """
    Produce ``months`` future monthly projections after ``now``.

    Args:
        baseline: Starting monthly revenue
        months: Number of months to project; ``<= 0`` yields an empty forecast
        monthly_growth_pct: Compounding growth per month, in percent
        seasonal_factors: Multiplier per calendar month number (1-12)
        now: Reference instant; the first projected month is the next one

    Returns:
        Monthly points, quarterly rollup and the annual total
    """
    growth = ONE + to_decimal(monthly_growth_pct) / HUNDRED
    first_of_month = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

    running = to_decimal(baseline)
    monthly: List[ForecastPoint] = []
    for step in range(1, months + 1):
        point_date = first_of_month + relativedelta(months=step)
        running *= growth
        factor = to_decimal(seasonal_factors.get(point_date.month, ONE))
        monthly.append(
            ForecastPoint(
                month=point_date.strftime("%Y-%m"),
                projected_revenue=round_money(running * factor),
            )
        )

    return RevenueForecast(
        baseline_monthly_revenue=to_decimal(baseline),
        monthly=monthly,
        quarterly=rollup_quarters(monthly),
        annual_projection=round_money(
            money_sum(point.projected_revenue for point in monthly)
        ),
    )
