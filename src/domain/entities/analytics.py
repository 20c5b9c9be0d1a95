"""
Domain Entities - Financial Analytics

Request-scoped value objects produced by the analytics services. They are
created fresh per call and carry no identity beyond their containing response.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Dict, List

from src.domain.entities.errors import InvalidDateRangeError
from src.domain.entities.order import OrderStatus, ProductType


class Granularity(str, Enum):
    """Requested period size governing both fetch window and bucket grain."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class PeriodInterval:
    """Half-open instant range [start, end)."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise InvalidDateRangeError(
                "Period end must be after period start",
                details={
                    "start": self.start.isoformat(),
                    "end": self.end.isoformat(),
                },
            )

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant < self.end

    @property
    def span(self) -> timedelta:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class ResolvedPeriod:
    """Current window plus the preceding comparison window."""

    granularity: Granularity
    current: PeriodInterval
    previous: PeriodInterval


def _zero_by_status() -> Dict[OrderStatus, Decimal]:
    return {status: Decimal(0) for status in OrderStatus}


def _zero_by_product_type() -> Dict[ProductType, Decimal]:
    return {product_type: Decimal(0) for product_type in ProductType}


@dataclass(slots=True)
class RevenueAggregate:
    """Roll-up of an order set; breakdown maps are always fully keyed."""

    total_revenue: Decimal = Decimal(0)
    order_count: int = 0
    revenue_by_status: Dict[OrderStatus, Decimal] = field(
        default_factory=_zero_by_status
    )
    revenue_by_product_type: Dict[ProductType, Decimal] = field(
        default_factory=_zero_by_product_type
    )

    @property
    def average_order_value(self) -> Decimal:
        if self.order_count == 0:
            return Decimal(0)
        return self.total_revenue / self.order_count


@dataclass(frozen=True, slots=True)
class RevenueBucket:
    """One (label, revenue) point of a bucketed series."""

    label: str
    revenue: Decimal


@dataclass(frozen=True, slots=True)
class GrowthComparison:
    """Current versus previous period totals with signed growth percentage."""

    current_total: Decimal
    previous_total: Decimal
    growth_pct: Decimal


@dataclass(slots=True)
class RankedProduct:
    """Aggregated sales of one (product type, product id) pair."""

    product_id: str
    product_name: str
    product_type: ProductType
    quantity: int = 0
    revenue: Decimal = Decimal(0)


@dataclass(frozen=True, slots=True)
class DailySales:
    """Order count and revenue for one calendar day."""

    date: str
    count: int
    revenue: Decimal


@dataclass(frozen=True, slots=True)
class MonthlyRevenue:
    """Historical revenue for one yyyy-mm month."""

    month: str
    revenue: Decimal


@dataclass(frozen=True, slots=True)
class ForecastPoint:
    """Projected revenue for one future yyyy-mm month, rounded at emission."""

    month: str
    projected_revenue: Decimal


@dataclass(frozen=True, slots=True)
class QuarterlyForecast:
    """Projected revenue for one yyyy-Qn quarter."""

    quarter: str
    projected_revenue: Decimal


@dataclass(slots=True)
class RevenueForecast:
    """Output of the forecast projector."""

    baseline_monthly_revenue: Decimal
    monthly: List[ForecastPoint] = field(default_factory=list)
    quarterly: List[QuarterlyForecast] = field(default_factory=list)
    annual_projection: Decimal = Decimal("0.00")


@dataclass(slots=True)
class RevenueStatistics:
    """Everything the revenue endpoint reports for one request."""

    period: ResolvedPeriod
    aggregate: RevenueAggregate
    revenue_over_time: List[RevenueBucket]
    comparison: GrowthComparison
    top_products: List[RankedProduct]
