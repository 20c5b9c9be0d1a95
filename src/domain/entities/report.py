"""
Domain Entities - Financial Reports

Each report kind is its own strongly typed variant; the report type string is
resolved once at the boundary into one of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Union

from src.domain.entities.analytics import (
    DailySales,
    MonthlyRevenue,
    PeriodInterval,
    RankedProduct,
)
from src.domain.entities.order import Customer, OrderStatus


class ReportType(str, Enum):
    """Variants served by GET /financial/reports."""

    SUMMARY = "summary"
    DETAILED = "detailed"
    EXPORT = "export"


class CustomReportType(str, Enum):
    """Variants served by POST /financial/reports."""

    SUMMARY = "summary"
    MONTHLY = "monthly"
    PRODUCT = "product"


@dataclass(frozen=True, slots=True)
class OrderStatusCounts:
    completed: int = 0
    pending: int = 0
    processing: int = 0
    cancelled: int = 0


@dataclass(frozen=True, slots=True)
class ReportOrderRow:
    """Per-order line of a detailed report."""

    id: str
    date: datetime
    customer: Optional[Customer]
    amount: Decimal
    status: OrderStatus
    item_count: int


@dataclass(slots=True)
class SummaryReport:
    interval: PeriodInterval
    total_sales: int
    total_revenue: Decimal
    average_order_value: Decimal
    order_status: OrderStatusCounts
    sales_by_date: List[DailySales] = field(default_factory=list)


@dataclass(slots=True)
class DetailedReport(SummaryReport):
    top_products: List[RankedProduct] = field(default_factory=list)
    orders: List[ReportOrderRow] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ExportReport:
    """CSV export of the orders in a report window."""

    interval: PeriodInterval
    filename: str
    content: str
    media_type: str = "text/csv"


FinancialReport = Union[SummaryReport, DetailedReport, ExportReport]


@dataclass(slots=True)
class CustomReport:
    """Result of a filtered custom report request."""

    report_type: CustomReportType
    interval: PeriodInterval
    total_orders: int
    total_revenue: Decimal
    average_order_value: Decimal
    sales_by_status: Dict[OrderStatus, Decimal] = field(default_factory=dict)
    order_counts: Dict[OrderStatus, int] = field(default_factory=dict)
    sales_by_month: List[MonthlyRevenue] = field(default_factory=list)
    product_performance: List[RankedProduct] = field(default_factory=list)
