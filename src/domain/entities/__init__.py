"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .analytics import (
    DailySales,
    ForecastPoint,
    Granularity,
    GrowthComparison,
    MonthlyRevenue,
    PeriodInterval,
    QuarterlyForecast,
    RankedProduct,
    ResolvedPeriod,
    RevenueAggregate,
    RevenueBucket,
    RevenueForecast,
    RevenueStatistics,
)
from .auth import Principal
from .errors import (
    DomainError,
    ForbiddenError,
    InvalidDateRangeError,
    OrderDataSourceError,
    UnauthorizedError,
)
from .health import ApplicationInfo, DependencyStatus, ServiceStatus, SystemHealth
from .order import (
    QUALIFYING_STATUSES,
    Customer,
    Order,
    OrderFilters,
    OrderLineItem,
    OrderStatus,
    ProductType,
)
from .report import (
    CustomReport,
    CustomReportType,
    DetailedReport,
    ExportReport,
    FinancialReport,
    OrderStatusCounts,
    ReportOrderRow,
    ReportType,
    SummaryReport,
)

__all__ = [
    "Order",
    "OrderLineItem",
    "OrderStatus",
    "OrderFilters",
    "ProductType",
    "Customer",
    "QUALIFYING_STATUSES",
    "Granularity",
    "PeriodInterval",
    "ResolvedPeriod",
    "RevenueAggregate",
    "RevenueBucket",
    "GrowthComparison",
    "RankedProduct",
    "DailySales",
    "MonthlyRevenue",
    "ForecastPoint",
    "QuarterlyForecast",
    "RevenueForecast",
    "RevenueStatistics",
    "ReportType",
    "CustomReportType",
    "OrderStatusCounts",
    "ReportOrderRow",
    "SummaryReport",
    "DetailedReport",
    "ExportReport",
    "FinancialReport",
    "CustomReport",
    "Principal",
    "SystemHealth",
    "DependencyStatus",
    "ServiceStatus",
    "ApplicationInfo",
    "DomainError",
    "UnauthorizedError",
    "ForbiddenError",
    "InvalidDateRangeError",
    "OrderDataSourceError",
]
