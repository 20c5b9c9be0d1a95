"""
Report Builder - Domain Service

Builds the financial report variants from an order set. The report type is
resolved once by the caller; each builder returns its own typed variant.
"""

from __future__ import annotations

import csv
import io
from typing import Sequence

from src.domain.entities.analytics import PeriodInterval
from src.domain.entities.order import Order
from src.domain.entities.report import (
    CustomReport,
    CustomReportType,
    DetailedReport,
    ExportReport,
    ReportOrderRow,
    SummaryReport,
)
from src.domain.services.money import round_money
from src.domain.services.product_ranker import rank_top_products
from src.domain.services.revenue_aggregator import (
    aggregate_revenue,
    count_by_status,
    revenue_by_month,
    sales_by_date,
    status_counts,
)

CSV_HEADER = (
    "Order ID",
    "Date",
    "Customer Name",
    "Customer Email",
    "Status",
    "Total Amount",
    "Items",
)
UNKNOWN_CUSTOMER = "Unknown"


def build_summary_report(
    orders: Sequence[Order], interval: PeriodInterval
) -> SummaryReport:
    aggregate = aggregate_revenue(orders)
    return SummaryReport(
        interval=interval,
        total_sales=aggregate.order_count,
        total_revenue=aggregate.total_revenue,
        average_order_value=aggregate.average_order_value,
        order_status=status_counts(orders),
        sales_by_date=sales_by_date(orders),
    )


def build_detailed_report(
    orders: Sequence[Order], interval: PeriodInterval, top_products_limit: int = 10
) -> DetailedReport:
    summary = build_summary_report(orders, interval)
    return DetailedReport(
        interval=summary.interval,
        total_sales=summary.total_sales,
        total_revenue=summary.total_revenue,
        average_order_value=summary.average_order_value,
        order_status=summary.order_status,
        sales_by_date=summary.sales_by_date,
        top_products=rank_top_products(orders, top_products_limit),
        orders=[
            ReportOrderRow(
                id=order.id,
                date=order.created_at,
                customer=order.customer,
                amount=order.total_amount,
                status=order.status,
                item_count=len(order.items),
            )
            for order in orders
        ],
    )


def export_filename(interval: PeriodInterval) -> str:
    start = interval.start.strftime("%Y-%m-%d")
    end = interval.end.strftime("%Y-%m-%d")
    return f"financial-report-{start}-to-{end}.csv"


def build_export_report(
    orders: Sequence[Order], interval: PeriodInterval
) -> ExportReport:
    """One CSV row per order, amounts with two decimals."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)

    for order in orders:
        customer = order.customer
        writer.writerow(
            (
                order.id,
                order.created_at.isoformat().replace("+00:00", "Z"),
                (customer.name if customer else None) or UNKNOWN_CUSTOMER,
                (customer.email if customer else None) or UNKNOWN_CUSTOMER,
                order.status.value,
                f"{round_money(order.total_amount):.2f}",
                len(order.items),
            )
        )

    return ExportReport(
        interval=interval,
        filename=export_filename(interval),
        content=buffer.getvalue().rstrip("\n"),
    )


def build_custom_report(
    orders: Sequence[Order],
    interval: PeriodInterval,
    report_type: CustomReportType,
) -> CustomReport:
    aggregate = aggregate_revenue(orders)
    report = CustomReport(
        report_type=report_type,
        interval=interval,
        total_orders=aggregate.order_count,
        total_revenue=aggregate.total_revenue,
        average_order_value=aggregate.average_order_value,
    )

    if report_type is CustomReportType.PRODUCT:
        report.product_performance = rank_top_products(orders, limit=None)
        return report

    report.sales_by_status = dict(aggregate.revenue_by_status)
    if report_type is CustomReportType.MONTHLY:
        report.sales_by_month = revenue_by_month(orders)
    else:
        report.order_counts = count_by_status(orders)
    return report
