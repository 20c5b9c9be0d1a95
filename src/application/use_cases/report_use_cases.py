"""Use cases generating financial reports over an order window."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from dateutil.relativedelta import relativedelta

from src.application.dtos.report_dto import (
    CustomReportDTO,
    CustomReportRequestDTO,
    DetailedReportDTO,
    ExportFileDTO,
    FinancialReportDTO,
    SummaryReportDTO,
)
from src.domain.entities.analytics import PeriodInterval
from src.domain.entities.report import ReportType
from src.domain.repositories.order_repository import IOrderRepository
from src.domain.services.period_resolver import parse_instant
from src.domain.services.product_ranker import DEFAULT_TOP_PRODUCTS
from src.domain.services.report_builder import (
    build_custom_report,
    build_detailed_report,
    build_export_report,
    build_summary_report,
)
from src.shared import get_logger
from src.shared.clock import utc_now

logger = get_logger(__name__)

DEFAULT_REPORT_WINDOW = relativedelta(months=1)


def resolve_report_interval(
    start_date: Optional[str], end_date: Optional[str], now: datetime
) -> PeriodInterval:
    """Window of a report; defaults to the month ending at ``now``."""
    end = parse_instant(end_date, "endDate") if end_date else now
    start = (
        parse_instant(start_date, "startDate")
        if start_date
        else now - DEFAULT_REPORT_WINDOW
    )
    return PeriodInterval(start, end)


class GetFinancialReportUseCase:
    """Build a summary, detailed or CSV export report."""

    def __init__(
        self,
        order_repository: IOrderRepository,
        *,
        top_products_limit: int = DEFAULT_TOP_PRODUCTS,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._order_repository = order_repository
        self._top_products_limit = top_products_limit
        self._clock = clock

    async def execute(
        self,
        report_type: ReportType,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> FinancialReportDTO:
        interval = resolve_report_interval(start_date, end_date, self._clock())
        orders = await self._order_repository.find_in_period(
            interval, newest_first=True
        )

        logger.info(
            "financial.report.generated",
            report_type=report_type.value,
            start=interval.start.isoformat(),
            end=interval.end.isoformat(),
            order_count=len(orders),
        )

        if report_type is ReportType.EXPORT:
            return ExportFileDTO.from_domain(build_export_report(orders, interval))
        if report_type is ReportType.DETAILED:
            return DetailedReportDTO.from_domain(
                build_detailed_report(orders, interval, self._top_products_limit)
            )
        return SummaryReportDTO.from_domain(build_summary_report(orders, interval))


class GenerateCustomReportUseCase:
    """Build a filtered summary, monthly or product report."""

    def __init__(
        self,
        order_repository: IOrderRepository,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._order_repository = order_repository
        self._clock = clock

    async def execute(self, request: CustomReportRequestDTO) -> CustomReportDTO:
        interval = resolve_report_interval(
            request.start_date, request.end_date, self._clock()
        )
        filters = request.filters.to_domain()
        orders = await self._order_repository.find_in_period(
            interval, filters=filters, newest_first=True
        )

        logger.info(
            "financial.custom_report.generated",
            report_type=request.report_type.value,
            start=interval.start.isoformat(),
            end=interval.end.isoformat(),
            statuses=[status.value for status in filters.statuses],
            order_count=len(orders),
        )
        return CustomReportDTO.from_domain(
            build_custom_report(orders, interval, request.report_type)
        )
