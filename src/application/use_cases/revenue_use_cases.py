"""Use case computing revenue statistics for a requested period."""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Callable, Optional

from src.application.dtos.revenue_dto import RevenueStatisticsDTO
from src.domain.entities.analytics import Granularity, RevenueStatistics
from src.domain.repositories.order_repository import IOrderRepository
from src.domain.services.growth_calculator import compare_growth
from src.domain.services.period_resolver import parse_instant, resolve_period
from src.domain.services.product_ranker import DEFAULT_TOP_PRODUCTS, rank_top_products
from src.domain.services.revenue_aggregator import aggregate_revenue
from src.domain.services.time_bucketing import bucket_revenue
from src.shared import get_logger
from src.shared.clock import utc_now

logger = get_logger(__name__)


class GetRevenueStatisticsUseCase:
    """Aggregate, bucket, rank and compare revenue for one period."""

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
        granularity: Granularity,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> RevenueStatisticsDTO:
        """
        Compute the revenue statistics of the current period.

        ``start`` and ``end`` only apply to the ``custom`` granularity and are
        parsed before any order is fetched.

        Raises:
            InvalidDateRangeError: When a custom date is unparseable or the
                custom end is not after its start
            OrderDataSourceError: When orders cannot be fetched
        """
        custom_start = custom_end = None
        if granularity is Granularity.CUSTOM:
            custom_start = parse_instant(start, "start") if start else None
            custom_end = parse_instant(end, "end") if end else None

        period = resolve_period(granularity, self._clock(), custom_start, custom_end)

        current_orders, previous_orders = await asyncio.gather(
            self._order_repository.find_in_period(period.current),
            self._order_repository.find_in_period(period.previous),
        )

        aggregate = aggregate_revenue(current_orders)
        statistics = RevenueStatistics(
            period=period,
            aggregate=aggregate,
            revenue_over_time=list(bucket_revenue(current_orders, granularity)),
            comparison=compare_growth(aggregate, aggregate_revenue(previous_orders)),
            top_products=rank_top_products(current_orders, self._top_products_limit),
        )

        logger.info(
            "financial.revenue.computed",
            period=granularity.value,
            start=period.current.start.isoformat(),
            end=period.current.end.isoformat(),
            order_count=aggregate.order_count,
            previous_order_count=len(previous_orders),
        )
        return RevenueStatisticsDTO.from_domain(statistics)
