"""Use case projecting future revenue from the last year of orders."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Callable, List

from dateutil.relativedelta import relativedelta

from src.application.dtos.forecast_dto import ForecastRequestDTO, ForecastResponseDTO
from src.domain.entities.order import QUALIFYING_STATUSES, Order
from src.domain.repositories.order_repository import IOrderRepository
from src.domain.services.forecast_projector import (
    DEFAULT_BASELINE,
    build_monthly_history,
    project_forecast,
    resolve_baseline,
)
from src.domain.services.money import to_decimal
from src.shared import get_logger
from src.shared.clock import utc_now

logger = get_logger(__name__)

HISTORY_WINDOW = relativedelta(years=1)


class GenerateRevenueForecastUseCase:
    """Project monthly, quarterly and annual revenue."""

    def __init__(
        self,
        order_repository: IOrderRepository,
        *,
        fallback_order_count: int = 10,
        default_baseline: Decimal = DEFAULT_BASELINE,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._order_repository = order_repository
        self._fallback_order_count = fallback_order_count
        self._default_baseline = to_decimal(default_baseline)
        self._clock = clock

    async def execute(self, request: ForecastRequestDTO) -> ForecastResponseDTO:
        now = self._clock()

        orders = await self._order_repository.find_since(
            now - HISTORY_WINDOW, QUALIFYING_STATUSES
        )
        history = build_monthly_history(orders)

        recent_orders: List[Order] = []
        if not history:
            recent_orders = await self._order_repository.find_recent(
                QUALIFYING_STATUSES, self._fallback_order_count
            )

        baseline = resolve_baseline(history, recent_orders, self._default_baseline)
        forecast = project_forecast(
            baseline=baseline,
            months=request.forecast_period,
            monthly_growth_pct=to_decimal(request.growth_rate),
            seasonal_factors=request.seasonal_factors_by_month(),
            now=now,
        )

        logger.info(
            "financial.forecast.generated",
            history_months=len(history),
            fallback_orders=len(recent_orders),
            months=request.forecast_period,
            growth_rate=request.growth_rate,
            annual_projection=str(forecast.annual_projection),
        )
        return ForecastResponseDTO.from_domain(forecast, request, history)
