"""
Forecast DTOs - Application Layer

Request and response payloads of ``POST /financial/forecast``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Dict, List

from pydantic import Field, field_validator

from src.application.dtos.base import CamelModel
from src.domain.entities.analytics import MonthlyRevenue, RevenueForecast
from src.domain.services.money import to_decimal, to_json_number

MAX_FORECAST_MONTHS = 120
MIN_GROWTH_RATE = -100.0
MAX_GROWTH_RATE = 1000.0
MAX_SEASONAL_FACTOR = 100.0

SeasonalFactor = Annotated[
    float, Field(ge=0, le=MAX_SEASONAL_FACTOR, allow_inf_nan=False)
]


class ForecastRequestDTO(CamelModel):
    """DTO for requesting a revenue forecast."""

    forecast_period: int = Field(
        12,
        description="Number of future months to project; zero or less yields none",
        le=MAX_FORECAST_MONTHS,
    )
    growth_rate: float = Field(
        5.0,
        description="Compounding monthly growth, in percent",
        ge=MIN_GROWTH_RATE,
        le=MAX_GROWTH_RATE,
        allow_inf_nan=False,
    )
    seasonal_factors: Dict[str, SeasonalFactor] = Field(
        default_factory=dict,
        description="Multiplier per calendar month number (\"1\" to \"12\")",
    )

    @field_validator("seasonal_factors")
    @classmethod
    def validate_seasonal_factors(cls, value: Dict[str, float]) -> Dict[str, float]:
        normalized: Dict[str, float] = {}
        for key, factor in value.items():
            try:
                month = int(key)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Seasonal factor key {key!r} is not a month") from exc
            if not 1 <= month <= 12:
                raise ValueError(f"Seasonal factor month {month} is outside 1-12")
            normalized[str(month)] = factor
        return normalized

    def seasonal_factors_by_month(self) -> Dict[int, Decimal]:
        return {
            int(month): to_decimal(factor)
            for month, factor in self.seasonal_factors.items()
        }

    model_config = {
        "json_schema_extra": {
            "example": {
                "forecastPeriod": 6,
                "growthRate": 4.5,
                "seasonalFactors": {"11": 1.3, "12": 1.6},
            }
        }
    }


class HistoricalMonthDTO(CamelModel):
    month: str
    revenue: float

    @classmethod
    def from_domain(cls, month: MonthlyRevenue) -> "HistoricalMonthDTO":
        return cls(month=month.month, revenue=to_json_number(month.revenue))


class MonthlyForecastDTO(CamelModel):
    month: str
    projected_revenue: float


class QuarterlyForecastDTO(CamelModel):
    quarter: str
    projected_revenue: float


class ForecastResponseDTO(CamelModel):
    """DTO for the revenue forecast response."""

    baseline_monthly_revenue: float
    growth_assumption: str
    seasonal_factors: Dict[str, float] = Field(default_factory=dict)
    historical_data: List[HistoricalMonthDTO] = Field(default_factory=list)
    monthly_forecast: List[MonthlyForecastDTO] = Field(default_factory=list)
    quarterly_forecast: List[QuarterlyForecastDTO] = Field(default_factory=list)
    annual_projection: float
    forecast_period: str

    @classmethod
    def from_domain(
        cls,
        forecast: RevenueForecast,
        request: ForecastRequestDTO,
        history: List[MonthlyRevenue],
    ) -> "ForecastResponseDTO":
        return cls(
            baseline_monthly_revenue=to_json_number(forecast.baseline_monthly_revenue),
            growth_assumption=f"{request.growth_rate:g}% monthly growth",
            seasonal_factors=dict(request.seasonal_factors),
            historical_data=[HistoricalMonthDTO.from_domain(month) for month in history],
            monthly_forecast=[
                MonthlyForecastDTO(
                    month=point.month,
                    projected_revenue=to_json_number(point.projected_revenue),
                )
                for point in forecast.monthly
            ],
            quarterly_forecast=[
                QuarterlyForecastDTO(
                    quarter=quarter.quarter,
                    projected_revenue=to_json_number(quarter.projected_revenue),
                )
                for quarter in forecast.quarterly
            ],
            annual_projection=to_json_number(forecast.annual_projection),
            forecast_period=f"{request.forecast_period} months",
        )
