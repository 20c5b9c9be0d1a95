"""
Use Cases Package - Application Layer

This package contains use cases that orchestrate the order data source and
the financial analytics services to serve each endpoint.
"""

from .forecast_use_cases import GenerateRevenueForecastUseCase
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase
from .report_use_cases import GenerateCustomReportUseCase, GetFinancialReportUseCase
from .revenue_use_cases import GetRevenueStatisticsUseCase

__all__ = [
    "GetRevenueStatisticsUseCase",
    "GenerateRevenueForecastUseCase",
    "GetFinancialReportUseCase",
    "GenerateCustomReportUseCase",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]
