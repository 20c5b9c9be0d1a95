"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer. JSON keys are
camelCase.
"""

from .base import CamelModel
from .forecast_dto import ForecastRequestDTO, ForecastResponseDTO
from .health_dto import ApplicationInfoDTO, DependencyStatusDTO, SystemHealthDTO
from .report_dto import (
    CustomReportDTO,
    CustomReportFiltersDTO,
    CustomReportRequestDTO,
    DetailedReportDTO,
    ExportFileDTO,
    FinancialReportDTO,
    SummaryReportDTO,
)
from .revenue_dto import RevenueStatisticsDTO, TopProductDTO

__all__ = [
    "CamelModel",
    "RevenueStatisticsDTO",
    "TopProductDTO",
    "ForecastRequestDTO",
    "ForecastResponseDTO",
    "SummaryReportDTO",
    "DetailedReportDTO",
    "ExportFileDTO",
    "FinancialReportDTO",
    "CustomReportRequestDTO",
    "CustomReportFiltersDTO",
    "CustomReportDTO",
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "ApplicationInfoDTO",
]
