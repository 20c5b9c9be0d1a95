"""
Report DTOs - Application Layer

Payloads of the ``/financial/reports`` endpoints. Each report variant has its
own DTO; the CSV export is carried as a file descriptor rather than JSON.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from src.application.dtos.base import CamelModel
from src.application.dtos.revenue_dto import TopProductDTO
from src.domain.entities.order import OrderFilters, OrderStatus
from src.domain.entities.report import (
    CustomReport,
    CustomReportType,
    DetailedReport,
    ExportReport,
    OrderStatusCounts,
    ReportOrderRow,
    SummaryReport,
)
from src.domain.services.money import to_decimal, to_json_number


class OrderStatusCountsDTO(CamelModel):
    completed: int = 0
    pending: int = 0
    processing: int = 0
    cancelled: int = 0

    @classmethod
    def from_domain(cls, counts: OrderStatusCounts) -> "OrderStatusCountsDTO":
        return cls(
            completed=counts.completed,
            pending=counts.pending,
            processing=counts.processing,
            cancelled=counts.cancelled,
        )


class DailySalesDTO(CamelModel):
    date: str
    count: int
    revenue: float


class ReportCustomerDTO(CamelModel):
    id: str
    name: Optional[str] = None
    email: Optional[str] = None


class ReportOrderDTO(CamelModel):
    id: str
    date: datetime
    customer: Optional[ReportCustomerDTO] = None
    amount: float
    status: OrderStatus
    item_count: int

    @classmethod
    def from_domain(cls, row: ReportOrderRow) -> "ReportOrderDTO":
        customer = None
        if row.customer is not None:
            customer = ReportCustomerDTO(
                id=row.customer.id, name=row.customer.name, email=row.customer.email
            )
        return cls(
            id=row.id,
            date=row.date,
            customer=customer,
            amount=to_json_number(row.amount),
            status=row.status,
            item_count=row.item_count,
        )


class SummaryReportDTO(CamelModel):
    """DTO for the summary financial report."""

    report_type: Literal["summary"] = "summary"
    start_date: datetime
    end_date: datetime
    total_sales: int
    total_revenue: float
    average_order_value: float
    order_status: OrderStatusCountsDTO
    sales_by_date: List[DailySalesDTO] = Field(default_factory=list)

    @classmethod
    def _summary_fields(cls, report: SummaryReport) -> Dict[str, object]:
        return {
            "start_date": report.interval.start,
            "end_date": report.interval.end,
            "total_sales": report.total_sales,
            "total_revenue": to_json_number(report.total_revenue),
            "average_order_value": to_json_number(report.average_order_value),
            "order_status": OrderStatusCountsDTO.from_domain(report.order_status),
            "sales_by_date": [
                DailySalesDTO(
                    date=day.date, count=day.count, revenue=to_json_number(day.revenue)
                )
                for day in report.sales_by_date
            ],
        }

    @classmethod
    def from_domain(cls, report: SummaryReport) -> "SummaryReportDTO":
        return cls(**cls._summary_fields(report))


class DetailedReportDTO(SummaryReportDTO):
    """DTO for the detailed financial report."""

    report_type: Literal["detailed"] = "detailed"
    top_products: List[TopProductDTO] = Field(default_factory=list)
    orders: List[ReportOrderDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, report: DetailedReport) -> "DetailedReportDTO":
        return cls(
            **cls._summary_fields(report),
            top_products=[
                TopProductDTO.from_domain(product) for product in report.top_products
            ],
            orders=[ReportOrderDTO.from_domain(row) for row in report.orders],
        )


class ExportFileDTO(BaseModel):
    """Downloadable file produced by the export report."""

    filename: str
    content: str
    media_type: str = "text/csv"

    @classmethod
    def from_domain(cls, report: ExportReport) -> "ExportFileDTO":
        return cls(
            filename=report.filename,
            content=report.content,
            media_type=report.media_type,
        )


FinancialReportDTO = Union[SummaryReportDTO, DetailedReportDTO, ExportFileDTO]


class CustomReportFiltersDTO(CamelModel):
    """Optional order filters of a custom report."""

    status: List[OrderStatus] = Field(
        default_factory=list, description="One status or a list of statuses"
    )
    min_amount: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    max_amount: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)

    @field_validator("status", mode="before")
    @classmethod
    def wrap_single_status(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @model_validator(mode="after")
    def validate_amount_range(self) -> "CustomReportFiltersDTO":
        if (
            self.min_amount is not None
            and self.max_amount is not None
            and self.min_amount > self.max_amount
        ):
            raise ValueError("minAmount must not be greater than maxAmount")
        return self

    def to_domain(self) -> OrderFilters:
        return OrderFilters(
            statuses=tuple(self.status),
            min_amount=(
                to_decimal(self.min_amount) if self.min_amount is not None else None
            ),
            max_amount=(
                to_decimal(self.max_amount) if self.max_amount is not None else None
            ),
        )


class CustomReportRequestDTO(CamelModel):
    """DTO for requesting a custom financial report."""

    start_date: Optional[str] = None
    end_date: Optional[str] = None
    report_type: CustomReportType = CustomReportType.SUMMARY
    filters: CustomReportFiltersDTO = Field(default_factory=CustomReportFiltersDTO)

    model_config = {
        "json_schema_extra": {
            "example": {
                "startDate": "2025-01-01T00:00:00Z",
                "endDate": "2025-04-01T00:00:00Z",
                "reportType": "monthly",
                "filters": {"status": "COMPLETED", "minAmount": 100},
            }
        }
    }


class MonthlySalesDTO(CamelModel):
    month: str
    amount: float


class CustomReportDTO(CamelModel):
    """DTO for the custom financial report; sections absent for a type are null."""

    report_type: CustomReportType
    start_date: datetime
    end_date: datetime
    total_orders: int
    total_revenue: float
    average_order_value: float
    sales_by_status: Optional[Dict[str, float]] = None
    order_counts: Optional[Dict[str, int]] = None
    sales_by_month: Optional[List[MonthlySalesDTO]] = None
    product_performance: Optional[List[TopProductDTO]] = None

    @classmethod
    def from_domain(cls, report: CustomReport) -> "CustomReportDTO":
        dto = cls(
            report_type=report.report_type,
            start_date=report.interval.start,
            end_date=report.interval.end,
            total_orders=report.total_orders,
            total_revenue=to_json_number(report.total_revenue),
            average_order_value=to_json_number(report.average_order_value),
        )

        if report.report_type is CustomReportType.PRODUCT:
            dto.product_performance = [
                TopProductDTO.from_domain(product)
                for product in report.product_performance
            ]
            return dto

        dto.sales_by_status = {
            status.value: to_json_number(revenue)
            for status, revenue in report.sales_by_status.items()
        }
        if report.report_type is CustomReportType.MONTHLY:
            dto.sales_by_month = [
                MonthlySalesDTO(month=month.month, amount=to_json_number(month.revenue))
                for month in report.sales_by_month
            ]
        else:
            dto.order_counts = {
                status.value: count for status, count in report.order_counts.items()
            }
        return dto
