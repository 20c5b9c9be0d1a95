"""
Revenue DTOs - Application Layer

Response payload of ``GET /financial/revenue``. Monetary values are emitted as
plain JSON numbers rounded to cents.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List

from pydantic import Field

from src.application.dtos.base import CamelModel
from src.domain.entities.analytics import (
    Granularity,
    GrowthComparison,
    RankedProduct,
    RevenueBucket,
    RevenueStatistics,
)
from src.domain.entities.order import ProductType
from src.domain.services.money import to_json_number


class PeriodWindowDTO(CamelModel):
    """Resolved window of the current period."""

    start: datetime
    end: datetime
    name: Granularity


class RevenueBucketDTO(CamelModel):
    period: str = Field(description="Bucket label (hour, yyyy-mm-dd or yyyy-mm)")
    revenue: float

    @classmethod
    def from_domain(cls, bucket: RevenueBucket) -> "RevenueBucketDTO":
        return cls(period=bucket.label, revenue=to_json_number(bucket.revenue))


class ComparisonDTO(CamelModel):
    previous_period_revenue: float
    growth: float = Field(description="Growth versus the previous period, percent")

    @classmethod
    def from_domain(cls, comparison: GrowthComparison) -> "ComparisonDTO":
        return cls(
            previous_period_revenue=to_json_number(comparison.previous_total),
            growth=to_json_number(comparison.growth_pct),
        )


class TopProductDTO(CamelModel):
    product_id: str
    product_name: str
    product_type: ProductType
    quantity: int
    revenue: float

    @classmethod
    def from_domain(cls, product: RankedProduct) -> "TopProductDTO":
        return cls(
            product_id=product.product_id,
            product_name=product.product_name,
            product_type=product.product_type,
            quantity=product.quantity,
            revenue=to_json_number(product.revenue),
        )


class RevenueStatisticsDTO(CamelModel):
    """DTO for the revenue statistics response."""

    period: PeriodWindowDTO
    total_revenue: float
    revenue_by_status: Dict[str, float]
    revenue_by_product_type: Dict[str, float]
    revenue_over_time: List[RevenueBucketDTO] = Field(default_factory=list)
    order_count: int
    average_order_value: float
    comparison: ComparisonDTO
    top_products: List[TopProductDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, statistics: RevenueStatistics) -> "RevenueStatisticsDTO":
        aggregate = statistics.aggregate
        current = statistics.period.current
        return cls(
            period=PeriodWindowDTO(
                start=current.start,
                end=current.end,
                name=statistics.period.granularity,
            ),
            total_revenue=to_json_number(aggregate.total_revenue),
            revenue_by_status={
                status.value: to_json_number(revenue)
                for status, revenue in aggregate.revenue_by_status.items()
            },
            revenue_by_product_type={
                product_type.value: to_json_number(revenue)
                for product_type, revenue in aggregate.revenue_by_product_type.items()
            },
            revenue_over_time=[
                RevenueBucketDTO.from_domain(bucket)
                for bucket in statistics.revenue_over_time
            ],
            order_count=aggregate.order_count,
            average_order_value=to_json_number(aggregate.average_order_value),
            comparison=ComparisonDTO.from_domain(statistics.comparison),
            top_products=[
                TopProductDTO.from_domain(product)
                for product in statistics.top_products
            ],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "period": {
                    "start": "2025-05-01T10:00:00Z",
                    "end": "2025-06-01T10:00:00Z",
                    "name": "month",
                },
                "totalRevenue": 4599.97,
                "revenueByStatus": {
                    "PENDING": 0.0,
                    "PROCESSING": 1299.99,
                    "COMPLETED": 3299.98,
                    "CANCELLED": 0.0,
                },
                "revenueByProductType": {
                    "CONFIGURATION": 3899.98,
                    "COMPONENT": 600.0,
                    "PERIPHERAL": 99.99,
                },
                "revenueOverTime": [
                    {"period": "2025-05-03", "revenue": 1299.99},
                    {"period": "2025-05-17", "revenue": 3299.98},
                ],
                "orderCount": 3,
                "averageOrderValue": 1533.32,
                "comparison": {"previousPeriodRevenue": 3800.0, "growth": 21.05},
                "topProducts": [
                    {
                        "productId": "cfg_gaming_01",
                        "productName": "Gaming PC",
                        "productType": "CONFIGURATION",
                        "quantity": 2,
                        "revenue": 3899.98,
                    }
                ],
            }
        }
    }
