from __future__ import annotations

from src.application.dtos.revenue_dto import RevenueStatisticsDTO
from src.domain.entities.analytics import Granularity, RevenueStatistics
from src.domain.entities.order import OrderStatus, ProductType
from src.domain.services.growth_calculator import compare_growth
from src.domain.services.period_resolver import resolve_period
from src.domain.services.product_ranker import rank_top_products
from src.domain.services.revenue_aggregator import aggregate_revenue
from src.domain.services.time_bucketing import bucket_revenue
from tests.conftest import line_item, utc


def test_revenue_statistics_payload(make_order, fixed_now) -> None:
    orders = [
        make_order(
            total="100",
            created_at=utc(2025, 6, 15, 9),
            items=[line_item("kb", "100", product_type=ProductType.PERIPHERAL)],
        ),
        make_order(total="33.333", status=OrderStatus.PENDING),
    ]
    aggregate = aggregate_revenue(orders)
    statistics = RevenueStatistics(
        period=resolve_period(Granularity.DAY, fixed_now),
        aggregate=aggregate,
        revenue_over_time=list(bucket_revenue(orders, Granularity.DAY)),
        comparison=compare_growth(aggregate, aggregate_revenue(orders[:1])),
        top_products=rank_top_products(orders),
    )

    payload = RevenueStatisticsDTO.from_domain(statistics).model_dump(
        by_alias=True, mode="json"
    )

    assert payload["period"]["name"] == "day"
    assert payload["totalRevenue"] == 133.33
    assert payload["revenueByStatus"] == {
        "PENDING": 33.33,
        "PROCESSING": 0.0,
        "COMPLETED": 100.0,
        "CANCELLED": 0.0,
    }
    assert payload["revenueByProductType"]["PERIPHERAL"] == 100.0
    assert payload["orderCount"] == 2
    assert payload["averageOrderValue"] == 66.67
    assert payload["comparison"] == {"previousPeriodRevenue": 100.0, "growth": 33.33}
    assert len(payload["revenueOverTime"]) == 24
    assert payload["revenueOverTime"][9] == {"period": "9:00", "revenue": 100.0}
    assert payload["topProducts"][0]["productId"] == "kb"
