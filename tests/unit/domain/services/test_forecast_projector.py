from __future__ import annotations

from decimal import Decimal

from src.domain.entities.analytics import MonthlyRevenue
from src.domain.entities.order import OrderStatus
from src.domain.services.forecast_projector import (
    build_monthly_history,
    project_forecast,
    resolve_baseline,
)
from tests.conftest import utc

NOW = utc(2025, 6, 15, 14, 30)


def _monthly(forecast):
    return [(point.month, point.projected_revenue) for point in forecast.monthly]


def test_default_baseline_single_flat_month() -> None:
    baseline = resolve_baseline([], [])

    forecast = project_forecast(baseline, 1, Decimal(0), {}, NOW)

    assert baseline == Decimal(1000)
    assert _monthly(forecast) == [("2025-07", Decimal("1000.00"))]


def test_compounding_growth_and_annual_sum() -> None:
    forecast = project_forecast(Decimal(1000), 3, Decimal(10), {}, NOW)

    assert _monthly(forecast) == [
        ("2025-07", Decimal("1100.00")),
        ("2025-08", Decimal("1210.00")),
        ("2025-09", Decimal("1331.00")),
    ]
    assert forecast.annual_projection == Decimal("3641.00")
    assert [(q.quarter, q.projected_revenue) for q in forecast.quarterly] == [
        ("2025-Q3", Decimal("3641.00"))
    ]


def test_seasonal_factor_does_not_compound() -> None:
    forecast = project_forecast(
        Decimal(1000), 3, Decimal(10), {8: Decimal(2)}, NOW
    )

    assert [point.projected_revenue for point in forecast.monthly] == [
        Decimal("1100.00"),
        Decimal("2420.00"),
        Decimal("1331.00"),
    ]
    assert forecast.annual_projection == Decimal("4851.00")


def test_projection_rolls_over_year_boundary() -> None:
    forecast = project_forecast(Decimal(100), 3, Decimal(0), {}, utc(2025, 11, 30))

    assert [point.month for point in forecast.monthly] == [
        "2025-12",
        "2026-01",
        "2026-02",
    ]
    assert [q.quarter for q in forecast.quarterly] == ["2025-Q4", "2026-Q1"]
    assert forecast.quarterly[1].projected_revenue == Decimal("200.00")


def test_non_positive_months_yield_empty_forecast() -> None:
    for months in (0, -3):
        forecast = project_forecast(Decimal(1000), months, Decimal(5), {}, NOW)

        assert forecast.monthly == []
        assert forecast.quarterly == []
        assert forecast.annual_projection == 0


def test_rounding_happens_at_emission_only() -> None:
    forecast = project_forecast(Decimal(100), 2, Decimal("0.5"), {}, NOW)

    # 100.5 then 101.0025: the second month compounds the unrounded value
    assert [point.projected_revenue for point in forecast.monthly] == [
        Decimal("100.50"),
        Decimal("101.00"),
    ]
    assert project_forecast(Decimal("0.125"), 1, Decimal(0), {}, NOW).monthly[
        0
    ].projected_revenue == Decimal("0.13")


def test_length_and_growth_properties() -> None:
    forecast = project_forecast(Decimal("873.12"), 12, Decimal("3.7"), {}, NOW)

    assert len(forecast.monthly) == 12
    assert forecast.annual_projection == sum(
        point.projected_revenue for point in forecast.monthly
    )
    assert forecast.monthly[-1].month == "2026-06"


def test_baseline_is_mean_of_history() -> None:
    history = [
        MonthlyRevenue(month="2025-04", revenue=Decimal(100)),
        MonthlyRevenue(month="2025-05", revenue=Decimal(200)),
    ]

    assert resolve_baseline(history) == Decimal(150)


def test_baseline_falls_back_to_recent_orders(make_order) -> None:
    recent = [make_order(total=10), make_order(total=20)]

    assert resolve_baseline([], recent) == Decimal(450)


def test_baseline_default_can_be_configured() -> None:
    assert resolve_baseline([], [], default=Decimal(250)) == Decimal(250)


def test_history_only_counts_qualifying_orders(make_order) -> None:
    orders = [
        make_order(total=100, status=OrderStatus.COMPLETED, created_at=utc(2025, 4, 2)),
        make_order(total=40, status=OrderStatus.PROCESSING, created_at=utc(2025, 4, 9)),
        make_order(total=999, status=OrderStatus.PENDING, created_at=utc(2025, 4, 9)),
        make_order(total=999, status=OrderStatus.CANCELLED, created_at=utc(2025, 5, 1)),
    ]

    history = build_monthly_history(orders)

    assert [(month.month, month.revenue) for month in history] == [
        ("2025-04", Decimal(140))
    ]


def test_long_high_growth_projection_is_emitted_in_cents() -> None:
    forecast = project_forecast(Decimal(1000), 120, Decimal(100), {}, NOW)

    assert len(forecast.monthly) == 120
    assert forecast.monthly[0].projected_revenue == Decimal("2000.00")
    assert forecast.monthly[9].projected_revenue == Decimal("1024000.00")
    last = forecast.monthly[-1].projected_revenue
    assert last > Decimal("1E+39")
    assert last.as_tuple().exponent == -2
    assert forecast.annual_projection > last


def test_infinite_seasonal_factor_does_not_raise() -> None:
    forecast = project_forecast(
        Decimal(1000), 2, Decimal(0), {7: Decimal("Infinity")}, NOW
    )

    assert forecast.monthly[0].projected_revenue.is_infinite()
    assert forecast.monthly[1].projected_revenue == Decimal("1000.00")
    assert forecast.annual_projection.is_infinite()
