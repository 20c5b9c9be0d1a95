"""
Domain Services Package

Pure functions implementing the financial analytics engine. They operate on
in-memory order sets and never reach a data source themselves.
"""

from .forecast_projector import (
    build_monthly_history,
    project_forecast,
    resolve_baseline,
)
from .growth_calculator import compare_growth
from .period_resolver import parse_instant, resolve_period
from .product_ranker import rank_top_products
from .revenue_aggregator import aggregate_revenue
from .time_bucketing import bucket_revenue

__all__ = [
    "resolve_period",
    "parse_instant",
    "aggregate_revenue",
    "bucket_revenue",
    "compare_growth",
    "rank_top_products",
    "build_monthly_history",
    "resolve_baseline",
    "project_forecast",
]
