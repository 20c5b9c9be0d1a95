"""
Top-Product Ranker - Domain Service

Aggregates line items across an order set per ``(product_type, product_id)``
and ranks the groups by revenue.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from src.domain.entities.analytics import RankedProduct
from src.domain.entities.order import Order, ProductType

DEFAULT_TOP_PRODUCTS = 10


def aggregate_products(orders: Iterable[Order]) -> List[RankedProduct]:
    """Per-product quantity and revenue in first-seen order."""
    # dicts keep insertion order, which gives the first-seen tie-break
    groups: Dict[Tuple[ProductType, str], RankedProduct] = {}

    for order in orders:
        for item in order.items:
            key = (item.product_type, item.product_id)
            product = groups.get(key)
            if product is None:
                product = RankedProduct(
                    product_id=item.product_id,
                    product_name=item.name,
                    product_type=item.product_type,
                )
                groups[key] = product
            product.quantity += item.quantity
            product.revenue += item.line_revenue

    return list(groups.values())


def rank_top_products(
    orders: Iterable[Order], limit: Optional[int] = DEFAULT_TOP_PRODUCTS
) -> List[RankedProduct]:
    """
    Rank products by summed revenue, descending.

    Ties keep first-seen order (``sorted`` is stable). ``limit=None`` returns
    every product; ``limit <= 0`` returns an empty list.
    """
    ranked = sorted(
        aggregate_products(orders), key=lambda product: product.revenue, reverse=True
    )
    if limit is None:
        return ranked
    if limit <= 0:
        return []
    return ranked[:limit]
