"""
Domain Entities - Order

This module defines the order records consumed by the financial analytics
engine. Orders are immutable inputs: the analytics code only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple


class OrderStatus(str, Enum):
    """Lifecycle status of a storefront order."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class ProductType(str, Enum):
    """Kind of product referenced by an order line item."""

    CONFIGURATION = "CONFIGURATION"
    COMPONENT = "COMPONENT"
    PERIPHERAL = "PERIPHERAL"


# Orders counted as realised revenue when building forecast history.
QUALIFYING_STATUSES: Tuple[OrderStatus, ...] = (
    OrderStatus.COMPLETED,
    OrderStatus.PROCESSING,
)


@dataclass(frozen=True, slots=True)
class OrderLineItem:
    """A single product line inside an order."""

    product_id: str
    product_type: ProductType
    unit_price: Decimal
    quantity: int
    name: str = ""

    @property
    def line_revenue(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True, slots=True)
class Customer:
    """Customer snapshot attached to an order for reporting."""

    id: str
    name: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Order:
    """A storefront order with its line items, created_at normalised to UTC."""

    id: str
    created_at: datetime
    status: OrderStatus
    total_amount: Decimal
    items: Tuple[OrderLineItem, ...] = field(default_factory=tuple)
    customer: Optional[Customer] = None


@dataclass(frozen=True, slots=True)
class OrderFilters:
    """Optional narrowing applied by the order data source."""

    statuses: Tuple[OrderStatus, ...] = ()
    min_amount: Optional[Decimal] = None
    max_amount: Optional[Decimal] = None

    def is_empty(self) -> bool:
        return (
            not self.statuses and self.min_amount is None and self.max_amount is None
        )
