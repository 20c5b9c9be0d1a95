"""
MongoDB Order Repository - Infrastructure Layer

This module implements the IOrderRepository interface on top of an ``orders``
collection whose documents embed their line items and customer snapshot:

    {
        "id": "ord_123",
        "created_at": ISODate(...),
        "status": "COMPLETED",
        "total_amount": 1299.99,
        "items": [
            {"product_id": "cfg_1", "product_type": "CONFIGURATION",
             "price": 1299.99, "quantity": 1, "name": "Gaming PC"}
        ],
        "customer": {"id": "usr_1", "name": "Ada", "email": "ada@example.com"}
    }
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

import structlog
from bson.decimal128 import Decimal128
from pymongo.errors import PyMongoError

from src.domain.entities.analytics import PeriodInterval
from src.domain.entities.errors import OrderDataSourceError
from src.domain.entities.order import (
    Customer,
    Order,
    OrderFilters,
    OrderLineItem,
    OrderStatus,
    ProductType,
)
from src.domain.repositories.order_repository import IOrderRepository
from src.domain.services.money import to_decimal
from src.domain.services.period_resolver import ensure_utc, parse_instant
from src.infrastructure.database import MongoDatabase

logger = structlog.get_logger(__name__)

ASCENDING = 1
DESCENDING = -1


def _amount(value: Any) -> Decimal:
    if isinstance(value, Decimal128):
        return value.to_decimal()
    if value is None:
        return Decimal(0)
    return to_decimal(value)


def _instant(value: Any) -> datetime:
    if isinstance(value, datetime):
        return ensure_utc(value)
    return parse_instant(str(value), field_name="created_at")


class OrderRepository(IOrderRepository):
    """MongoDB implementation of the order data source."""

    def __init__(self, mongo_database: MongoDatabase):
        """
        Initialize the MongoDB order repository.

        Args:
            mongo_database: MongoDB database client
        """
        self.db = mongo_database
        self.collection_name = getattr(mongo_database, "orders_collection", "orders")

    async def find_in_period(
        self,
        interval: PeriodInterval,
        filters: Optional[OrderFilters] = None,
        newest_first: bool = False,
    ) -> List[Order]:
        query = self._build_query(interval, filters)
        return await self._find(
            query,
            sort_direction=DESCENDING if newest_first else ASCENDING,
            operation="find_in_period",
        )

    async def find_since(
        self, start: datetime, statuses: Sequence[OrderStatus]
    ) -> List[Order]:
        query = {
            "created_at": {"$gte": start},
            "status": {"$in": [status.value for status in statuses]},
        }
        return await self._find(query, operation="find_since")

    async def find_recent(
        self, statuses: Sequence[OrderStatus], limit: int
    ) -> List[Order]:
        if limit <= 0:
            return []
        query = {"status": {"$in": [status.value for status in statuses]}}
        return await self._find(
            query, sort_direction=DESCENDING, limit=limit, operation="find_recent"
        )

    async def _find(
        self,
        query: Dict[str, Any],
        *,
        operation: str,
        sort_direction: int = ASCENDING,
        limit: Optional[int] = None,
    ) -> List[Order]:
        try:
            documents = await self.db.find_many(
                self.collection_name,
                query,
                sort_by="created_at",
                sort_direction=sort_direction,
                limit=limit,
            )
        except PyMongoError as e:
            logger.error(
                "orders.fetch.failed",
                operation=operation,
                collection=self.collection_name,
                query=str(query),
                error=str(e),
            )
            raise OrderDataSourceError(
                "Failed to fetch orders", details={"operation": operation}
            ) from e

        orders = [self._to_entity(document) for document in documents]
        logger.debug(
            "orders.fetch.completed", operation=operation, order_count=len(orders)
        )
        return orders

    def _build_query(
        self, interval: PeriodInterval, filters: Optional[OrderFilters]
    ) -> Dict[str, Any]:
        query: Dict[str, Any] = {
            "created_at": {"$gte": interval.start, "$lt": interval.end}
        }
        if filters is None or filters.is_empty():
            return query

        if filters.statuses:
            query["status"] = {"$in": [status.value for status in filters.statuses]}

        amount: Dict[str, Any] = {}
        if filters.min_amount is not None:
            amount["$gte"] = Decimal128(filters.min_amount)
        if filters.max_amount is not None:
            amount["$lte"] = Decimal128(filters.max_amount)
        if amount:
            query["total_amount"] = amount

        return query

    def _to_entity(self, document: Dict[str, Any]) -> Order:
        """Convert a MongoDB document to an Order entity."""
        items = tuple(
            OrderLineItem(
                product_id=str(item.get("product_id", "")),
                product_type=ProductType(item.get("product_type")),
                unit_price=_amount(item.get("price")),
                quantity=int(item.get("quantity", 0)),
                name=item.get("name") or "",
            )
            for item in document.get("items") or []
        )

        customer_doc = document.get("customer")
        customer = None
        if customer_doc:
            customer = Customer(
                id=str(customer_doc.get("id", "")),
                name=customer_doc.get("name"),
                email=customer_doc.get("email"),
            )

        return Order(
            id=str(document.get("id") or document.get("_id")),
            created_at=_instant(document["created_at"]),
            status=OrderStatus(document.get("status", OrderStatus.PENDING.value)),
            total_amount=_amount(document.get("total_amount")),
            items=items,
            customer=customer,
        )
