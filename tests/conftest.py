from __future__ import annotations

import sys
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence

import pytest
from bson.decimal128 import Decimal128

from src.domain.entities.order import (
    Customer,
    Order,
    OrderLineItem,
    OrderStatus,
    ProductType,
)

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _comparable(value: Any) -> Any:
    if isinstance(value, Decimal128):
        return value.to_decimal()
    if isinstance(value, float):
        return Decimal(repr(value))
    return value


def _matches_condition(value: Any, condition: Any) -> bool:
    if not (isinstance(condition, dict) and condition and all(
        str(key).startswith("$") for key in condition
    )):
        return value == condition

    for operator, operand in condition.items():
        if operator == "$in":
            if value not in operand:
                return False
            continue
        if value is None:
            return False
        left, right = _comparable(value), _comparable(operand)
        if operator == "$gte" and not left >= right:
            return False
        if operator == "$gt" and not left > right:
            return False
        if operator == "$lte" and not left <= right:
            return False
        if operator == "$lt" and not left < right:
            return False
    return True


class FakeCursor:
    def __init__(self, documents: Sequence[Dict[str, Any]]):
        self._documents = list(documents)
        self._skip = 0
        self._limit: int | None = None

    def sort(self, key: str, direction: int = 1) -> "FakeCursor":
        self._documents.sort(key=lambda doc: doc.get(key), reverse=direction < 0)
        return self

    def skip(self, amount: int) -> "FakeCursor":
        self._skip = amount
        return self

    def limit(self, amount: int) -> "FakeCursor":
        self._limit = amount
        return self

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        docs = self._documents[self._skip :]
        if self._limit is not None:
            docs = docs[: self._limit]
        return iter(docs)


class FakeCollection:
    """In-memory stand-in for a pymongo collection supporting the order queries."""

    def __init__(self) -> None:
        self.documents: List[Dict[str, Any]] = []
        self.queries: List[Dict[str, Any]] = []
        self.dropped_indexes: List[str] = []
        self.created_indexes: List[tuple[Any, ...]] = []

    @property
    def last_query(self) -> Optional[Dict[str, Any]]:
        return self.queries[-1] if self.queries else None

    def insert_many(self, documents: Sequence[Dict[str, Any]]) -> None:
        self.documents.extend(documents)

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        self.queries.append(query)
        return FakeCursor(
            [doc for doc in self.documents if self._matches(doc, query)]
        )

    def drop_index(self, index_name: str) -> None:
        self.dropped_indexes.append(index_name)

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys

    @staticmethod
    def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        return all(
            _matches_condition(document.get(key), condition)
            for key, condition in query.items()
        )


class FakeMongoDatabase:
    """Mirrors the MongoDatabase surface used by the order repository."""

    def __init__(self, orders_collection: str = "orders") -> None:
        self.collections: Dict[str, FakeCollection] = {}
        self.orders_collection = orders_collection

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    @property
    def orders(self) -> FakeCollection:
        return self.get_collection(self.orders_collection)

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: str | None = None,
        sort_direction: int = 1,
        skip: int = 0,
        limit: int | None = None,
    ) -> List[Dict[str, Any]]:
        cursor = self.get_collection(collection_name).find(query)
        if sort_by:
            cursor.sort(sort_by, sort_direction)
        cursor.skip(skip)
        if limit is not None:
            cursor.limit(limit)
        return list(cursor)

    def close(self) -> None:
        pass


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def order_document(
    order_id: str,
    created_at: datetime,
    total: float,
    status: str = "COMPLETED",
    items: Sequence[Dict[str, Any]] = (),
    customer: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Order document shaped like the storefront's ``orders`` collection."""
    return {
        "_id": f"oid-{order_id}",
        "id": order_id,
        "created_at": created_at,
        "status": status,
        "total_amount": total,
        "items": list(items),
        "customer": customer,
    }


def item_document(
    product_id: str,
    price: float,
    quantity: int = 1,
    product_type: str = "COMPONENT",
    name: str = "",
) -> Dict[str, Any]:
    return {
        "product_id": product_id,
        "product_type": product_type,
        "price": price,
        "quantity": quantity,
        "name": name or product_id,
    }


OrderFactory = Callable[..., Order]


@pytest.fixture()
def make_order() -> OrderFactory:
    """Build Order entities with sensible defaults."""

    counter = {"value": 0}

    def _make(
        total: str | int = "100",
        status: OrderStatus = OrderStatus.COMPLETED,
        created_at: Optional[datetime] = None,
        items: Sequence[OrderLineItem] = (),
        customer: Optional[Customer] = None,
        order_id: Optional[str] = None,
    ) -> Order:
        counter["value"] += 1
        return Order(
            id=order_id or f"ord_{counter['value']}",
            created_at=created_at or utc(2025, 5, 10, 12),
            status=status,
            total_amount=Decimal(str(total)),
            items=tuple(items),
            customer=customer,
        )

    return _make


def line_item(
    product_id: str,
    price: str | int,
    quantity: int = 1,
    product_type: ProductType = ProductType.COMPONENT,
    name: str = "",
) -> OrderLineItem:
    return OrderLineItem(
        product_id=product_id,
        product_type=product_type,
        unit_price=Decimal(str(price)),
        quantity=quantity,
        name=name or product_id,
    )


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()


@pytest.fixture()
def fixed_now() -> datetime:
    return utc(2025, 6, 15, 14, 30)
