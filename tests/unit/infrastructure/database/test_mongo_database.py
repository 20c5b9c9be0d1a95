from __future__ import annotations

import asyncio
import threading
from typing import Any, Dict, cast

import pytest

from src.infrastructure.database.mongo_database import MongoDatabase
from tests.conftest import FakeCollection, FakeCursor, order_document, utc


class _StubMongoClient:
    def __init__(self, uri: str) -> None:
        self.uri = uri
        self.closed = False
        self.databases: Dict[str, _StubDatabase] = {}

    def __getitem__(self, name: str) -> "_StubDatabase":
        return self.databases.setdefault(name, _StubDatabase(name))

    def close(self) -> None:
        self.closed = True


class _StubDatabase:
    def __init__(self, name: str) -> None:
        self.name = name
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


@pytest.fixture(autouse=True)
def patch_mongo_client(monkeypatch) -> None:
    monkeypatch.setattr(
        "src.infrastructure.database.mongo_database.MongoClient",
        _StubMongoClient,
    )


def _database() -> MongoDatabase:
    return MongoDatabase("mongodb://localhost:27017", "storefront", "orders")


@pytest.mark.asyncio
async def test_find_many_filters_sorts_and_limits() -> None:
    database = _database()
    collection = cast(FakeCollection, database.get_collection("orders"))
    collection.insert_many(
        [
            order_document("a", utc(2025, 6, 3), 10),
            order_document("b", utc(2025, 6, 1), 20),
            order_document("c", utc(2025, 6, 2), 30, status="CANCELLED"),
        ]
    )

    results = await database.find_many(
        "orders",
        {"status": {"$in": ["COMPLETED"]}},
        sort_by="created_at",
        sort_direction=-1,
        limit=1,
    )

    assert [doc["id"] for doc in results] == ["a"]


@pytest.mark.asyncio
async def test_find_many_without_limit_returns_everything() -> None:
    database = _database()
    collection = cast(FakeCollection, database.get_collection("orders"))
    collection.insert_many(
        [order_document(str(i), utc(2025, 6, 1, i), i) for i in range(5)]
    )

    results = await database.find_many("orders", {})

    assert len(results) == 5


def test_close_closes_client() -> None:
    database = _database()

    database.close()

    assert database.client.closed is True
    assert database.orders_collection == "orders"


@pytest.mark.asyncio
async def test_queries_never_modify_the_orders_collection() -> None:
    database = _database()
    collection = cast(FakeCollection, database.get_collection("orders"))
    collection.insert_many([order_document("a", utc(2025, 6, 3), 10)])

    await database.find_many("orders", {}, sort_by="created_at")
    database.close()

    assert collection.created_indexes == []
    assert collection.dropped_indexes == []
    assert [doc["id"] for doc in collection.documents] == ["a"]


class _BarrierCollection(FakeCollection):
    """Blocks each find until the expected number of readers arrive."""

    def __init__(self, barrier: threading.Barrier) -> None:
        super().__init__()
        self._barrier = barrier
        self.threads: set[int] = set()

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        self.threads.add(threading.get_ident())
        self._barrier.wait()
        return super().find(query)


@pytest.mark.asyncio
async def test_concurrent_reads_overlap_off_the_event_loop() -> None:
    database = _database()
    collection = _BarrierCollection(threading.Barrier(2, timeout=5))
    collection.insert_many([order_document("a", utc(2025, 6, 3), 10)])
    cast(Any, database.db).collections["orders"] = collection

    current, previous = await asyncio.gather(
        database.find_many("orders", {}),
        database.find_many("orders", {}),
    )

    assert [doc["id"] for doc in current] == ["a"]
    assert [doc["id"] for doc in previous] == ["a"]
    assert threading.get_ident() not in collection.threads
