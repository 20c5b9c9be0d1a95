"""
MongoDB Database - Infrastructure Layer

This module provides a read-only MongoDB client used by the order
repository. It handles the connection, collection access and queries; the
orders collection and its indexes belong to the storefront.
"""

import asyncio
from typing import Any, Dict, List, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str, orders_collection: str = "orders"):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
            orders_collection: Name of the collection holding order documents
        """
        self.client: MongoClient = MongoClient(mongo_uri)
        self.db: Database = self.client[db_name]
        self.orders_collection = orders_collection

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a collection from the database.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB collection
        """
        return self.db[collection_name]

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: Optional[str] = None,
        sort_direction: int = 1,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents
            sort_by: Field to sort by
            sort_direction: Sort direction (1 for ascending, -1 for descending)
            skip: Number of documents to skip
            limit: Maximum number of documents to return (None for all)

        Returns:
            List of documents
        """

        def _read() -> List[Dict[str, Any]]:
            cursor = self.db[collection_name].find(query)

            if sort_by:
                cursor = cursor.sort(sort_by, sort_direction)

            if skip:
                cursor = cursor.skip(skip)
            if limit is not None:
                cursor = cursor.limit(limit)

            return list(cursor)

        # pymongo blocks, so the cursor is drained on a worker thread
        return await asyncio.to_thread(_read)

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()
