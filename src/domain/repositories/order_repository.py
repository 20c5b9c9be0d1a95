"""
Order Repository Interface

This module defines the read-only data source the financial analytics engine
pulls orders from. Implementations return orders with their line items
embedded and ``created_at`` normalised to UTC.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from src.domain.entities.analytics import PeriodInterval
from src.domain.entities.order import Order, OrderFilters, OrderStatus


class IOrderRepository(ABC):
    """Interface for order data source implementations."""

    @abstractmethod
    async def find_in_period(
        self,
        interval: PeriodInterval,
        filters: Optional[OrderFilters] = None,
        newest_first: bool = False,
    ) -> List[Order]:
        """
        Find orders created inside a half-open interval.

        Args:
            interval: Window ``[start, end)`` on the order creation instant
            filters: Optional status / amount narrowing
            newest_first: Sort by creation instant descending instead of ascending

        Returns:
            Orders in deterministic creation order

        Raises:
            OrderDataSourceError: When the data source cannot be queried
        """
        pass

    @abstractmethod
    async def find_since(
        self, start: datetime, statuses: Sequence[OrderStatus]
    ) -> List[Order]:
        """
        Find orders with one of ``statuses`` created at or after ``start``.

        Args:
            start: Inclusive lower bound on the creation instant
            statuses: Accepted order statuses

        Returns:
            Orders sorted by creation instant ascending

        Raises:
            OrderDataSourceError: When the data source cannot be queried
        """
        pass

    @abstractmethod
    async def find_recent(
        self, statuses: Sequence[OrderStatus], limit: int
    ) -> List[Order]:
        """
        Find the most recent orders with one of ``statuses``.

        Args:
            statuses: Accepted order statuses
            limit: Maximum number of orders to return

        Returns:
            Orders sorted by creation instant descending

        Raises:
            OrderDataSourceError: When the data source cannot be queried
        """
        pass
