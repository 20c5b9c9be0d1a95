"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .order_repository import IOrderRepository

__all__ = ["IOrderRepository"]
