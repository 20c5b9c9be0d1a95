"""
Repositories Package - Infrastructure Layer

This package contains concrete implementations of the repository
interfaces defined in the domain layer. These implementations
handle the details of reading orders from MongoDB.
"""

from .order_repository import OrderRepository

__all__ = ["OrderRepository"]
