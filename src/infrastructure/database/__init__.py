"""
Database package - Infrastructure Layer

This package contains the MongoDB client used to read storefront orders.
"""

from src.infrastructure.database.mongo_database import MongoDatabase

__all__ = ["MongoDatabase"]
