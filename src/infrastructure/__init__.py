"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the MongoDB order
store, token verification and dependency health checks.
"""

from src.infrastructure import database, repositories, services

__all__ = ["database", "repositories", "services"]
