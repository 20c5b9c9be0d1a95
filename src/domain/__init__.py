"""
Domain Layer Package

This package contains the order model and the financial analytics engine:
entities, repository and port interfaces, and the pure services that
aggregate, bucket, rank and project revenue. It has no dependencies on
frameworks or infrastructure concerns.
"""

from src.domain import entities, ports, repositories, services

__all__ = ["entities", "repositories", "services", "ports"]
