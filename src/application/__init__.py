"""
Application Layer Package

This package contains the use cases of the financial analytics service and
the DTOs they exchange with the presentation layer. Use cases fetch orders
through the repository port and delegate the calculations to domain services.
"""

from src.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
