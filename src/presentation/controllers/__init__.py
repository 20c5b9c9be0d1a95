"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers guard routes, translate domain
errors into HTTP errors and map between API DTOs and use cases.
"""

from .financial_controller import router as financial_router
from .system_controller import router as system_router

__all__ = ["financial_router", "system_router"]
