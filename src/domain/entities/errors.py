"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    code = "domain_error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class UnauthorizedError(DomainError):
    """Raised when a request carries no valid credential."""

    code = "unauthorized"


class ForbiddenError(DomainError):
    """Raised when an authenticated principal lacks the required role."""

    code = "forbidden"

    def __init__(self, role: str, details: Optional[Dict[str, Any]] = None):
        message = f"{role.capitalize()} access required"
        super().__init__(message, details)


class InvalidDateRangeError(DomainError):
    """Raised when a date range is unparseable or its end is not after its start."""

    code = "invalid_date_range"


class OrderDataSourceError(DomainError):
    """Raised when orders cannot be fetched from the data source."""

    code = "internal_error"
