"""Domain ports package."""

from .access_control import IAccessControl
from .health_check import IHealthCheckService

__all__ = ["IAccessControl", "IHealthCheckService"]
