"""Infrastructure services package."""

from .health_check_service import HealthCheckService
from .jwt_access_control import JWTAccessControl

__all__ = ["HealthCheckService", "JWTAccessControl"]
