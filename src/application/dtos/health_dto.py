"""DTOs for the operational /health and /info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from src.application.dtos.base import CamelModel
from src.domain.entities.health import (
    ApplicationInfo,
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)

_MONGO_EXAMPLE = {
    "name": "mongo",
    "status": "up",
    "message": "MongoDB ping successful",
    "checkedAt": "2025-06-01T12:00:00Z",
    "latencyMs": 3.2,
    "details": {"database": "storefront", "orders_collection": "orders"},
}


class DependencyStatusDTO(CamelModel):
    """Result of checking one dependency."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            checked_at=status.checked_at,
            latency_ms=status.latency_ms,
            details=status.details,
        )


class SystemHealthDTO(CamelModel):
    """Payload of GET /health."""

    status: ServiceStatus
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in health.dependencies
            ],
        )

    model_config = {
        "json_schema_extra": {
            "example": {"status": "up", "dependencies": [_MONGO_EXAMPLE]}
        }
    }


class ApplicationInfoDTO(CamelModel):
    """Payload of GET /info."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)
    extras: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        return cls(
            name=info.name,
            description=info.description,
            version=info.version,
            environment=info.environment,
            git_commit=info.git_commit,
            build_time=info.build_time,
            started_at=info.started_at,
            uptime_seconds=info.uptime_seconds,
            status=info.status,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in info.dependencies
            ],
            extras=info.extras,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Storefront Financial Analytics",
                "description": "Revenue statistics, forecasts and reports",
                "version": "1.0.0",
                "environment": "production",
                "gitCommit": "3f9c2d1",
                "buildTime": "2025-06-01T08:00:00Z",
                "startedAt": "2025-06-01T08:05:00Z",
                "uptimeSeconds": 14100.0,
                "status": "up",
                "dependencies": [_MONGO_EXAMPLE],
                "extras": {
                    "environment": "production",
                    "orders_source": {
                        "mongo_uri": "mongodb://mongo:27017",
                        "database": "storefront",
                        "collection": "orders",
                    },
                },
            }
        }
    }
