"""Port for probing the dependencies the analytics service relies on."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.health import SystemHealth


class IHealthCheckService(Protocol):
    """Probes dependencies and aggregates them into one status."""

    async def evaluate(self) -> SystemHealth:
        ...
