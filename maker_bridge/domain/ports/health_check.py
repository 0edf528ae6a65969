"""Domain service abstraction for health checks."""

from __future__ import annotations

from typing import Protocol

from maker_bridge.domain.entities.health import SystemHealth


class IHealthCheckService(Protocol):
    """Interface for retrieving system health information."""

    async def evaluate(self) -> SystemHealth:
        """Probe the hub and the workflow target and aggregate the result."""
        ...
