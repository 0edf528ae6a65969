"""Response bodies for ``GET /health`` and ``GET /info``."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from maker_bridge.domain.entities.health import (
    ApplicationInfo,
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)


class DependencyStatusDTO(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "name": "hubitat",
                "status": "up",
                "message": "Maker API reachable",
                "checked_at": "2024-09-09T12:00:00Z",
                "latency_ms": 42.1,
                "details": {"host": "http://192.168.0.100", "device_count": 3},
            }
        },
    )

    name: str = Field(description="Probe name: hubitat or workflow_host")
    status: ServiceStatus
    message: Optional[str] = Field(default=None, description="Probe outcome")
    checked_at: datetime
    latency_ms: Optional[float] = Field(
        default=None, description="Round trip of the probe request"
    )
    details: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls.model_validate(status)


class SystemHealthDTO(BaseModel):
    """Overall status plus one entry per probed dependency."""

    model_config = ConfigDict(from_attributes=True)

    status: ServiceStatus = Field(description="Worst status reported by any probe")
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls.model_validate(health)


class ApplicationInfoDTO(SystemHealthDTO):
    """Build metadata, uptime and redacted configuration of the running bridge."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    extras: Dict[str, Any] = Field(
        default_factory=dict,
        description="Redacted hub and workflow settings",
    )

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        return cls.model_validate(info)
