"""Health of the bridge: the hub it talks to and the workflow host it feeds."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ServiceStatus(str, Enum):
    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"


# Worst first; the overall status is the first one any probe reports.
_SEVERITY = (
    ServiceStatus.DOWN,
    ServiceStatus.DEGRADED,
    ServiceStatus.UNKNOWN,
)


@dataclass(slots=True)
class DependencyStatus:
    """
    Outcome of a single probe.

    ``name`` is ``hubitat`` or ``workflow_host``. ``details`` holds probe
    specific data such as the redacted hub host or the device count.
    """

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime = field(default_factory=_utcnow)
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def available(self) -> bool:
        return self.status is ServiceStatus.UP


@dataclass(slots=True)
class SystemHealth:
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)

    @classmethod
    def from_dependencies(cls, probes: Iterable[DependencyStatus]) -> "SystemHealth":
        """Fold probe results into one status; no probes at all means up."""
        collected = list(probes)
        reported = {probe.status for probe in collected}
        overall = next(
            (status for status in _SEVERITY if status in reported), ServiceStatus.UP
        )
        return cls(status=overall, dependencies=collected)


@dataclass(slots=True)
class ApplicationInfo:
    """Build metadata and uptime, together with the latest health snapshot."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)
    extras: Dict[str, Any] = field(default_factory=dict)
