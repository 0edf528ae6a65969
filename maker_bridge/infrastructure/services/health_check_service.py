"""Reachability probes for the hub and the workflow host."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Awaitable, Callable, Optional
from urllib.parse import urlsplit, urlunsplit

import httpx

from maker_bridge.domain.entities.errors import DomainError
from maker_bridge.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)
from maker_bridge.domain.entities.hub import HubCredential
from maker_bridge.domain.gateways.maker_api_gateway import IMakerApiGateway
from maker_bridge.domain.ports.health_check import IHealthCheckService
from maker_bridge.shared import get_logger, redact_url

logger = get_logger(__name__)

HUB = "hubitat"
WORKFLOW_HOST = "workflow_host"


def _status_for_code(status_code: int) -> ServiceStatus:
    if status_code >= 500:
        return ServiceStatus.DOWN
    if status_code >= 400:
        return ServiceStatus.DEGRADED
    return ServiceStatus.UP


def _origin(url: str) -> str:
    """Scheme and host of ``url`` with credentials, path and query removed."""
    parts = urlsplit(redact_url(url))
    return urlunsplit((parts.scheme, parts.netloc, "/", "", ""))


class HealthCheckService(IHealthCheckService):
    """
    Probes the Maker API with the default credential and the origin of the
    workflow forward URL.

    A probe that has nothing to talk to (no default credential, no forward
    URL) reports ``unknown`` instead of failing.
    """

    def __init__(
        self,
        maker_api_gateway: IMakerApiGateway,
        default_credential: Optional[HubCredential],
        workflow_forward_url: Optional[str],
        *,
        http_timeout: float = 5.0,
    ) -> None:
        self._gateway = maker_api_gateway
        self._credential = default_credential
        self._workflow_forward_url = workflow_forward_url or None
        self._http_timeout = http_timeout

    async def evaluate(self) -> SystemHealth:
        probes = await asyncio.gather(
            self._guarded(HUB, self._check_hub),
            self._guarded(WORKFLOW_HOST, self._check_workflow_host),
        )
        return SystemHealth.from_dependencies(probes)

    async def _guarded(
        self, name: str, probe: Callable[[], Awaitable[DependencyStatus]]
    ) -> DependencyStatus:
        try:
            return await probe()
        except Exception as exc:  # pragma: no cover
            logger.error("health.probe.crashed", probe=name, error=str(exc))
            return DependencyStatus(
                name=name, status=ServiceStatus.DOWN, message=str(exc)
            )

    async def _check_hub(self) -> DependencyStatus:
        credential = self._credential
        if credential is None:
            return DependencyStatus(
                name=HUB,
                status=ServiceStatus.UNKNOWN,
                message="Default Hubitat credentials not configured.",
            )

        details = {"host": redact_url(credential.host)}
        started = perf_counter()
        try:
            devices = await self._gateway.list_devices(credential)
        except DomainError as exc:
            return DependencyStatus(
                name=HUB,
                status=ServiceStatus.DOWN,
                message=f"Maker API check failed: {exc.message}",
                latency_ms=(perf_counter() - started) * 1000,
                details=details,
            )

        details["device_count"] = len(devices)
        return DependencyStatus(
            name=HUB,
            status=ServiceStatus.UP,
            message="Maker API reachable",
            latency_ms=(perf_counter() - started) * 1000,
            details=details,
        )

    async def _check_workflow_host(self) -> DependencyStatus:
        if not self._workflow_forward_url:
            return DependencyStatus(
                name=WORKFLOW_HOST,
                status=ServiceStatus.UNKNOWN,
                message="Workflow forward URL not configured.",
            )

        url = _origin(self._workflow_forward_url)
        started = perf_counter()
        try:
            async with httpx.AsyncClient(timeout=self._http_timeout) as client:
                response = await client.get(url)
        except httpx.RequestError as exc:
            return DependencyStatus(
                name=WORKFLOW_HOST,
                status=ServiceStatus.DOWN,
                message=f"HTTP request failed: {exc}",
                latency_ms=(perf_counter() - started) * 1000,
                details={"url": url},
            )

        return DependencyStatus(
            name=WORKFLOW_HOST,
            status=_status_for_code(response.status_code),
            message=f"HTTP {response.status_code}",
            latency_ms=(perf_counter() - started) * 1000,
            details={"url": url, "status_code": response.status_code},
        )
