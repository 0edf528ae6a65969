"""Use cases behind ``/health`` and ``/info``."""

from datetime import datetime, timezone
from typing import Optional

from maker_bridge.application.dtos.health_dto import (
    ApplicationInfoDTO,
    SystemHealthDTO,
)
from maker_bridge.application.models import SystemInfo
from maker_bridge.domain.entities.health import ApplicationInfo
from maker_bridge.domain.ports.health_check import IHealthCheckService


class GetHealthStatusUseCase:
    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> SystemHealthDTO:
        return SystemHealthDTO.from_domain(await self._health_check_service.evaluate())


class GetApplicationInfoUseCase:
    """Combine build metadata and uptime with a fresh health snapshot."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        system_info: SystemInfo,
    ) -> None:
        self._health_check_service = health_check_service
        self._info = system_info

    async def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        health = await self._health_check_service.evaluate()

        now = datetime.now(timezone.utc)
        if started_at is None:
            started_at = now

        meta = self._info
        return ApplicationInfoDTO.from_domain(
            ApplicationInfo(
                name=meta.title,
                description=meta.description,
                version=meta.version,
                environment=meta.environment,
                git_commit=meta.git_commit,
                build_time=meta.build_time,
                started_at=started_at,
                uptime_seconds=max(0.0, (now - started_at).total_seconds()),
                status=health.status,
                dependencies=health.dependencies,
                extras=meta.redacted_config(),
            )
        )
