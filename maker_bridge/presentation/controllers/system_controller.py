"""``/health`` and ``/info`` for operators and container probes."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Request, status

from maker_bridge.application.dtos.health_dto import (
    ApplicationInfoDTO,
    SystemHealthDTO,
)
from maker_bridge.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from maker_bridge.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


def _probe_failure(event: str, exc: Exception, status_code: int) -> HTTPException:
    logger.error(event, error=str(exc), exc_info=exc)
    return HTTPException(
        status_code=status_code,
        detail="Unable to evaluate Maker Bridge dependencies",
    )


@router.get("/health", response_model=SystemHealthDTO)
@inject
async def health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> SystemHealthDTO:
    """Report whether the hub and the workflow host are reachable."""
    try:
        report = await get_health_status_use_case.execute()
    except Exception as exc:  # pragma: no cover
        raise _probe_failure(
            "health.failed", exc, status.HTTP_503_SERVICE_UNAVAILABLE
        ) from exc
    logger.debug(
        "health.reported",
        status=report.status.value,
        dependencies={dep.name: dep.status.value for dep in report.dependencies},
    )
    return report


@router.get("/info", response_model=ApplicationInfoDTO)
@inject
async def info(
    request: Request,
    get_application_info_use_case: GetApplicationInfoUseCase = Depends(
        Provide["get_application_info_use_case"]
    ),
) -> ApplicationInfoDTO:
    """Build metadata, uptime, redacted settings and dependency status."""
    try:
        return await get_application_info_use_case.execute(
            getattr(request.app.state, "started_at", None)
        )
    except Exception as exc:  # pragma: no cover
        raise _probe_failure(
            "info.failed", exc, status.HTTP_500_INTERNAL_SERVER_ERROR
        ) from exc
