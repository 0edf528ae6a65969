"""
Actions Router - Presentation Layer

FastAPI router for the device action node.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from maker_bridge.application.dtos.hub_dto import (
    ExecuteActionsRequestDTO,
    ExecuteActionsResponseDTO,
)
from maker_bridge.application.use_cases.device_action_use_cases import (
    ExecuteDeviceActionsUseCase,
)
from maker_bridge.domain.entities.errors import DomainError
from maker_bridge.presentation.controllers.errors import http_error_for
from maker_bridge.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/actions", tags=["Actions"])


@router.post("/device", response_model=ExecuteActionsResponseDTO)
@inject
async def execute_device_actions(
    request: ExecuteActionsRequestDTO,
    execute_device_actions_use_case: ExecuteDeviceActionsUseCase = Depends(
        Provide["execute_device_actions_use_case"]
    ),
) -> ExecuteActionsResponseDTO:
    """
    Run the device action node over a batch of input items.

    Items are processed one after another. Each produces a record holding
    the raw hub response, or ``{"error": ...}`` when ``continueOnFail`` is
    set and the item failed.

    Raises:
        HTTPException: 400 for invalid parameters or missing credentials,
            502 when the hub call fails and ``continueOnFail`` is off
    """
    try:
        return await execute_device_actions_use_case.execute(request)

    except DomainError as e:
        item = e.details.get("item")
        prefix = f"Item {item}: " if item is not None else ""
        raise http_error_for(e, prefix) from e

    except Exception as e:
        logger.error("actions.unexpected_error", error=str(e), exc_info=e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to execute device actions: {str(e)}",
        ) from e
