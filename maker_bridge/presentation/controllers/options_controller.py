"""
Options Router - Presentation Layer

Selection-list endpoints for device, attribute and command pickers.
"""

from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from maker_bridge.application.dtos.options_dto import (
    AttributeOptionDTO,
    CommandOptionDTO,
    DeviceOptionDTO,
    DeviceOptionsRequestDTO,
    DeviceScopedOptionsRequestDTO,
)
from maker_bridge.application.use_cases.device_option_use_cases import (
    ListAttributeOptionsUseCase,
    ListCommandOptionsUseCase,
    ListDeviceOptionsUseCase,
)
from maker_bridge.domain.entities.errors import DomainError
from maker_bridge.presentation.controllers.errors import http_error_for
from maker_bridge.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/options", tags=["Options"])


def _unexpected(kind: str, error: Exception) -> HTTPException:
    logger.error(
        "options.unexpected_error", kind=kind, error=str(error), exc_info=error
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Unable to load {kind}: {str(error)}",
    )


@router.post(
    "/devices",
    response_model=List[DeviceOptionDTO],
    response_model_exclude_none=True,
)
@inject
async def list_devices(
    request: DeviceOptionsRequestDTO,
    list_device_options_use_case: ListDeviceOptionsUseCase = Depends(
        Provide["list_device_options_use_case"]
    ),
) -> List[DeviceOptionDTO]:
    """List the hub's devices, filtered by ``query`` when given."""
    try:
        return await list_device_options_use_case.execute(
            request.query, request.credentials
        )
    except DomainError as e:
        raise http_error_for(e, "Unable to load devices: ") from e
    except Exception as e:
        raise _unexpected("devices", e) from e


@router.post(
    "/attributes",
    response_model=List[AttributeOptionDTO],
    response_model_exclude_none=True,
)
@inject
async def list_attributes(
    request: DeviceScopedOptionsRequestDTO,
    list_attribute_options_use_case: ListAttributeOptionsUseCase = Depends(
        Provide["list_attribute_options_use_case"]
    ),
) -> List[AttributeOptionDTO]:
    """List a device's attributes; a placeholder entry when no device is set."""
    try:
        return await list_attribute_options_use_case.execute(
            request.device_id, request.credentials
        )
    except DomainError as e:
        raise http_error_for(e, "Unable to load attributes: ") from e
    except Exception as e:
        raise _unexpected("attributes", e) from e


@router.post(
    "/commands",
    response_model=List[CommandOptionDTO],
    response_model_exclude_none=True,
)
@inject
async def list_commands(
    request: DeviceScopedOptionsRequestDTO,
    list_command_options_use_case: ListCommandOptionsUseCase = Depends(
        Provide["list_command_options_use_case"]
    ),
) -> List[CommandOptionDTO]:
    """List a device's commands; a placeholder entry when no device is set."""
    try:
        return await list_command_options_use_case.execute(
            request.device_id, request.credentials
        )
    except DomainError as e:
        raise http_error_for(e, "Unable to load commands: ") from e
    except Exception as e:
        raise _unexpected("commands", e) from e
