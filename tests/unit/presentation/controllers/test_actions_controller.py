from __future__ import annotations

import pytest
from fastapi import HTTPException

from maker_bridge.application.dtos.hub_dto import ExecuteActionsRequestDTO
from maker_bridge.application.use_cases.device_action_use_cases import (
    ExecuteDeviceActionsUseCase,
)
from maker_bridge.domain.entities.errors import HubConnectionError
from maker_bridge.presentation.controllers.actions_controller import (
    execute_device_actions,
)


def _request(**payload) -> ExecuteActionsRequestDTO:
    return ExecuteActionsRequestDTO.model_validate(payload)


@pytest.mark.asyncio
async def test_execute_returns_paired_results(fake_gateway, credential) -> None:
    use_case = ExecuteDeviceActionsUseCase(
        maker_api_gateway=fake_gateway, default_credential=credential
    )

    response = await execute_device_actions(
        request=_request(items=[{"operation": "get", "deviceId": "3"}]),
        execute_device_actions_use_case=use_case,
    )

    assert response.results[0].data["label"] == "HVAC System"
    assert response.results[0].paired_item == 0


@pytest.mark.asyncio
async def test_invalid_item_is_a_bad_request(fake_gateway, credential) -> None:
    use_case = ExecuteDeviceActionsUseCase(
        maker_api_gateway=fake_gateway, default_credential=credential
    )

    with pytest.raises(HTTPException) as exc:
        await execute_device_actions(
            request=_request(
                items=[{}, {"operation": "getAttribute", "deviceId": "1"}]
            ),
            execute_device_actions_use_case=use_case,
        )

    assert exc.value.status_code == 400
    assert exc.value.detail.startswith("Item 1: ")


@pytest.mark.asyncio
async def test_missing_credentials_is_a_bad_request(fake_gateway) -> None:
    use_case = ExecuteDeviceActionsUseCase(
        maker_api_gateway=fake_gateway, default_credential=None
    )

    with pytest.raises(HTTPException) as exc:
        await execute_device_actions(
            request=_request(items=[{}]), execute_device_actions_use_case=use_case
        )

    assert exc.value.status_code == 400


@pytest.mark.asyncio
async def test_hub_failure_is_a_bad_gateway(fake_gateway, credential) -> None:
    fake_gateway.fail("get_all_devices", HubConnectionError("unreachable"))
    use_case = ExecuteDeviceActionsUseCase(
        maker_api_gateway=fake_gateway, default_credential=credential
    )

    with pytest.raises(HTTPException) as exc:
        await execute_device_actions(
            request=_request(items=[{}]), execute_device_actions_use_case=use_case
        )

    assert exc.value.status_code == 502
    assert exc.value.detail == "Item 0: unreachable"


@pytest.mark.asyncio
async def test_unexpected_error_is_internal(fake_gateway, credential) -> None:
    fake_gateway.fail("get_all_devices", RuntimeError("boom"))
    use_case = ExecuteDeviceActionsUseCase(
        maker_api_gateway=fake_gateway, default_credential=credential
    )

    with pytest.raises(HTTPException) as exc:
        await execute_device_actions(
            request=_request(items=[{}]), execute_device_actions_use_case=use_case
        )

    assert exc.value.status_code == 500
