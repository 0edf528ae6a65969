from __future__ import annotations

import pytest

from maker_bridge.application.dtos.hub_dto import ExecuteActionsRequestDTO
from maker_bridge.application.use_cases.device_action_use_cases import (
    ExecuteDeviceActionsUseCase,
)
from maker_bridge.domain.entities.errors import (
    HubHttpError,
    InvalidActionRequestError,
    MissingCredentialError,
)
from maker_bridge.domain.entities.hub import ActionRequest, DeviceOperation


def _use_case(gateway, default_credential=None) -> ExecuteDeviceActionsUseCase:
    return ExecuteDeviceActionsUseCase(
        maker_api_gateway=gateway, default_credential=default_credential
    )


@pytest.mark.asyncio
async def test_translate_dispatches_each_operation(fake_gateway, credential) -> None:
    use_case = _use_case(fake_gateway)

    await use_case.translate(ActionRequest(DeviceOperation.GET_ALL), credential)
    await use_case.translate(
        ActionRequest(DeviceOperation.GET, device_id="1"), credential
    )
    await use_case.translate(
        ActionRequest(DeviceOperation.GET_ATTRIBUTE, device_id="1", attribute="level"),
        credential,
    )
    await use_case.translate(
        ActionRequest(
            DeviceOperation.SEND_COMMAND,
            device_id="1",
            command="setColor",
            arguments_text="level=100,color=green",
        ),
        credential,
    )

    assert [call[0] for call in fake_gateway.calls] == [
        "get_all_devices",
        "get_device",
        "get_device_attribute",
        "send_command",
    ]
    assert fake_gateway.calls[-1][-1] == ["level=100", "color=green"]


@pytest.mark.asyncio
async def test_translate_validates_before_any_request(fake_gateway, credential) -> None:
    use_case = _use_case(fake_gateway)

    with pytest.raises(InvalidActionRequestError):
        await use_case.translate(
            ActionRequest(DeviceOperation.GET_ATTRIBUTE, device_id="1"), credential
        )

    assert fake_gateway.calls == []


@pytest.mark.asyncio
async def test_run_pairs_results_with_items(fake_gateway, credential) -> None:
    actions = [
        ActionRequest(DeviceOperation.GET, device_id="2"),
        ActionRequest(DeviceOperation.GET_ATTRIBUTE, device_id="1", attribute="level"),
    ]

    results = await _use_case(fake_gateway).run(actions, credential)

    assert [result.paired_item for result in results] == [0, 1]
    assert results[0].json["label"] == "Front Door Motion"
    assert results[1].json["currentValue"] == 75


@pytest.mark.asyncio
async def test_run_with_continue_on_fail_emits_error_record(
    fake_gateway, credential
) -> None:
    fake_gateway.fail("get_device", HubHttpError(500, "Hubitat returned HTTP 500"))
    actions = [
        ActionRequest(DeviceOperation.GET, device_id="1"),
        ActionRequest(DeviceOperation.GET_ALL),
    ]

    results = await _use_case(fake_gateway).run(
        actions, credential, continue_on_fail=True
    )

    assert results[0].json == {"error": "Hubitat returned HTTP 500"}
    assert results[0].paired_item == 0
    assert isinstance(results[1].json, list)


@pytest.mark.asyncio
async def test_run_without_continue_stops_at_first_failure(
    fake_gateway, credential
) -> None:
    fake_gateway.fail("get_device", HubHttpError(500, "Hubitat returned HTTP 500"))
    actions = [
        ActionRequest(DeviceOperation.GET, device_id="1"),
        ActionRequest(DeviceOperation.GET_ALL),
    ]

    with pytest.raises(HubHttpError) as exc:
        await _use_case(fake_gateway).run(actions, credential)

    assert exc.value.details["item"] == 0
    assert [call[0] for call in fake_gateway.calls] == ["get_device"]


@pytest.mark.asyncio
async def test_run_with_continue_reports_invalid_items(
    fake_gateway, credential
) -> None:
    actions = [ActionRequest(DeviceOperation.SEND_COMMAND, device_id="1")]

    results = await _use_case(fake_gateway).run(
        actions, credential, continue_on_fail=True
    )

    assert "command" in results[0].json["error"]
    assert fake_gateway.calls == []


@pytest.mark.asyncio
async def test_execute_uses_request_credentials(
    fake_gateway, credential_payload
) -> None:
    request = ExecuteActionsRequestDTO.model_validate(
        {"credentials": credential_payload, "items": [{"operation": "getAll"}]}
    )

    response = await _use_case(fake_gateway).execute(request)

    assert response.results[0].paired_item == 0
    assert fake_gateway.calls[0][1].app_id == "12345"


@pytest.mark.asyncio
async def test_execute_falls_back_to_default_credential(
    fake_gateway, credential
) -> None:
    request = ExecuteActionsRequestDTO.model_validate({"items": [{}]})

    await _use_case(fake_gateway, credential).execute(request)

    assert fake_gateway.calls[0][1] is credential


@pytest.mark.asyncio
async def test_execute_without_any_credential_fails(fake_gateway) -> None:
    request = ExecuteActionsRequestDTO.model_validate({"items": [{}]})

    with pytest.raises(MissingCredentialError):
        await _use_case(fake_gateway).execute(request)
