from __future__ import annotations

import pytest
from pydantic import ValidationError

from maker_bridge.application.dtos.hub_dto import (
    ActionItemDTO,
    ActionResultDTO,
    ExecuteActionsRequestDTO,
    HubCredentialDTO,
)
from maker_bridge.domain.entities.hub import ActionResult, DeviceOperation


def test_credential_dto_reads_wire_names(credential_payload) -> None:
    dto = HubCredentialDTO.model_validate({**credential_payload, "appId": 12345})

    credential = dto.to_domain()

    assert credential.host == "http://192.168.1.100"
    assert credential.app_id == "12345"
    assert credential.access_token == "abcdef123456"


def test_credential_dto_requires_every_field() -> None:
    with pytest.raises(ValidationError):
        HubCredentialDTO.model_validate({"hubitatHost": "http://hub"})


def test_action_item_defaults_to_get_all() -> None:
    action = ActionItemDTO.model_validate({}).to_domain()

    assert action.operation == DeviceOperation.GET_ALL
    assert action.device_id is None


def test_action_item_accepts_numeric_device_id_and_arguments_text() -> None:
    item = ActionItemDTO.model_validate(
        {
            "operation": "sendCommand",
            "deviceId": 4,
            "command": "setLevel",
            "argumentsText": "level=50",
        }
    )

    action = item.to_domain()

    assert action.device_id == "4"
    assert action.command_arguments() == ["level=50"]


def test_action_item_rejects_unknown_operation() -> None:
    with pytest.raises(ValidationError):
        ActionItemDTO.model_validate({"operation": "reboot"})


def test_execute_request_reads_continue_on_fail() -> None:
    request = ExecuteActionsRequestDTO.model_validate(
        {"continueOnFail": True, "items": [{"operation": "getAll"}]}
    )

    assert request.continue_on_fail is True
    assert request.credentials is None
    assert len(request.items) == 1


def test_action_result_dto_serializes_with_wire_names() -> None:
    result = ActionResult(json={"switch": "on"}, paired_item=2)
    dto = ActionResultDTO.from_domain(result)

    assert dto.model_dump(by_alias=True) == {"json": {"switch": "on"}, "pairedItem": 2}
