from __future__ import annotations

import pytest

from maker_bridge.application.dtos.options_dto import SELECT_DEVICE_FIRST
from maker_bridge.application.use_cases.device_option_use_cases import (
    ListAttributeOptionsUseCase,
    ListCommandOptionsUseCase,
    ListDeviceOptionsUseCase,
)
from maker_bridge.domain.entities.errors import InvalidResponseError, NotFoundError


@pytest.mark.asyncio
async def test_list_devices_returns_every_device(fake_gateway, credential) -> None:
    use_case = ListDeviceOptionsUseCase(
        maker_api_gateway=fake_gateway, default_credential=credential
    )

    options = await use_case.execute()

    assert [option.name for option in options] == [
        "Living Room Light",
        "Front Door Motion",
        "HVAC System",
    ]
    assert options[1].value == "2"
    assert options[1].description == "Type: MotionSensor"


@pytest.mark.asyncio
async def test_list_devices_filters_by_query(fake_gateway, credential) -> None:
    use_case = ListDeviceOptionsUseCase(
        maker_api_gateway=fake_gateway, default_credential=credential
    )

    options = await use_case.execute(query="motion")

    assert [option.name for option in options] == ["Front Door Motion"]


@pytest.mark.asyncio
async def test_list_devices_propagates_errors(fake_gateway, credential) -> None:
    fake_gateway.fail(
        "list_devices", InvalidResponseError("Invalid response from Hubitat API")
    )
    use_case = ListDeviceOptionsUseCase(
        maker_api_gateway=fake_gateway, default_credential=credential
    )

    with pytest.raises(InvalidResponseError):
        await use_case.execute()


@pytest.mark.asyncio
async def test_list_attributes(fake_gateway, credential) -> None:
    use_case = ListAttributeOptionsUseCase(
        maker_api_gateway=fake_gateway, default_credential=credential
    )

    options = await use_case.execute("1")

    assert [option.value for option in options] == ["switch", "level"]
    assert options[1].description == "Current value: 75 (NUMBER)"


@pytest.mark.asyncio
@pytest.mark.parametrize("device_id", [None, ""])
async def test_list_attributes_without_device_returns_sentinel(
    fake_gateway, device_id
) -> None:
    use_case = ListAttributeOptionsUseCase(
        maker_api_gateway=fake_gateway, default_credential=None
    )

    options = await use_case.execute(device_id)

    assert len(options) == 1
    assert options[0].name == SELECT_DEVICE_FIRST
    assert options[0].value == ""
    assert fake_gateway.calls == []


@pytest.mark.asyncio
async def test_list_attributes_not_found(fake_gateway, credential) -> None:
    fake_gateway.fail(
        "list_device_attributes",
        NotFoundError("Device attributes not found in the response"),
    )
    use_case = ListAttributeOptionsUseCase(
        maker_api_gateway=fake_gateway, default_credential=credential
    )

    with pytest.raises(NotFoundError):
        await use_case.execute("1")


@pytest.mark.asyncio
async def test_list_commands_is_stable(fake_gateway, credential) -> None:
    use_case = ListCommandOptionsUseCase(
        maker_api_gateway=fake_gateway, default_credential=credential
    )

    first = await use_case.execute("1")
    second = await use_case.execute("1")

    assert [option.name for option in first] == ["on", "off", "setLevel", "refresh"]
    assert first == second
    assert first[2].description == "Parameters: level, duration"
    assert first[0].description == "No parameters"


@pytest.mark.asyncio
async def test_list_commands_without_device_returns_sentinel(fake_gateway) -> None:
    use_case = ListCommandOptionsUseCase(
        maker_api_gateway=fake_gateway, default_credential=None
    )

    options = await use_case.execute(None)

    assert options[0].name == SELECT_DEVICE_FIRST
