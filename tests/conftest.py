from __future__ import annotations

import sys
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest

from maker_bridge.domain.entities.hub import (
    DeviceAttribute,
    DeviceCommand,
    HubCredential,
    HubDevice,
)
from maker_bridge.domain.gateways.maker_api_gateway import IMakerApiGateway

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


SAMPLE_DEVICES: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Living Room Light",
        "label": "Living Room Light",
        "type": "Switch",
        "capabilities": ["Switch", "SwitchLevel"],
        "attributes": [
            {"name": "switch", "currentValue": "on", "dataType": "ENUM"},
            {"name": "level", "currentValue": 75, "dataType": "NUMBER"},
        ],
    },
    {
        "id": 2,
        "name": "Motion Sensor",
        "label": "Front Door Motion",
        "type": "MotionSensor",
        "capabilities": ["MotionSensor", "Battery"],
        "attributes": [
            {"name": "motion", "currentValue": "inactive", "dataType": "ENUM"},
            {"name": "battery", "currentValue": 88, "dataType": "NUMBER"},
        ],
    },
    {
        "id": 3,
        "name": "Thermostat",
        "label": "HVAC System",
        "type": "Thermostat",
        "capabilities": ["Thermostat", "ThermostatSetpoint"],
        "attributes": [
            {"name": "temperature", "currentValue": 72, "dataType": "NUMBER"},
            {"name": "thermostatMode", "currentValue": "auto", "dataType": "ENUM"},
            {"name": "thermostatSetpoint", "currentValue": 70, "dataType": "NUMBER"},
        ],
    },
]

SAMPLE_COMMANDS: List[Dict[str, Any]] = [
    {"command": "on"},
    {"command": "off"},
    {"command": "setLevel", "parameters": ["level", "duration"]},
    {"command": "refresh"},
]


class FakeMakerApiGateway(IMakerApiGateway):
    """In-memory gateway recording every call it receives."""

    def __init__(
        self,
        devices: Optional[List[Dict[str, Any]]] = None,
        commands: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        self.devices = deepcopy(SAMPLE_DEVICES if devices is None else devices)
        self.commands = deepcopy(SAMPLE_COMMANDS if commands is None else commands)
        self.calls: List[Tuple[Any, ...]] = []
        self.failures: Dict[str, Exception] = {}

    def fail(self, method: str, error: Exception) -> None:
        self.failures[method] = error

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method, *args))
        if method in self.failures:
            raise self.failures[method]

    def _find(self, device_id: str) -> Dict[str, Any]:
        for device in self.devices:
            if str(device["id"]) == str(device_id):
                return device
        return {}

    async def get_all_devices(self, credential: HubCredential) -> Any:
        self._record("get_all_devices", credential)
        return self.devices

    async def get_device(self, credential: HubCredential, device_id: str) -> Any:
        self._record("get_device", credential, device_id)
        return self._find(device_id)

    async def get_device_attribute(
        self, credential: HubCredential, device_id: str, attribute: str
    ) -> Any:
        self._record("get_device_attribute", credential, device_id, attribute)
        for item in self._find(device_id).get("attributes", []):
            if item["name"] == attribute:
                return {"id": device_id, **item}
        return {}

    async def send_command(
        self,
        credential: HubCredential,
        device_id: str,
        command: str,
        arguments: Sequence[str] = (),
    ) -> Any:
        self._record("send_command", credential, device_id, command, list(arguments))
        return {"success": True, "command": command}

    async def list_devices(self, credential: HubCredential) -> List[HubDevice]:
        self._record("list_devices", credential)
        return [
            HubDevice(
                id=str(item["id"]),
                name=item.get("name", ""),
                label=item.get("label", ""),
                type=item.get("type", ""),
            )
            for item in self.devices
        ]

    async def list_device_attributes(
        self, credential: HubCredential, device_id: str
    ) -> List[DeviceAttribute]:
        self._record("list_device_attributes", credential, device_id)
        return [
            DeviceAttribute(
                name=item["name"],
                current_value=item.get("currentValue"),
                data_type=item.get("dataType"),
            )
            for item in self._find(device_id).get("attributes", [])
        ]

    async def list_device_commands(
        self, credential: HubCredential, device_id: str
    ) -> List[DeviceCommand]:
        self._record("list_device_commands", credential, device_id)
        return [
            DeviceCommand(
                command=item["command"], parameters=list(item.get("parameters", []))
            )
            for item in self.commands
        ]


class RecordingDispatcher:
    def __init__(self, error: Optional[Exception] = None) -> None:
        self.events: List[Dict[str, Any]] = []
        self._error = error

    async def dispatch(self, event: Dict[str, Any]) -> None:
        if self._error is not None:
            raise self._error
        self.events.append(event)


@pytest.fixture()
def credential() -> HubCredential:
    return HubCredential(
        host="http://192.168.1.100", app_id="12345", access_token="abcdef123456"
    )


@pytest.fixture()
def credential_payload() -> Dict[str, str]:
    return {
        "hubitatHost": "http://192.168.1.100",
        "appId": "12345",
        "accessToken": "abcdef123456",
    }


@pytest.fixture()
def fake_gateway() -> FakeMakerApiGateway:
    return FakeMakerApiGateway()


@pytest.fixture()
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture()
def device_event() -> Dict[str, Any]:
    return {
        "source": "DEVICE",
        "deviceId": 1,
        "name": "switch",
        "value": "on",
        "displayName": "Living Room Light",
        "unit": None,
    }


@pytest.fixture()
def mode_event() -> Dict[str, Any]:
    return {
        "source": "MODE",
        "name": "mode",
        "value": "Home",
        "displayName": "Mode",
        "descriptionText": "Mode changed to Home",
    }


@pytest.fixture()
def failing_dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher(error=RuntimeError("workflow host unreachable"))
