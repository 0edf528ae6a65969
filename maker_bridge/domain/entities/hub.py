"""Domain entities for the Hubitat Maker API."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from maker_bridge.domain.entities.errors import InvalidActionRequestError


class ResourceType(str, Enum):
    """Resources the action node can operate on."""

    DEVICE = "device"


class DeviceOperation(str, Enum):
    """Operations available on the device resource."""

    GET_ALL = "getAll"
    GET = "get"
    GET_ATTRIBUTE = "getAttribute"
    SEND_COMMAND = "sendCommand"


@dataclass(frozen=True, slots=True)
class HubCredential:
    """Connection details for one Maker API app instance."""

    host: str
    app_id: str
    access_token: str

    @property
    def base_url(self) -> str:
        return f"{self.host.rstrip('/')}/apps/api/{self.app_id}"


@dataclass(slots=True)
class ActionRequest:
    """A single action node invocation for one input item."""

    operation: DeviceOperation
    resource: ResourceType = ResourceType.DEVICE
    device_id: Optional[str] = None
    attribute: Optional[str] = None
    command: Optional[str] = None
    arguments_text: Optional[str] = None

    def validate(self) -> None:
        """
        Check that the parameters required by the operation are present.

        Raises:
            InvalidActionRequestError: If a required parameter is empty.
        """
        if self.resource != ResourceType.DEVICE:
            raise InvalidActionRequestError(
                f"Unsupported resource: {self.resource}",
                {"resource": str(self.resource)},
            )

        details = {"operation": self.operation.value}
        if self.operation == DeviceOperation.GET_ALL:
            return
        if not self.device_id:
            raise InvalidActionRequestError(
                f"Parameter 'deviceId' is required for operation "
                f"'{self.operation.value}'",
                details,
            )
        if self.operation == DeviceOperation.GET_ATTRIBUTE and not self.attribute:
            raise InvalidActionRequestError(
                "Parameter 'attribute' is required for operation 'getAttribute'",
                details,
            )
        if self.operation == DeviceOperation.SEND_COMMAND and not self.command:
            raise InvalidActionRequestError(
                "Parameter 'command' is required for operation 'sendCommand'",
                details,
            )

    def command_arguments(self) -> List[str]:
        """Split ``arguments_text`` into trimmed, non-empty query fragments."""
        if not self.arguments_text:
            return []
        entries = (entry.strip() for entry in self.arguments_text.split(","))
        return [entry for entry in entries if entry]


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Output record emitted for one input item."""

    json: Any
    paired_item: int

    @classmethod
    def failure(cls, message: str, paired_item: int) -> "ActionResult":
        return cls(json={"error": message}, paired_item=paired_item)

    @property
    def is_error(self) -> bool:
        return isinstance(self.json, dict) and set(self.json) == {"error"}


@dataclass(slots=True)
class HubDevice:
    """Device summary as returned by ``/devices/all``."""

    id: str
    name: str = ""
    label: str = ""
    type: str = ""

    @property
    def display_name(self) -> str:
        return self.label or self.name or f"Device {self.id}"

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on the name or the label."""
        needle = query.lower()
        return needle in self.name.lower() or needle in self.label.lower()


@dataclass(slots=True)
class DeviceAttribute:
    """Current state of one device attribute."""

    name: str
    current_value: Any = None
    data_type: Optional[str] = None


@dataclass(slots=True)
class DeviceCommand:
    """A command supported by a device."""

    command: str
    parameters: List[str] = field(default_factory=list)
