"""
Option DTOs - Application Layer

Selection-list entries used to populate device, attribute and command
pickers in the workflow host's configuration UI.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from maker_bridge.application.dtos.hub_dto import HubCredentialDTO
from maker_bridge.domain.entities.hub import DeviceAttribute, DeviceCommand, HubDevice

SELECT_DEVICE_FIRST = "Please select a device first"


class OptionDTO(BaseModel):
    """A single selectable entry."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(description="Display name")
    value: str = Field(description="Value stored in the node parameter")
    description: Optional[str] = Field(default=None)

    @classmethod
    def select_device_first(cls):
        return cls(name=SELECT_DEVICE_FIRST, value="")


class DeviceOptionDTO(OptionDTO):
    type: Optional[str] = Field(default=None, description="Device type")

    @classmethod
    def from_domain(cls, device: HubDevice) -> "DeviceOptionDTO":
        return cls(
            name=device.display_name,
            value=device.id,
            description=f"Type: {device.type}" if device.type else f"ID: {device.id}",
            type=device.type or None,
        )


class AttributeOptionDTO(OptionDTO):
    current_value: Optional[Any] = Field(default=None, alias="currentValue")
    data_type: Optional[str] = Field(default=None, alias="dataType")

    @classmethod
    def from_domain(cls, attribute: DeviceAttribute) -> "AttributeOptionDTO":
        description = f"Current value: {attribute.current_value}"
        if attribute.data_type:
            description += f" ({attribute.data_type})"
        return cls(
            name=attribute.name,
            value=attribute.name,
            description=description,
            current_value=attribute.current_value,
            data_type=attribute.data_type,
        )


class CommandOptionDTO(OptionDTO):
    parameters: Optional[List[str]] = Field(default=None)

    @classmethod
    def from_domain(cls, command: DeviceCommand) -> "CommandOptionDTO":
        description = (
            f"Parameters: {', '.join(command.parameters)}"
            if command.parameters
            else "No parameters"
        )
        return cls(
            name=command.command,
            value=command.command,
            description=description,
            parameters=list(command.parameters),
        )


class DeviceOptionsRequestDTO(BaseModel):
    credentials: Optional[HubCredentialDTO] = Field(default=None)
    query: Optional[str] = Field(
        default=None, description="Case-insensitive filter on device name or label"
    )


class DeviceScopedOptionsRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    credentials: Optional[HubCredentialDTO] = Field(default=None)
    device_id: Optional[str] = Field(default=None, alias="deviceId")

    @field_validator("device_id", mode="before")
    @classmethod
    def _coerce_device_id(cls, value: Any) -> Optional[str]:
        return None if value is None else str(value)
