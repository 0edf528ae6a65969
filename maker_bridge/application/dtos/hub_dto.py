"""
Hub DTOs - Application Layer

Request and response models for the credential boundary and the
device action node.
"""

from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from maker_bridge.domain.entities.hub import (
    ActionRequest,
    ActionResult,
    DeviceOperation,
    HubCredential,
    ResourceType,
)


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


class HubCredentialDTO(BaseModel):
    """Maker API credential as supplied by the workflow host."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "hubitatHost": "http://192.168.0.100",
                "appId": "12",
                "accessToken": "abcdef12-3456-7890-abcd-ef1234567890",
            }
        },
    )

    host: str = Field(alias="hubitatHost", description="Hub base URL")
    app_id: str = Field(alias="appId", description="Maker API app ID")
    access_token: str = Field(alias="accessToken", description="Maker API token")

    @field_validator("app_id", mode="before")
    @classmethod
    def _coerce_app_id(cls, value: Any) -> Any:
        return _optional_str(value)

    def to_domain(self) -> HubCredential:
        return HubCredential(
            host=self.host, app_id=self.app_id, access_token=self.access_token
        )


class ActionItemDTO(BaseModel):
    """Parameters of the action node for one input item."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "resource": "device",
                "operation": "sendCommand",
                "deviceId": "1",
                "command": "setLevel",
                "arguments": "level=100",
            }
        },
    )

    resource: ResourceType = Field(default=ResourceType.DEVICE)
    operation: DeviceOperation = Field(default=DeviceOperation.GET_ALL)
    device_id: Optional[str] = Field(default=None, alias="deviceId")
    attribute: Optional[str] = Field(default=None)
    command: Optional[str] = Field(default=None)
    arguments: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("arguments", "argumentsText"),
        description="Comma separated command arguments, e.g. level=100,color=green",
    )

    @field_validator("device_id", mode="before")
    @classmethod
    def _coerce_device_id(cls, value: Any) -> Optional[str]:
        return _optional_str(value)

    def to_domain(self) -> ActionRequest:
        return ActionRequest(
            operation=self.operation,
            resource=self.resource,
            device_id=self.device_id,
            attribute=self.attribute,
            command=self.command,
            arguments_text=self.arguments,
        )


class ExecuteActionsRequestDTO(BaseModel):
    """A batch of action items executed in order."""

    model_config = ConfigDict(populate_by_name=True)

    credentials: Optional[HubCredentialDTO] = Field(
        default=None,
        description="Hub credential; the configured default is used when omitted",
    )
    continue_on_fail: bool = Field(
        default=False,
        alias="continueOnFail",
        description="Emit {error} records instead of aborting the batch",
    )
    items: List[ActionItemDTO] = Field(default_factory=list)


class ActionResultDTO(BaseModel):
    """Output record for one input item."""

    model_config = ConfigDict(populate_by_name=True)

    data: Any = Field(alias="json", description="Raw hub response or {error}")
    paired_item: int = Field(alias="pairedItem", description="Input item index")

    @classmethod
    def from_domain(cls, result: ActionResult) -> "ActionResultDTO":
        return cls(data=result.json, paired_item=result.paired_item)


class ExecuteActionsResponseDTO(BaseModel):
    results: List[ActionResultDTO] = Field(default_factory=list)
