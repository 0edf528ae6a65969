"""
DTOs Package - Application Layer

Data Transfer Objects exchanged between the application layer and the
presentation layer.
"""

from .credential_dto import CredentialPropertyDTO, CredentialSchemaDTO
from .health_dto import ApplicationInfoDTO, DependencyStatusDTO, SystemHealthDTO
from .hub_dto import (
    ActionItemDTO,
    ActionResultDTO,
    ExecuteActionsRequestDTO,
    ExecuteActionsResponseDTO,
    HubCredentialDTO,
)
from .options_dto import (
    AttributeOptionDTO,
    CommandOptionDTO,
    DeviceOptionDTO,
    DeviceOptionsRequestDTO,
    DeviceScopedOptionsRequestDTO,
    OptionDTO,
)
from .webhook_dto import WebhookResponseDTO, WebhookStatus

__all__ = [
    "CredentialPropertyDTO",
    "CredentialSchemaDTO",
    "HubCredentialDTO",
    "ActionItemDTO",
    "ActionResultDTO",
    "ExecuteActionsRequestDTO",
    "ExecuteActionsResponseDTO",
    "OptionDTO",
    "DeviceOptionDTO",
    "AttributeOptionDTO",
    "CommandOptionDTO",
    "DeviceOptionsRequestDTO",
    "DeviceScopedOptionsRequestDTO",
    "WebhookResponseDTO",
    "WebhookStatus",
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "ApplicationInfoDTO",
]
