"""Use cases package - Application Layer."""

from .credential_use_cases import GetCredentialSchemaUseCase
from .device_action_use_cases import ExecuteDeviceActionsUseCase
from .device_option_use_cases import (
    ListAttributeOptionsUseCase,
    ListCommandOptionsUseCase,
    ListDeviceOptionsUseCase,
)
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase
from .webhook_use_cases import HandleWebhookEventUseCase

__all__ = [
    "GetCredentialSchemaUseCase",
    "ExecuteDeviceActionsUseCase",
    "ListDeviceOptionsUseCase",
    "ListAttributeOptionsUseCase",
    "ListCommandOptionsUseCase",
    "HandleWebhookEventUseCase",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]
