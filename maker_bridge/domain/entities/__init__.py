"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .errors import (
    DomainError,
    HubConnectionError,
    HubHttpError,
    HubRequestError,
    InvalidActionRequestError,
    InvalidResponseError,
    InvalidWebhookDataError,
    MissingCredentialError,
    NotFoundError,
)
from .health import ApplicationInfo, DependencyStatus, ServiceStatus, SystemHealth
from .hub import (
    ActionRequest,
    ActionResult,
    DeviceAttribute,
    DeviceCommand,
    DeviceOperation,
    HubCredential,
    HubDevice,
    ResourceType,
)
from .webhook import (
    DecisionKind,
    EventSource,
    EventType,
    TriggerFilterConfig,
    WebhookDecision,
)

__all__ = [
    "ActionRequest",
    "ActionResult",
    "DeviceAttribute",
    "DeviceCommand",
    "DeviceOperation",
    "HubCredential",
    "HubDevice",
    "ResourceType",
    "DecisionKind",
    "EventSource",
    "EventType",
    "TriggerFilterConfig",
    "WebhookDecision",
    "SystemHealth",
    "DependencyStatus",
    "ServiceStatus",
    "ApplicationInfo",
    "DomainError",
    "MissingCredentialError",
    "InvalidActionRequestError",
    "HubRequestError",
    "HubConnectionError",
    "HubHttpError",
    "NotFoundError",
    "InvalidResponseError",
    "InvalidWebhookDataError",
]
