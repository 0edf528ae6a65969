"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class MissingCredentialError(DomainError):
    """Raised when neither the request nor the settings provide a hub credential."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            "No Hubitat credentials supplied and no default credentials configured",
            details,
        )


class InvalidActionRequestError(DomainError):
    """Raised when an action request is missing a required parameter."""


class HubRequestError(DomainError):
    """Raised when a request to the hub's Maker API fails."""


class HubConnectionError(HubRequestError):
    """Raised when the hub cannot be reached."""


class HubHttpError(HubRequestError):
    """Raised when the hub answers with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        super().__init__(message, details)


class NotFoundError(DomainError):
    """Raised when an expected field is missing from a hub response."""


class InvalidResponseError(DomainError):
    """Raised when a hub response does not have the expected shape."""


class InvalidWebhookDataError(DomainError):
    """Raised when an inbound webhook body is absent or not a JSON object."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("Invalid webhook data received", details)
