"""Translation of domain errors into HTTP errors."""

from fastapi import HTTPException, status

from maker_bridge.domain.entities.errors import (
    DomainError,
    HubRequestError,
    InvalidActionRequestError,
    InvalidResponseError,
    MissingCredentialError,
    NotFoundError,
)

_STATUS_BY_ERROR = (
    (MissingCredentialError, status.HTTP_400_BAD_REQUEST),
    (InvalidActionRequestError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (HubRequestError, status.HTTP_502_BAD_GATEWAY),
    (InvalidResponseError, status.HTTP_502_BAD_GATEWAY),
)


def http_error_for(error: DomainError, prefix: str = "") -> HTTPException:
    """Build the HTTPException matching a domain error."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            status_code = code
            break
    return HTTPException(status_code=status_code, detail=f"{prefix}{error.message}")
