"""Shared behaviour for use cases that talk to the hub."""

from typing import Optional

from maker_bridge.application.dtos.hub_dto import HubCredentialDTO
from maker_bridge.domain.entities.errors import MissingCredentialError
from maker_bridge.domain.entities.hub import HubCredential


class CredentialAwareUseCase:
    """Resolve the credential of a call: explicit first, then the default."""

    _default_credential: Optional[HubCredential] = None

    def resolve_credential(
        self, credential: Optional[HubCredentialDTO | HubCredential] = None
    ) -> HubCredential:
        """
        Raises:
            MissingCredentialError: If no credential is available.
        """
        if isinstance(credential, HubCredentialDTO):
            return credential.to_domain()
        if credential is not None:
            return credential
        if self._default_credential is None:
            raise MissingCredentialError()
        return self._default_credential
