"""Use case exposing the credential schema to the workflow host."""

from maker_bridge.application.dtos.credential_dto import (
    CredentialPropertyDTO,
    CredentialSchemaDTO,
)

CREDENTIAL_NAME = "hubitatApi"
DOCUMENTATION_URL = "https://docs.hubitat.com/index.php?title=Maker_API"
DEFAULT_HUB_HOST = "http://192.168.0.100"


class GetCredentialSchemaUseCase:
    """Describe the fields a workflow host must collect for a hub credential."""

    def __init__(self, default_host: str = DEFAULT_HUB_HOST) -> None:
        self._default_host = default_host or DEFAULT_HUB_HOST

    def execute(self) -> CredentialSchemaDTO:
        return CredentialSchemaDTO(
            name=CREDENTIAL_NAME,
            display_name="Hubitat API",
            documentation_url=DOCUMENTATION_URL,
            properties=[
                CredentialPropertyDTO(
                    name="hubitatHost",
                    display_name="Hubitat Host",
                    default=self._default_host,
                    placeholder=DEFAULT_HUB_HOST,
                    description="The IP address or hostname of your Hubitat hub",
                ),
                CredentialPropertyDTO(
                    name="appId",
                    display_name="App ID",
                    description="The Maker API App ID",
                ),
                CredentialPropertyDTO(
                    name="accessToken",
                    display_name="Access Token",
                    description="The access token for the Maker API",
                    password=True,
                ),
            ],
        )
