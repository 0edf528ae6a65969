"""Construction of Maker API request URLs.

The access token travels in the query string and command arguments are
appended verbatim, so URLs are assembled as plain strings rather than
through an encoder.
"""

from typing import Sequence

from maker_bridge.domain.entities.hub import HubCredential
from maker_bridge.shared.consts import ACCESS_TOKEN_PARAM


def _with_token(credential: HubCredential, path: str) -> str:
    return f"{credential.base_url}{path}?{ACCESS_TOKEN_PARAM}={credential.access_token}"


def all_devices_url(credential: HubCredential) -> str:
    return _with_token(credential, "/devices/all")


def device_url(credential: HubCredential, device_id: str) -> str:
    return _with_token(credential, f"/devices/{device_id}")


def device_attribute_url(
    credential: HubCredential, device_id: str, attribute: str
) -> str:
    return _with_token(credential, f"/devices/{device_id}/attribute/{attribute}")


def device_commands_url(credential: HubCredential, device_id: str) -> str:
    return _with_token(credential, f"/devices/{device_id}/commands")


def send_command_url(
    credential: HubCredential,
    device_id: str,
    command: str,
    arguments: Sequence[str] = (),
) -> str:
    """Build a command URL; each argument becomes ``&<argument>`` in order."""
    url = _with_token(credential, f"/devices/{device_id}/{command}")
    for argument in arguments:
        url += f"&{argument}"
    return url
