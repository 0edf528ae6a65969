"""Maker API gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import httpx
from dependency_injector.wiring import inject

from maker_bridge.domain.entities.errors import (
    HubConnectionError,
    HubHttpError,
    InvalidResponseError,
    NotFoundError,
)
from maker_bridge.domain.entities.hub import (
    DeviceAttribute,
    DeviceCommand,
    HubCredential,
    HubDevice,
)
from maker_bridge.domain.gateways.maker_api_gateway import IMakerApiGateway
from maker_bridge.domain.services import maker_api_urls
from maker_bridge.shared import get_logger, redact_url

logger = get_logger(__name__)

JSON_HEADERS = {"Accept": "application/json"}


class MakerApiGateway(IMakerApiGateway):
    """HTTP client for a Hubitat hub's Maker API."""

    @inject
    def __init__(self, timeout: float = 5.0):
        """
        Initialize the Maker API gateway.

        Args:
            timeout: Seconds before an outbound request is abandoned
        """
        self.timeout = timeout

    async def get_all_devices(self, credential: HubCredential) -> Any:
        return await self._get(
            maker_api_urls.all_devices_url(credential), operation="devices.all"
        )

    async def get_device(self, credential: HubCredential, device_id: str) -> Any:
        return await self._get(
            maker_api_urls.device_url(credential, device_id),
            operation="device.get",
            device_id=device_id,
        )

    async def get_device_attribute(
        self, credential: HubCredential, device_id: str, attribute: str
    ) -> Any:
        return await self._get(
            maker_api_urls.device_attribute_url(credential, device_id, attribute),
            operation="device.attribute",
            device_id=device_id,
            attribute=attribute,
        )

    async def send_command(
        self,
        credential: HubCredential,
        device_id: str,
        command: str,
        arguments: Sequence[str] = (),
    ) -> Any:
        return await self._get(
            maker_api_urls.send_command_url(credential, device_id, command, arguments),
            operation="device.command",
            device_id=device_id,
            command=command,
            argument_count=len(arguments),
        )

    async def list_devices(self, credential: HubCredential) -> List[HubDevice]:
        payload = await self._get(
            maker_api_urls.all_devices_url(credential),
            operation="options.devices",
            headers=JSON_HEADERS,
        )
        if not isinstance(payload, list):
            raise InvalidResponseError(
                "Invalid response from Hubitat API",
                {"received_type": type(payload).__name__},
            )
        return [self._parse_device(item) for item in payload if isinstance(item, dict)]

    async def list_device_attributes(
        self, credential: HubCredential, device_id: str
    ) -> List[DeviceAttribute]:
        payload = await self._get(
            maker_api_urls.device_url(credential, device_id),
            operation="options.attributes",
            headers=JSON_HEADERS,
            device_id=device_id,
        )
        if not isinstance(payload, dict) or payload.get("attributes") is None:
            raise NotFoundError(
                "Device attributes not found in the response",
                {"device_id": device_id},
            )
        attributes = payload["attributes"]
        if not isinstance(attributes, list):
            raise InvalidResponseError(
                "Device attributes are not a list",
                {"device_id": device_id},
            )
        return [
            self._parse_attribute(item) for item in attributes if isinstance(item, dict)
        ]

    async def list_device_commands(
        self, credential: HubCredential, device_id: str
    ) -> List[DeviceCommand]:
        payload = await self._get(
            maker_api_urls.device_commands_url(credential, device_id),
            operation="options.commands",
            headers=JSON_HEADERS,
            device_id=device_id,
        )
        if not isinstance(payload, list):
            raise InvalidResponseError(
                "Invalid response format from Hubitat API",
                {"device_id": device_id, "received_type": type(payload).__name__},
            )
        return [self._parse_command(item) for item in payload if item]

    async def _get(
        self,
        url: str,
        *,
        operation: str,
        headers: Optional[Dict[str, str]] = None,
        **context: Any,
    ) -> Any:
        """
        Issue one GET request and decode its JSON body.

        Raises:
            HubHttpError: If the hub answers with a non-2xx status
            HubConnectionError: If the request cannot be completed
            InvalidResponseError: If the body is not valid JSON
        """
        safe_url = redact_url(url)
        logger.info("maker_api.request", operation=operation, url=safe_url, **context)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, headers=headers or {})
                response.raise_for_status()

                payload = response.json()
                logger.info(
                    "maker_api.response",
                    operation=operation,
                    status_code=response.status_code,
                    **context,
                )
                return payload

        except httpx.HTTPStatusError as e:
            logger.error(
                "maker_api.http_error",
                operation=operation,
                status_code=e.response.status_code,
                response_text=e.response.text,
                url=safe_url,
                **context,
            )
            raise HubHttpError(
                e.response.status_code,
                f"Hubitat returned HTTP {e.response.status_code}: {e.response.text}",
                {"operation": operation, **context},
            ) from e

        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error(
                "maker_api.request_error",
                operation=operation,
                error=redact_url(str(e)),
                url=safe_url,
                **context,
            )
            raise HubConnectionError(
                f"Failed to communicate with Hubitat: {redact_url(str(e))}",
                {"operation": operation, **context},
            ) from e

        except ValueError as e:
            logger.error(
                "maker_api.invalid_json",
                operation=operation,
                error=str(e),
                url=safe_url,
                **context,
            )
            raise InvalidResponseError(
                f"Hubitat returned a non-JSON body: {str(e)}",
                {"operation": operation, **context},
            ) from e

    def _parse_device(self, data: Dict[str, Any]) -> HubDevice:
        return HubDevice(
            id=str(data.get("id", "")),
            name=str(data.get("name") or ""),
            label=str(data.get("label") or ""),
            type=str(data.get("type") or ""),
        )

    def _parse_attribute(self, data: Dict[str, Any]) -> DeviceAttribute:
        data_type = data.get("dataType")
        return DeviceAttribute(
            name=str(data.get("name", "")),
            current_value=data.get("currentValue"),
            data_type=str(data_type) if data_type else None,
        )

    def _parse_command(self, data: Any) -> DeviceCommand:
        if not isinstance(data, dict):
            return DeviceCommand(command=str(data))
        parameters = data.get("parameters") or []
        if not isinstance(parameters, list):
            parameters = [parameters]
        return DeviceCommand(
            command=str(data.get("command", "")),
            parameters=[str(parameter) for parameter in parameters],
        )
