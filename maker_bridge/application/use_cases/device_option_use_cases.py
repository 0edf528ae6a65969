"""
Device Option Use Cases - Application Layer

Read-only lookups that populate the device, attribute and command pickers
of both the action node and the trigger node.
"""

from typing import List, Optional

from dependency_injector.wiring import Provide, inject

from maker_bridge.application.dtos.hub_dto import HubCredentialDTO
from maker_bridge.application.dtos.options_dto import (
    AttributeOptionDTO,
    CommandOptionDTO,
    DeviceOptionDTO,
)
from maker_bridge.application.use_cases.base import CredentialAwareUseCase
from maker_bridge.domain.entities.hub import HubCredential
from maker_bridge.domain.gateways.maker_api_gateway import IMakerApiGateway
from maker_bridge.shared import get_logger

logger = get_logger(__name__)


class _OptionUseCase(CredentialAwareUseCase):
    @inject
    def __init__(
        self,
        maker_api_gateway: IMakerApiGateway = Provide["maker_api_gateway"],
        default_credential: Optional[HubCredential] = Provide["default_credential"],
    ):
        self.maker_api_gateway = maker_api_gateway
        self._default_credential = default_credential


class ListDeviceOptionsUseCase(_OptionUseCase):
    """List the hub's devices, optionally filtered by name or label."""

    async def execute(
        self,
        query: Optional[str] = None,
        credentials: Optional[HubCredentialDTO] = None,
    ) -> List[DeviceOptionDTO]:
        credential = self.resolve_credential(credentials)

        try:
            devices = await self.maker_api_gateway.list_devices(credential)
        except Exception as e:
            logger.error("options.devices.failed", error=str(e))
            raise

        if query:
            devices = [device for device in devices if device.matches(query)]

        logger.info("options.devices.loaded", count=len(devices), query=query)
        return [DeviceOptionDTO.from_domain(device) for device in devices]


class ListAttributeOptionsUseCase(_OptionUseCase):
    """List the attributes of one device with their current values."""

    async def execute(
        self,
        device_id: Optional[str],
        credentials: Optional[HubCredentialDTO] = None,
    ) -> List[AttributeOptionDTO]:
        if not device_id:
            return [AttributeOptionDTO.select_device_first()]

        credential = self.resolve_credential(credentials)

        try:
            attributes = await self.maker_api_gateway.list_device_attributes(
                credential, device_id
            )
        except Exception as e:
            logger.error("options.attributes.failed", device_id=device_id, error=str(e))
            raise

        logger.info(
            "options.attributes.loaded", device_id=device_id, count=len(attributes)
        )
        return [AttributeOptionDTO.from_domain(attribute) for attribute in attributes]


class ListCommandOptionsUseCase(_OptionUseCase):
    """List the commands a device supports, in hub order."""

    async def execute(
        self,
        device_id: Optional[str],
        credentials: Optional[HubCredentialDTO] = None,
    ) -> List[CommandOptionDTO]:
        if not device_id:
            return [CommandOptionDTO.select_device_first()]

        credential = self.resolve_credential(credentials)

        try:
            commands = await self.maker_api_gateway.list_device_commands(
                credential, device_id
            )
        except Exception as e:
            logger.error("options.commands.failed", device_id=device_id, error=str(e))
            raise

        logger.info("options.commands.loaded", device_id=device_id, count=len(commands))
        return [CommandOptionDTO.from_domain(command) for command in commands]
