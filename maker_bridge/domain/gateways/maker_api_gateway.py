"""
Maker API Gateway Interface - Domain Layer

This module defines the interface for communicating with a hub's Maker API.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Sequence

from maker_bridge.domain.entities.hub import (
    DeviceAttribute,
    DeviceCommand,
    HubCredential,
    HubDevice,
)


class IMakerApiGateway(ABC):
    """Interface for the Maker API gateway.

    The ``get_*``/``send_command`` methods return the parsed JSON body
    untouched. The ``list_*`` methods parse it for selection lists.
    Every method performs exactly one GET request.
    """

    @abstractmethod
    async def get_all_devices(self, credential: HubCredential) -> Any:
        """
        Retrieve every device exposed by the Maker API app.

        Raises:
            HubRequestError: If the hub is unreachable or answers non-2xx
            InvalidResponseError: If the body is not JSON
        """
        pass

    @abstractmethod
    async def get_device(self, credential: HubCredential, device_id: str) -> Any:
        """Retrieve a single device with its attributes."""
        pass

    @abstractmethod
    async def get_device_attribute(
        self, credential: HubCredential, device_id: str, attribute: str
    ) -> Any:
        """Retrieve one attribute of a device."""
        pass

    @abstractmethod
    async def send_command(
        self,
        credential: HubCredential,
        device_id: str,
        command: str,
        arguments: Sequence[str] = (),
    ) -> Any:
        """Send a command to a device, appending ``arguments`` verbatim."""
        pass

    @abstractmethod
    async def list_devices(self, credential: HubCredential) -> List[HubDevice]:
        """
        Retrieve all devices as domain entities.

        Raises:
            InvalidResponseError: If the payload is not a list
        """
        pass

    @abstractmethod
    async def list_device_attributes(
        self, credential: HubCredential, device_id: str
    ) -> List[DeviceAttribute]:
        """
        Retrieve the attributes of a device.

        Raises:
            NotFoundError: If the device payload has no attributes field
        """
        pass

    @abstractmethod
    async def list_device_commands(
        self, credential: HubCredential, device_id: str
    ) -> List[DeviceCommand]:
        """
        Retrieve the commands of a device, in hub order.

        Raises:
            InvalidResponseError: If the payload is not a list
        """
        pass
