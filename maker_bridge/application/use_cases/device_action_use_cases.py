"""
Device Action Use Cases - Application Layer

Translate action node parameters into Maker API calls, one input item at
a time, and map each response or failure to an output record.
"""

from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence

from dependency_injector.wiring import Provide, inject

from maker_bridge.application.dtos.hub_dto import (
    ActionResultDTO,
    ExecuteActionsRequestDTO,
    ExecuteActionsResponseDTO,
)
from maker_bridge.application.use_cases.base import CredentialAwareUseCase
from maker_bridge.domain.entities.errors import DomainError, MissingCredentialError
from maker_bridge.domain.entities.hub import (
    ActionRequest,
    ActionResult,
    DeviceOperation,
    HubCredential,
)
from maker_bridge.domain.gateways.maker_api_gateway import IMakerApiGateway
from maker_bridge.shared import get_logger

logger = get_logger(__name__)

_Handler = Callable[[ActionRequest, HubCredential], Awaitable[Any]]


class ExecuteDeviceActionsUseCase(CredentialAwareUseCase):
    """Run the device action node over a batch of input items."""

    @inject
    def __init__(
        self,
        maker_api_gateway: IMakerApiGateway = Provide["maker_api_gateway"],
        default_credential: Optional[HubCredential] = Provide["default_credential"],
    ):
        """
        Initialize the use case with its dependencies.

        Args:
            maker_api_gateway: Gateway for the hub's Maker API
            default_credential: Credential used when a call supplies none
        """
        self.maker_api_gateway = maker_api_gateway
        self._default_credential = default_credential
        self._handlers: Dict[DeviceOperation, _Handler] = {
            DeviceOperation.GET_ALL: self._get_all,
            DeviceOperation.GET: self._get,
            DeviceOperation.GET_ATTRIBUTE: self._get_attribute,
            DeviceOperation.SEND_COMMAND: self._send_command,
        }

    async def translate(self, action: ActionRequest, credential: HubCredential) -> Any:
        """
        Validate one action and perform its single Maker API request.

        Returns:
            The parsed response body.

        Raises:
            InvalidActionRequestError: Before any request, if a parameter is missing
            HubRequestError: If the request fails
            InvalidResponseError: If the body is not JSON
        """
        action.validate()
        handler = self._handlers[action.operation]
        return await handler(action, credential)

    async def run(
        self,
        actions: Sequence[ActionRequest],
        credential: HubCredential,
        continue_on_fail: bool = False,
    ) -> List[ActionResult]:
        """
        Translate actions sequentially, in input order.

        With ``continue_on_fail`` a failing item yields ``{"error": message}``
        and processing goes on; otherwise the error propagates and the
        remaining items are not processed.
        """
        results: List[ActionResult] = []

        for index, action in enumerate(actions):
            try:
                body = await self.translate(action, credential)
            except DomainError as e:
                e.details.setdefault("item", index)
                if not continue_on_fail:
                    logger.error(
                        "actions.item_failed",
                        item=index,
                        operation=action.operation.value,
                        error=e.message,
                    )
                    raise
                logger.warning(
                    "actions.item_failed_continuing",
                    item=index,
                    operation=action.operation.value,
                    error=e.message,
                )
                results.append(ActionResult.failure(e.message, index))
                continue

            results.append(ActionResult(json=body, paired_item=index))

        return results

    async def execute(
        self, request: ExecuteActionsRequestDTO
    ) -> ExecuteActionsResponseDTO:
        """
        Execute a batch received from the workflow host.

        Raises:
            MissingCredentialError: If no credential can be resolved
            DomainError: The first item failure when continue-on-fail is off
        """
        logger.info(
            "actions.batch_started",
            item_count=len(request.items),
            continue_on_fail=request.continue_on_fail,
        )

        try:
            credential = self.resolve_credential(request.credentials)
        except MissingCredentialError:
            logger.error("actions.credentials_missing")
            raise

        actions = [item.to_domain() for item in request.items]
        results = await self.run(actions, credential, request.continue_on_fail)

        logger.info(
            "actions.batch_completed",
            result_count=len(results),
            error_count=sum(1 for result in results if result.is_error),
        )
        return ExecuteActionsResponseDTO(
            results=[ActionResultDTO.from_domain(result) for result in results]
        )

    async def _get_all(self, action: ActionRequest, credential: HubCredential) -> Any:
        return await self.maker_api_gateway.get_all_devices(credential)

    async def _get(self, action: ActionRequest, credential: HubCredential) -> Any:
        return await self.maker_api_gateway.get_device(credential, action.device_id)

    async def _get_attribute(
        self, action: ActionRequest, credential: HubCredential
    ) -> Any:
        return await self.maker_api_gateway.get_device_attribute(
            credential, action.device_id, action.attribute
        )

    async def _send_command(
        self, action: ActionRequest, credential: HubCredential
    ) -> Any:
        return await self.maker_api_gateway.send_command(
            credential,
            action.device_id,
            action.command,
            action.command_arguments(),
        )
