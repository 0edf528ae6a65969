"""
Webhook Use Cases - Application Layer

Filter inbound hub events against the trigger configuration and hand
matching ones to the workflow host.
"""

from typing import Any

from dependency_injector.wiring import Provide, inject

from maker_bridge.application.dtos.webhook_dto import WebhookResponseDTO
from maker_bridge.domain.entities.webhook import (
    DecisionKind,
    TriggerFilterConfig,
    WebhookDecision,
)
from maker_bridge.domain.ports.workflow_dispatcher import IWorkflowDispatcher
from maker_bridge.domain.services.webhook_filter import filter_event
from maker_bridge.shared import get_logger

logger = get_logger(__name__)


class HandleWebhookEventUseCase:
    """Use case for one inbound webhook delivery.

    Every delivery is handled on its own; retried deliveries from the hub
    are forwarded again with a fresh ``webhookTime``.
    """

    @inject
    def __init__(
        self,
        workflow_dispatcher: IWorkflowDispatcher = Provide["workflow_dispatcher"],
    ):
        self.workflow_dispatcher = workflow_dispatcher

    async def execute(
        self, body: Any, config: TriggerFilterConfig
    ) -> WebhookResponseDTO:
        decision = filter_event(body, config)

        if decision.kind == DecisionKind.ERROR:
            logger.warning("webhook.invalid_body", message=decision.message)
            return WebhookResponseDTO.from_decision(decision)

        if decision.kind == DecisionKind.SKIPPED:
            logger.info(
                "webhook.skipped",
                event_type=config.event_type,
                source=body.get("source"),
                device_id=body.get("deviceId"),
            )
            return WebhookResponseDTO.from_decision(decision)

        try:
            await self.workflow_dispatcher.dispatch(decision.event)
        except Exception as e:
            logger.error("webhook.dispatch_failed", error=str(e), exc_info=e)
            return WebhookResponseDTO.from_decision(
                WebhookDecision.error(f"Failed to start workflow: {str(e)}")
            )

        logger.info(
            "webhook.forwarded",
            event_type=config.event_type,
            source=decision.event.get("source"),
            device_id=decision.event.get("deviceId"),
            name=decision.event.get("name"),
        )
        return WebhookResponseDTO.from_decision(decision)
