"""
Webhook Router - Presentation Layer

Receives the events the hub's Maker API posts to its configured
"URL to send device events to". The trigger configuration travels in the
query string and falls back to the configured defaults.
"""

from typing import Any, List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query, Request

from maker_bridge.application.dtos.webhook_dto import WebhookResponseDTO, WebhookStatus
from maker_bridge.application.use_cases.webhook_use_cases import (
    HandleWebhookEventUseCase,
)
from maker_bridge.domain.entities.webhook import TriggerFilterConfig
from maker_bridge.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/webhook", tags=["Webhook"])


def _split_device_ids(values: List[str]) -> frozenset:
    """Accept both ``deviceIds=1&deviceIds=2`` and ``deviceIds=1,2``."""
    return frozenset(
        part.strip() for value in values for part in value.split(",") if part.strip()
    )


async def _read_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None


@router.post("", response_model=WebhookResponseDTO, response_model_exclude_none=True)
@inject
async def receive_event(
    request: Request,
    event_type: Optional[str] = Query(default=None, alias="eventType"),
    custom_event_type: Optional[str] = Query(default=None, alias="customEventType"),
    filter_by_device: Optional[bool] = Query(default=None, alias="filterByDevice"),
    device_ids: Optional[List[str]] = Query(default=None, alias="deviceIds"),
    trigger_defaults: TriggerFilterConfig = Depends(Provide["trigger_defaults"]),
    handle_webhook_event_use_case: HandleWebhookEventUseCase = Depends(
        Provide["handle_webhook_event_use_case"]
    ),
) -> WebhookResponseDTO:
    """
    Filter one hub event and forward it to the workflow host.

    Always answers 200 with ``{"status": "success" | "skipped" | "error"}``.
    """
    config = TriggerFilterConfig(
        event_type=event_type or trigger_defaults.event_type,
        custom_event_type=(
            custom_event_type
            if custom_event_type is not None
            else trigger_defaults.custom_event_type
        ),
        filter_by_device=(
            filter_by_device
            if filter_by_device is not None
            else trigger_defaults.filter_by_device
        ),
        device_ids=(
            _split_device_ids(device_ids)
            if device_ids is not None
            else trigger_defaults.device_ids
        ),
    )
    body = await _read_body(request)

    try:
        return await handle_webhook_event_use_case.execute(body, config)
    except Exception as e:
        logger.error("webhook.unexpected_error", error=str(e), exc_info=e)
        return WebhookResponseDTO(status=WebhookStatus.ERROR, message=str(e))
