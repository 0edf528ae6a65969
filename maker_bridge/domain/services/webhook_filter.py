"""Domain service deciding whether an inbound hub event reaches a workflow."""

from datetime import datetime
from typing import Any, Dict, Optional

from maker_bridge.domain.entities.errors import InvalidWebhookDataError
from maker_bridge.domain.entities.webhook import (
    EventSource,
    EventType,
    TriggerFilterConfig,
    WebhookDecision,
)
from maker_bridge.shared.formatting import iso_timestamp

WEBHOOK_TIME_FIELD = "webhookTime"

_REQUIRED_SOURCES = {
    EventType.DEVICE_EVENT.value: EventSource.DEVICE.value,
    EventType.MODE_EVENT.value: EventSource.MODE.value,
    EventType.LOCATION_EVENT.value: EventSource.LOCATION.value,
}

_DEVICE_FILTERED_TYPES = {EventType.DEVICE_EVENT.value, EventType.ALL_EVENTS.value}


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def _source_matches(body: Dict[str, Any], config: TriggerFilterConfig) -> bool:
    event_type = config.event_type
    source = body.get("source")
    if event_type == EventType.ALL_EVENTS.value or not _is_present(source):
        return True
    if event_type in _REQUIRED_SOURCES:
        return source == _REQUIRED_SOURCES[event_type]
    if event_type == EventType.CUSTOM.value:
        return source == config.custom_event_type
    return True


def _device_matches(body: Dict[str, Any], config: TriggerFilterConfig) -> bool:
    device_id = body.get("deviceId")
    if (
        config.event_type not in _DEVICE_FILTERED_TYPES
        or not _is_present(device_id)
        or not config.filter_by_device
    ):
        return True
    return bool(config.device_ids) and str(device_id) in config.device_ids


def ensure_event_body(body: Any) -> Dict[str, Any]:
    """
    Return ``body`` if it is a JSON object.

    Raises:
        InvalidWebhookDataError: If the body is absent or not an object.
    """
    if not isinstance(body, dict):
        raise InvalidWebhookDataError({"received_type": type(body).__name__})
    return body


def filter_event(
    body: Any,
    config: TriggerFilterConfig,
    now: Optional[datetime] = None,
) -> WebhookDecision:
    """Apply the trigger configuration to one inbound event.

    Rules are checked in order: body shape, event source, device filter.
    A forwarded event is a copy of ``body`` with ``webhookTime`` set to
    ``now`` (current UTC time by default).
    """
    try:
        event = ensure_event_body(body)
    except InvalidWebhookDataError as exc:
        return WebhookDecision.error(exc.message)

    if not _source_matches(event, config):
        return WebhookDecision.skipped()
    if not _device_matches(event, config):
        return WebhookDecision.skipped()

    return WebhookDecision.forward({**event, WEBHOOK_TIME_FIELD: iso_timestamp(now)})
