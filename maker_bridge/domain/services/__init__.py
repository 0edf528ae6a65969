"""Domain services: pure functions over domain entities."""

from .maker_api_urls import (
    all_devices_url,
    device_attribute_url,
    device_commands_url,
    device_url,
    send_command_url,
)
from .webhook_filter import WEBHOOK_TIME_FIELD, ensure_event_body, filter_event

__all__ = [
    "WEBHOOK_TIME_FIELD",
    "all_devices_url",
    "device_attribute_url",
    "device_commands_url",
    "device_url",
    "ensure_event_body",
    "filter_event",
    "send_command_url",
]
