"""Domain entities for inbound hub events."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional


class EventType(str, Enum):
    """Event categories a trigger can listen for."""

    ALL_EVENTS = "allEvents"
    DEVICE_EVENT = "deviceEvent"
    MODE_EVENT = "modeEvent"
    LOCATION_EVENT = "locationEvent"
    CUSTOM = "custom"


class EventSource(str, Enum):
    """Values of the ``source`` field sent by the hub."""

    DEVICE = "DEVICE"
    MODE = "MODE"
    LOCATION = "LOCATION"


class DecisionKind(str, Enum):
    FORWARD = "forward"
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class TriggerFilterConfig:
    """Trigger configuration applied to each inbound event.

    ``event_type`` stays a plain string: values outside :class:`EventType`
    are accepted and skip the source check.
    """

    event_type: str = EventType.ALL_EVENTS.value
    custom_event_type: Optional[str] = None
    filter_by_device: bool = False
    device_ids: FrozenSet[str] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class WebhookDecision:
    """Outcome of filtering one inbound event."""

    kind: DecisionKind
    message: Optional[str] = None
    event: Optional[Dict[str, Any]] = None

    @classmethod
    def error(cls, message: str) -> "WebhookDecision":
        return cls(kind=DecisionKind.ERROR, message=message)

    @classmethod
    def skipped(cls) -> "WebhookDecision":
        return cls(kind=DecisionKind.SKIPPED)

    @classmethod
    def forward(cls, event: Dict[str, Any]) -> "WebhookDecision":
        return cls(kind=DecisionKind.FORWARD, event=event)
