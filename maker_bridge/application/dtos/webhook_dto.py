"""DTOs for the webhook trigger endpoint."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from maker_bridge.domain.entities.webhook import DecisionKind, WebhookDecision


class WebhookStatus(str, Enum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    ERROR = "error"


_STATUS_BY_DECISION = {
    DecisionKind.FORWARD: WebhookStatus.SUCCESS,
    DecisionKind.SKIPPED: WebhookStatus.SKIPPED,
    DecisionKind.ERROR: WebhookStatus.ERROR,
}


class WebhookResponseDTO(BaseModel):
    """Status payload returned to the hub for every delivery."""

    status: WebhookStatus = Field(description="Outcome of the delivery")
    message: Optional[str] = Field(default=None)

    @classmethod
    def from_decision(cls, decision: WebhookDecision) -> "WebhookResponseDTO":
        return cls(status=_STATUS_BY_DECISION[decision.kind], message=decision.message)

    model_config = {
        "json_schema_extra": {
            "example": {"status": "error", "message": "Invalid webhook data received"}
        }
    }
