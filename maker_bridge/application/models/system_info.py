"""Static facts about the running bridge, resolved once from settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from maker_bridge.shared.formatting import redact_url


@dataclass(frozen=True)
class SystemInfo:
    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    hubitat_host: Optional[str]
    hubitat_configured: bool
    workflow_forward_url: Optional[str]

    def redacted_config(self) -> Dict[str, Any]:
        """Configuration safe to show on ``/info``: no tokens or passwords."""
        return {
            "environment": self.environment,
            "hubitat": {
                "host": redact_url(self.hubitat_host or ""),
                "default_credentials": self.hubitat_configured,
            },
            "workflow": {
                "forward_url": redact_url(self.workflow_forward_url or ""),
            },
        }
