"""HTTP delivery of forwarded hub events to the workflow host."""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from maker_bridge.domain.ports.workflow_dispatcher import IWorkflowDispatcher
from maker_bridge.shared import get_logger, redact_url

logger = get_logger(__name__)


class HttpWorkflowDispatcher(IWorkflowDispatcher):
    """POST each forwarded event as JSON to the configured workflow URL.

    Without a URL the event is only logged.
    """

    def __init__(
        self,
        forward_url: Optional[str] = None,
        auth_token: Optional[str] = None,
        timeout: float = 8.0,
    ) -> None:
        self._forward_url = forward_url or None
        self._auth_token = auth_token or None
        self._timeout = timeout

    @property
    def forward_url(self) -> Optional[str]:
        return self._forward_url

    async def dispatch(self, event: Dict[str, Any]) -> None:
        if not self._forward_url:
            logger.info("workflow.dispatch.no_target", event_fields=sorted(event))
            return

        headers = {"Content-Type": "application/json"}
        if self._auth_token:
            headers["Authorization"] = f"Bearer {self._auth_token}"

        url = redact_url(self._forward_url)
        logger.debug("workflow.dispatch.request", url=url)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    self._forward_url, json=event, headers=headers
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "workflow.dispatch.http_error",
                status_code=e.response.status_code,
                url=url,
            )
            raise Exception(
                f"Workflow host returned HTTP {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            logger.error("workflow.dispatch.request_error", error=str(e), url=url)
            raise Exception(f"Failed to reach workflow host: {str(e)}") from e

        logger.info("workflow.dispatch.delivered", status_code=response.status_code)
