"""Port through which forwarded hub events start workflow runs."""

from __future__ import annotations

from typing import Any, Dict, Protocol


class IWorkflowDispatcher(Protocol):
    """Deliver a forwarded event to the workflow host."""

    async def dispatch(self, event: Dict[str, Any]) -> None:
        """
        Hand one augmented event over to the workflow host.

        Raises:
            Exception: If the host could not accept the event
        """
        ...
