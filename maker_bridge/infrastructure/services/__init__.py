"""Infrastructure services: health checks and workflow delivery."""

from .health_check_service import HealthCheckService
from .workflow_dispatcher import HttpWorkflowDispatcher

__all__ = ["HealthCheckService", "HttpWorkflowDispatcher"]
