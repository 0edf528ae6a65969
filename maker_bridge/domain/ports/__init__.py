"""Domain ports package."""

from .health_check import IHealthCheckService
from .workflow_dispatcher import IWorkflowDispatcher

__all__ = ["IHealthCheckService", "IWorkflowDispatcher"]
