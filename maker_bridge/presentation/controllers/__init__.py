"""
Controllers Package - Presentation Layer

FastAPI routers handling HTTP requests and responses. Controllers map
between API DTOs and application use cases and turn domain errors into
HTTP status codes.
"""

from .actions_controller import router as actions_router
from .credentials_controller import router as credentials_router
from .options_controller import router as options_router
from .system_controller import router as system_router
from .webhook_controller import router as webhook_router

__all__ = [
    "actions_router",
    "credentials_router",
    "options_router",
    "system_router",
    "webhook_router",
]
