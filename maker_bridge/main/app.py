"""
FastAPI application for Maker Bridge.

Importing this module loads the settings, reconfigures logging from them and
builds ``app``, the ASGI entry point served by uvicorn.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from maker_bridge.main.config import get_settings
from maker_bridge.main.container import app_lifespan, init_container
from maker_bridge.presentation.controllers import (
    actions_router,
    credentials_router,
    options_router,
    system_router,
    webhook_router,
)
from maker_bridge.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

ROUTERS = (
    credentials_router,
    actions_router,
    options_router,
    webhook_router,
    system_router,
)

# Env-only logging while settings load
configure_logging()
settings = get_settings()
update_logging_from_settings(settings)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("app.startup", version=app.version)

    async with app_lifespan() as container:
        app.state.container = container
        yield

    uptime = datetime.now(timezone.utc) - app.state.started_at
    logger.info("app.shutdown", uptime_seconds=round(uptime.total_seconds(), 1))


def create_app() -> FastAPI:
    """
    Build a fresh container and the app that serves it.

    The workflow host calls ``/credentials``, ``/actions`` and ``/options``;
    the hub posts to ``/webhook``. ``app.state.started_at`` is set here and
    again on startup so ``/info`` has an uptime even without a lifespan.
    """
    current = get_settings()
    container = init_container(current)

    app = FastAPI(
        title=current.service.title,
        description=current.service.description,
        version=current.service.version,
        lifespan=lifespan,
    )
    app.state.container = container
    app.state.started_at = datetime.now(timezone.utc)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    for router in ROUTERS:
        app.include_router(router)

    return app


app = create_app()
