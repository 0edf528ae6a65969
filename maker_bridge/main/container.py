"""
Providers for everything the routers need: the default hub credential, the
Maker API gateway, the workflow dispatcher and the use cases built on them.
"""

from contextlib import asynccontextmanager
from typing import Iterable, Optional

from dependency_injector import containers, providers

from maker_bridge.application.models import SystemInfo
from maker_bridge.application.use_cases.credential_use_cases import (
    GetCredentialSchemaUseCase,
)
from maker_bridge.application.use_cases.device_action_use_cases import (
    ExecuteDeviceActionsUseCase,
)
from maker_bridge.application.use_cases.device_option_use_cases import (
    ListAttributeOptionsUseCase,
    ListCommandOptionsUseCase,
    ListDeviceOptionsUseCase,
)
from maker_bridge.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from maker_bridge.application.use_cases.webhook_use_cases import (
    HandleWebhookEventUseCase,
)
from maker_bridge.domain.entities.hub import HubCredential
from maker_bridge.domain.entities.webhook import TriggerFilterConfig
from maker_bridge.infrastructure.gateways.maker_api_gateway import MakerApiGateway
from maker_bridge.infrastructure.services.health_check_service import (
    HealthCheckService,
)
from maker_bridge.infrastructure.services.workflow_dispatcher import (
    HttpWorkflowDispatcher,
)
from maker_bridge.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def build_default_credential(
    host: Optional[str], app_id: Optional[str], access_token: Optional[str]
) -> Optional[HubCredential]:
    """Credential used when a request carries none; ``None`` if incomplete."""
    if not host or not app_id or not access_token:
        return None
    return HubCredential(host=host, app_id=str(app_id), access_token=access_token)


def build_trigger_defaults(
    event_type: Optional[str],
    custom_event_type: Optional[str],
    filter_by_device: Optional[bool],
    device_ids: Optional[Iterable[str]],
) -> TriggerFilterConfig:
    return TriggerFilterConfig(
        event_type=event_type or "allEvents",
        custom_event_type=custom_event_type or None,
        filter_by_device=bool(filter_by_device),
        device_ids=frozenset(str(device_id) for device_id in device_ids or ()),
    )


class AppContainer(containers.DeclarativeContainer):
    """Wires the presentation and application packages on instantiation."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    default_credential = providers.Singleton(
        build_default_credential,
        host=config.hubitat.host,
        app_id=config.hubitat.app_id,
        access_token=config.hubitat.access_token,
    )

    trigger_defaults = providers.Singleton(
        build_trigger_defaults,
        event_type=config.trigger.event_type,
        custom_event_type=config.trigger.custom_event_type,
        filter_by_device=config.trigger.filter_by_device,
        device_ids=config.trigger.device_ids,
    )

    # Gateways
    maker_api_gateway = providers.Singleton(
        MakerApiGateway,
        timeout=config.hubitat.timeout,
    )

    # Infrastructure services
    workflow_dispatcher = providers.Singleton(
        HttpWorkflowDispatcher,
        forward_url=config.workflow.forward_url,
        auth_token=config.workflow.auth_token,
        timeout=config.workflow.timeout,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        maker_api_gateway=maker_api_gateway,
        default_credential=default_credential,
        workflow_forward_url=config.workflow.forward_url,
        http_timeout=config.hubitat.timeout,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.service.title,
        description=config.service.description,
        version=config.service.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.service.git_commit,
        build_time=config.service.build_time,
        hubitat_host=config.hubitat.host,
        hubitat_configured=providers.Callable(
            lambda credential: credential is not None, default_credential
        ),
        workflow_forward_url=config.workflow.forward_url,
    )

    # Use cases
    get_credential_schema_use_case = providers.Factory(GetCredentialSchemaUseCase)

    execute_device_actions_use_case = providers.Factory(
        ExecuteDeviceActionsUseCase,
        maker_api_gateway=maker_api_gateway,
        default_credential=default_credential,
    )

    list_device_options_use_case = providers.Factory(
        ListDeviceOptionsUseCase,
        maker_api_gateway=maker_api_gateway,
        default_credential=default_credential,
    )

    list_attribute_options_use_case = providers.Factory(
        ListAttributeOptionsUseCase,
        maker_api_gateway=maker_api_gateway,
        default_credential=default_credential,
    )

    list_command_options_use_case = providers.Factory(
        ListCommandOptionsUseCase,
        maker_api_gateway=maker_api_gateway,
        default_credential=default_credential,
    )

    handle_webhook_event_use_case = providers.Factory(
        HandleWebhookEventUseCase,
        workflow_dispatcher=workflow_dispatcher,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# The container built by the most recent create_app()
_app_container: Optional[AppContainer] = None


def init_container(settings: AppSettings) -> AppContainer:
    """Build a container from ``settings`` and make it the current one."""
    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Return the container built by ``init_container``."""
    if _app_container is None:
        raise RuntimeError("init_container() has not been called")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Lifecycle hook for the FastAPI lifespan.

    No connection is pooled: every outbound call opens its own httpx
    client, so startup only reports which integrations are configured.
    """
    container = get_container()

    logger.info(
        "container.resources.initialized",
        hubitat_configured=container.default_credential() is not None,
        workflow_configured=bool(container.config.workflow.forward_url()),
    )
    try:
        yield container
    finally:
        logger.info("container.resources.shutdown")
