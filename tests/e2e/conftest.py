from __future__ import annotations

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from maker_bridge.domain.entities.webhook import TriggerFilterConfig
from maker_bridge.main.app import create_app
from maker_bridge.main.container import get_container


@pytest.fixture()
def app(fake_gateway, credential, dispatcher):
    application = create_app()
    container = get_container()
    container.maker_api_gateway.override(providers.Object(fake_gateway))
    container.default_credential.override(providers.Object(credential))
    container.workflow_dispatcher.override(providers.Object(dispatcher))
    container.trigger_defaults.override(providers.Object(TriggerFilterConfig()))
    return application


@pytest.fixture()
def container(app):
    return get_container()


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
