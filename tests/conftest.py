# tests\conftest.py
import pytest
from fastapi.testclient import TestClient

from summation.adapters.api.main import create_app
from summation.shared.config import AppEnv, LogFormat, Settings
from summation.shared.container import container as app_container

@pytest.fixture(scope="function")
def test_settings():
    """Settings for the testing environment, independent of the process env."""
    return Settings(
        APP_ENV=AppEnv.TESTING,
        LOG_LEVEL="WARNING",
        LOG_FORMAT=LogFormat.CONSOLE,
        OTEL_EXPORTER_OTLP_ENDPOINT=None,
    )

@pytest.fixture(scope="function")
def container():
    """
    The application's Dependency Injection Container.
    Provider overrides made by a test are reset afterwards.
    """
    yield app_container

    app_container.compute_sum_use_case.reset_override()

@pytest.fixture(scope="function")
def use_case(container):
    """A fresh Sum use case, built the way the adapters build it."""
    return container.compute_sum_use_case()

@pytest.fixture
def client(container, test_settings):
    """
    Returns a FastAPI TestClient for an app built with the testing settings.
    """
    app = create_app(test_settings)
    with TestClient(app) as c:
        yield c
