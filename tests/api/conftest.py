"""
Fixtures for router tests.

Services are replaced with AsyncMocks through app.dependency_overrides;
the current user is a SimpleNamespace stand-in.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from podcast_analytics.api.deps.dependencies import get_current_user
from podcast_analytics.api.main import create_app


@pytest.fixture
def app():
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def as_user(app, fake_user_factory):
    """
    Authenticate requests as a fake user.

    Usage:
        user = as_user("admin")
    """

    def _login(role: str = "user"):
        user = fake_user_factory(role)
        app.dependency_overrides[get_current_user] = lambda: user
        return user

    return _login


@pytest.fixture
def override_service(app):
    """
    Replace a service dependency with an AsyncMock.

    Usage:
        service = override_service(get_podcast_service)
    """

    def _override(dependency):
        service = AsyncMock()
        app.dependency_overrides[dependency] = lambda: service
        return service

    return _override
