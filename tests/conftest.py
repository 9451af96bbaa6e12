"""
Shared fixtures.  Every test gets its own storage or application, so
no state leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from portfolio_api.app.core.config import Settings
from portfolio_api.app.main import create_app
from portfolio_api.app.services.storage import create_storage

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "test-password"


@pytest.fixture
def settings():
    return Settings(admin_username=ADMIN_USERNAME, admin_password=ADMIN_PASSWORD)


@pytest.fixture
def storage(settings):
    return create_storage(settings)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def admin_client(client):
    """A client holding a valid admin session cookie."""
    response = client.post(
        "/api/auth/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return client
