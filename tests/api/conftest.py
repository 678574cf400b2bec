"""
Fixtures for API tests.

Builds a fresh application whose dependencies are wired to the in-memory
user store from the root conftest.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    get_auth_service,
    get_profile_service,
    get_session_cookies,
    get_token_manager,
    get_user_store,
)
from modules.auth.cookies import SessionCookies
from tests.conftest import TEST_PASSWORD


@pytest.fixture
def app(store, auth_service, token_manager, profile_service) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_user_store] = lambda: store
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_token_manager] = lambda: token_manager
    app.dependency_overrides[get_profile_service] = lambda: profile_service
    app.dependency_overrides[get_session_cookies] = lambda: SessionCookies(secure=False)
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def registered_user(store, password_hash) -> str:
    """A local user with a known password; returns the user ID."""
    return store.add_user(email="ada@example.com", password_hash=password_hash)


@pytest.fixture
def logged_in(client: TestClient, registered_user: str) -> str:
    """Log the registered user in on the client; returns the user ID."""
    response = client.post(
        "/login", json={"email": "ada@example.com", "password": TEST_PASSWORD}
    )
    assert response.status_code == 200
    return registered_user
