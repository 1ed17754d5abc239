"""Fixtures that register users and open sessions through the HTTP API."""

import pytest
from fastapi.testclient import TestClient

API = "/api"


def register_and_login(
    client: TestClient, user_id: str, password: str = "secret-pass", name: str | None = None
) -> dict[str, str]:
    """Register ``user_id`` and return the token pair issued at login."""
    response = client.post(
        f"{API}/users",
        json={"id": user_id, "password": password, "name": name or user_id.title()},
    )
    assert response.status_code == 200, response.text

    response = client.post(f"{API}/users/_login", json={"id": user_id, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["data"]


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    """Authorization header for a freshly registered user ``alice``."""
    tokens = register_and_login(client, "alice")
    return {"Authorization": tokens["token"]}


@pytest.fixture
def other_auth_headers(client: TestClient) -> dict[str, str]:
    """Authorization header for a second user ``bob``."""
    tokens = register_and_login(client, "bob")
    return {"Authorization": tokens["token"]}
