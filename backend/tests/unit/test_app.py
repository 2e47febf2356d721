from __future__ import annotations

from unittest.mock import patch

from starlette.testclient import TestClient

from app.core.dependencies import get_current_user
from app.main import app
from app.repositories.memory import store
from tests.conftest import MANAGER_ID


def test_root_returns_message(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["message"] == "Employee Profiles API"


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not Found"}


def test_unauthorized_response_carries_challenge_header(client):
    response = client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_unexpected_error_becomes_generic_500():
    app.dependency_overrides[get_current_user] = lambda: store.users.get(MANAGER_ID)

    with patch(
        "app.api.endpoints.profiles.profile_service.list_departments",
        side_effect=RuntimeError("secret detail"),
    ):
        with TestClient(app, raise_server_exceptions=False) as c:
            response = c.get("/api/profiles/departments/list")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Internal server error"}
    assert "secret detail" not in response.text


def test_cors_preflight(client):
    response = client.options(
        "/api/config",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
