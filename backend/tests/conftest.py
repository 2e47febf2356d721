from __future__ import annotations

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from app.core.auth import session_store
from app.core.dependencies import get_current_user
from app.main import app
from app.models.auth import User
from app.repositories.memory import InMemoryStore, store
from app.services.absence_service import AbsenceService

MANAGER_ID = "1"
EMPLOYEE_ID = "2"
COWORKER_ID = "3"

FIXED_TODAY = date(2098, 6, 1)


@pytest.fixture(autouse=True)
def _reset_state():
    store.reset()
    session_store.clear()
    yield
    app.dependency_overrides.clear()
    session_store.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def manager() -> User:
    return store.users.get(MANAGER_ID)


@pytest.fixture
def employee() -> User:
    return store.users.get(EMPLOYEE_ID)


@pytest.fixture
def coworker() -> User:
    return store.users.get(COWORKER_ID)


@pytest.fixture
def login_as(client):
    """Return the test client authenticated as the given user id."""

    def _login(user_id: str) -> TestClient:
        user = store.users.get(user_id)
        app.dependency_overrides[get_current_user] = lambda: user
        return client

    return _login


@pytest.fixture
def fresh_store() -> InMemoryStore:
    s = InMemoryStore()
    s.reset()
    return s


@pytest.fixture
def absence_service_fixed(fresh_store) -> AbsenceService:
    return AbsenceService(fresh_store.absences, fresh_store.profiles, today=lambda: FIXED_TODAY)


@pytest.fixture
def fixed_today(monkeypatch):
    """Pin the shared absence service clock so API tests can use far-future dates."""
    from app.services.absence_service import absence_service

    monkeypatch.setattr(absence_service, "today", lambda: FIXED_TODAY)
    return FIXED_TODAY
