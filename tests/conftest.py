"""
Shared pytest fixtures for the relay tests.

Provides fixtures for:
- In-memory stores and services
- A controllable clock for session expiry
- API client (httpx over ASGI) and operator tokens
"""
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio

from device_relay.application.services import AuthService, CommandService, LogService
from device_relay.config import AppSettings, AuthSettings, CORSSettings, StoreSettings
from device_relay.domain.entities import UserRole
from device_relay.infrastructure.memory import (
    CommandRepository,
    LogRepository,
    SessionRepository,
    UserRepository,
)
from device_relay.main import create_app

from tests.factories import AdminUserFactory, fast_hasher

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin-test-pass"


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: datetime = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def log_repo() -> LogRepository:
    return LogRepository(max_entries=100)


@pytest.fixture
def command_repo() -> CommandRepository:
    return CommandRepository(max_queue_length=10)


@pytest.fixture
def session_repo(clock) -> SessionRepository:
    return SessionRepository(window=timedelta(hours=8), clock=clock)


@pytest.fixture
def user_repo() -> UserRepository:
    return UserRepository([AdminUserFactory(username=ADMIN_USERNAME, password=ADMIN_PASSWORD)])


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def log_service(log_repo) -> LogService:
    return LogService(log_repo)


@pytest.fixture
def command_service(command_repo) -> CommandService:
    return CommandService(command_repo)


@pytest.fixture
def auth_service(user_repo, session_repo) -> AuthService:
    return AuthService(user_repo, session_repo, fast_hasher)


# ============================================================================
# API Client Fixtures
# ============================================================================

@pytest.fixture
def settings() -> AppSettings:
    """Settings isolated from the environment and any .env file."""
    return AppSettings(
        _env_file=None,
        debug=False,
        store=StoreSettings(_env_file=None, max_log_entries=1000, max_queue_length=10),
        auth=AuthSettings(
            _env_file=None,
            bcrypt_rounds=4,
            admin_username=ADMIN_USERNAME,
            admin_password=ADMIN_PASSWORD,
        ),
        cors=CORSSettings(_env_file=None, allowed_origins=["https://espapp.netlify.app"]),
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest_asyncio.fixture
async def api_client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Test API client bound to a fresh application."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


async def login(client: httpx.AsyncClient, username: str, password: str) -> str:
    response = await client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def admin_token(api_client) -> str:
    return await login(api_client, ADMIN_USERNAME, ADMIN_PASSWORD)


@pytest_asyncio.fixture
async def reporter_token(api_client, admin_token) -> str:
    """Token for a freshly created non-admin account."""
    response = await api_client.post(
        "/api/users",
        json={"username": "viewer", "password": "viewer-pass", "role": UserRole.REPORTER.value},
        headers=bearer(admin_token),
    )
    assert response.status_code == 200, response.text
    return await login(api_client, "viewer", "viewer-pass")
