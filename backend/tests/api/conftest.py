"""
Fixtures for API endpoint tests.

Routes run against a fresh app; services and the farm context resolver
are replaced through dependency_overrides.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from datetime import datetime, timezone
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_auth_service, get_farm_context_resolver
from api.middleware.auth import get_current_user
from modules.auth.repository import UserRepository
from modules.auth.service import AuthService
from modules.farms.context import FarmContextResolver
from modules.farms.models import Farm, FarmContext, Role
from shared.models import AuthenticatedUser


def _farm(farm_id: str = "farm-123", owner_id: str = "owner-1") -> Farm:
    now = datetime.now(timezone.utc)
    return Farm(
        id=farm_id,
        name="ฟาร์มของฉัน",
        owner_id=owner_id,
        province="ไม่ระบุ",
        created_at=now,
        updated_at=now,
    )


def _context(role: Role = Role.OWNER, farm_id: str = "farm-123") -> FarmContext:
    return FarmContext.for_role(_farm(farm_id), role)


@pytest.fixture
def app():
    """Create a fresh app for each test."""
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def current_user() -> AuthenticatedUser:
    return AuthenticatedUser(id="owner-1", username="somchai")


@pytest.fixture
def token_auth(app, test_settings):
    """Real token validation without a database behind it."""
    service = AuthService(MagicMock(spec=UserRepository), settings=test_settings)
    app.dependency_overrides[get_auth_service] = lambda: service
    return service


@pytest.fixture
def authed(app, current_user):
    """Skip token validation and act as current_user."""
    app.dependency_overrides[get_current_user] = lambda: current_user
    return current_user


@pytest.fixture
def resolver(app):
    """Farm context resolver resolving the owner's farm by default."""
    mock = MagicMock(spec=FarmContextResolver)
    mock.resolve = AsyncMock(return_value=_context())
    app.dependency_overrides[get_farm_context_resolver] = lambda: mock
    return mock


@pytest.fixture
def make_farm():
    """Factory for Farm objects."""
    return _farm


@pytest.fixture
def make_context():
    """Factory for FarmContext objects; owner of farm-123 by default."""
    return _context
