"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
import jwt  # PyJWT

from api.dependencies import reset_container
from shared.config import Settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a known JWT secret and cheap argon2 parameters."""
    return Settings(
        jwt_secret=TEST_JWT_SECRET,
        supabase_url="http://localhost:54321",
        supabase_service_role_key="service-role-key",
        argon2_memory_cost=1024,
        argon2_time_cost=1,
        argon2_parallelism=1,
    )


@pytest.fixture
def make_token():
    """Factory for signed session tokens."""

    def _make_token(
        user_id: str = "test-user-123",
        username: str = "somchai",
        expired: bool = False,
        audience: str = "authenticated",
        secret: str = TEST_JWT_SECRET,
    ) -> str:
        now = datetime.now(timezone.utc)
        exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)
        payload = {
            "sub": user_id,
            "username": username,
            "aud": audience,
            "exp": int(exp.timestamp()),
            "iat": int(now.timestamp()),
        }
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make_token


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def auth_headers(make_token, test_user_id: str) -> dict[str, str]:
    """Authorization headers with a valid token."""
    return {"Authorization": f"Bearer {make_token(user_id=test_user_id)}"}
