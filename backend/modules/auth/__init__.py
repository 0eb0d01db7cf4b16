"""
Authentication module.

Handles session token validation, password login and user profiles.

Public API:
- IAuthService: Interface for auth operations
- AuthService: PyJWT + argon2id implementation
- UserRepository: users table access
- UserProfile, JWTPayload, LoginRequest, TokenResponse
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import JWTPayload, LoginRequest, TokenResponse, UserProfile
from .repository import UserRepository
from .service import AuthService, build_password_hasher
from .exceptions import (
    AuthNotConfiguredError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    UserNotFoundError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Implementation
    "AuthService",
    "UserRepository",
    "build_password_hasher",
    # Models
    "JWTPayload",
    "LoginRequest",
    "TokenResponse",
    "UserProfile",
    # Exceptions
    "AuthNotConfiguredError",
    "ExpiredTokenError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "UserNotFoundError",
]
