"""
Shared infrastructure for the Jaothui ID-Trace backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository and pagination helpers

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, is_unique_violation, reset_client_cache
from .exceptions import (
    JaothuiError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
)
from .models import AuthenticatedUser, Pagination

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "is_unique_violation",
    "reset_client_cache",
    "JaothuiError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "AuthenticatedUser",
    "Pagination",
]
