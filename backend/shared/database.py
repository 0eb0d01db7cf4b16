"""
Database client factory for Supabase.

The service-role client is created once per process and handed to
repositories by the service container.
"""

from typing import Optional
from postgrest.exceptions import APIError
from supabase import create_client, Client

from .config import get_settings

# Module-level client cache
_service_client: Optional[Client] = None

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Authorization is enforced in the service layer through the farm
    context resolver, so the backend always talks to the database with
    the service role.

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def is_unique_violation(error: Exception) -> bool:
    """Whether a PostgREST error was caused by a unique constraint."""
    return isinstance(error, APIError) and error.code == UNIQUE_VIOLATION


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
