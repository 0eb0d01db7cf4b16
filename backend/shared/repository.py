"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the pagination helpers shared by list queries.
"""

from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


def page_range(page: int, page_size: int) -> tuple[int, int]:
    """
    Convert a 1-indexed page into the inclusive row range PostgREST expects.

    Example:
        page_range(2, 20) == (20, 39)
    """
    offset = (page - 1) * page_size
    return offset, offset + page_size - 1


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses implement domain-specific data access methods and handle
    row-to-Pydantic model mapping internally. Repositories never perform
    authorization checks; services do that through the farm context resolver.
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db
