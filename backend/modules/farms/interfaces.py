"""
Farms module interface.

The API layer depends on IFarmService for farm reads and writes; every
other module depends on FarmContextResolver directly.
"""

from typing import Protocol, runtime_checkable

from .models import Farm, FarmContext, FarmUpdateRequest


@runtime_checkable
class IFarmService(Protocol):
    """Interface for farm operations on behalf of a user."""

    async def get_farm(self, user_id: str) -> Farm:
        """
        Get the farm the user acts on behalf of.

        Raises:
            FarmContextError: If the farm context cannot be resolved
        """
        ...

    async def ensure_farm(self, user_id: str) -> tuple[Farm, bool]:
        """
        Return the user's farm, creating one owned by the user if they
        have no farm access at all.

        Returns:
            (farm, created)
        """
        ...

    async def update_farm(self, user_id: str, request: FarmUpdateRequest) -> Farm:
        """Update name and/or province of the user's farm."""
        ...

    async def list_contexts(self, user_id: str) -> list[FarmContext]:
        """Every farm the user owns or belongs to."""
        ...

    async def has_access(self, user_id: str) -> bool:
        """Whether the user has access to any farm."""
        ...
