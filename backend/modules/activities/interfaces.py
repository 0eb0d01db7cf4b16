"""
Activities module interface.
"""

from typing import Protocol, runtime_checkable

from modules.farms.models import FarmContext

from .models import (
    Activity,
    ActivityCreateRequest,
    ActivityFilters,
    ActivityListResponse,
    ActivityUpdateRequest,
)


@runtime_checkable
class IActivityService(Protocol):
    """Interface for activity operations."""

    async def create_activity(
        self, user_id: str, context: FarmContext, request: ActivityCreateRequest
    ) -> Activity:
        """
        Record an activity for an animal of the caller's farm.

        Raises:
            AnimalNotFoundError: the animal doesn't exist
            AnimalNotInFarmError: the animal belongs to another farm
        """
        ...

    async def list_activities(
        self, context: FarmContext, filters: ActivityFilters
    ) -> ActivityListResponse:
        """
        Raises:
            InvalidStatusError: filters.status is not an ActivityStatus
        """
        ...

    async def get_activity(self, user_id: str, activity_id: str) -> Activity:
        ...

    async def update_activity(
        self, user_id: str, activity_id: str, request: ActivityUpdateRequest
    ) -> Activity:
        """
        Update an activity. Moving it into COMPLETED records who completed
        it and when.
        """
        ...
