"""
Activity service implementation.

Activities are created in the caller's resolved farm and only against
animals of that farm. Single-activity reads and updates check access to
the activity's own farm.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from modules.animals.exceptions import AnimalNotFoundError
from modules.animals.repository import AnimalRepository
from modules.farms.context import FarmContextResolver
from modules.farms.exceptions import NoFarmAccessError
from modules.farms.models import FarmContext
from shared.config import Settings, get_settings
from shared.models import Pagination

from .exceptions import (
    ActivityAccessDeniedError,
    ActivityNotFoundError,
    AnimalNotInFarmError,
    InvalidStatusError,
)
from .interfaces import IActivityService
from .models import (
    Activity,
    ActivityCreateRequest,
    ActivityFilters,
    ActivityListResponse,
    ActivityStatus,
    ActivityUpdateRequest,
)
from .repository import ActivityRepository

logger = logging.getLogger(__name__)


class ActivityService(IActivityService):
    """Activity operations scoped by farm context."""

    def __init__(
        self,
        repository: ActivityRepository,
        animals: AnimalRepository,
        resolver: FarmContextResolver,
        settings: Optional[Settings] = None,
    ):
        self._repository = repository
        self._animals = animals
        self._resolver = resolver
        self._settings = settings or get_settings()

    async def create_activity(
        self, user_id: str, context: FarmContext, request: ActivityCreateRequest
    ) -> Activity:
        animal_id = str(request.animal_id)
        animal = self._animals.get_by_id(animal_id)
        if animal is None:
            raise AnimalNotFoundError(animal_id)
        if animal.farm_id != context.farm.id:
            raise AnimalNotInFarmError(animal_id, context.farm.id)

        data = request.model_dump(mode="json")
        data.update(
            animal_id=animal_id,
            farm_id=context.farm.id,
            created_by=user_id,
        )
        activity = self._repository.create_activity(data)
        logger.debug("Activity %s created for animal %s", activity.id, animal_id)
        return activity

    async def list_activities(
        self, context: FarmContext, filters: ActivityFilters
    ) -> ActivityListResponse:
        status = None
        if filters.status:
            try:
                status = ActivityStatus(filters.status)
            except ValueError:
                raise InvalidStatusError(filters.status)

        limit = min(filters.limit, self._settings.max_page_size)
        activities, total = self._repository.list_activities(
            context.farm.id,
            page=filters.page,
            page_size=limit,
            animal_id=filters.animal_id,
            status=status,
            start_date=filters.start_date,
            end_date=filters.end_date,
        )
        return ActivityListResponse(
            activities=activities,
            pagination=Pagination.build(filters.page, limit, total),
        )

    async def get_activity(self, user_id: str, activity_id: str) -> Activity:
        return await self._get_accessible(user_id, activity_id)

    async def update_activity(
        self, user_id: str, activity_id: str, request: ActivityUpdateRequest
    ) -> Activity:
        activity = await self._get_accessible(user_id, activity_id)

        data = request.to_update()
        if request.status == ActivityStatus.COMPLETED and activity.status != ActivityStatus.COMPLETED:
            data["completed_by"] = user_id
            data["completed_at"] = datetime.now(timezone.utc).isoformat()

        if not data:
            return activity
        return self._repository.update_activity(activity.id, data)

    async def _get_accessible(self, user_id: str, activity_id: str) -> Activity:
        activity = self._repository.get_by_id(activity_id)
        if activity is None:
            raise ActivityNotFoundError(activity_id)

        try:
            await self._resolver.resolve(user_id, activity.farm_id)
        except NoFarmAccessError as exc:
            raise ActivityAccessDeniedError(activity_id, user_id) from exc
        return activity
