"""
Animal service implementation.
"""

import logging
from typing import Optional

from postgrest.exceptions import APIError

from modules.farms.context import FarmContextResolver
from modules.farms.exceptions import FarmAccessLevelError, NoFarmAccessError
from modules.farms.models import FarmContext
from shared.config import Settings, get_settings
from shared.database import is_unique_violation
from shared.models import Pagination

from .exceptions import AnimalAccessDeniedError, AnimalNotFoundError, DuplicateTagError
from .interfaces import IAnimalService
from .models import (
    Animal,
    AnimalCreateRequest,
    AnimalFilters,
    AnimalListResponse,
    AnimalStatusChangeRequest,
    AnimalUpdateRequest,
)
from .repository import AnimalRepository

logger = logging.getLogger(__name__)


class AnimalService(IAnimalService):
    """Animal operations scoped by farm context."""

    def __init__(
        self,
        repository: AnimalRepository,
        resolver: FarmContextResolver,
        settings: Optional[Settings] = None,
    ):
        self._repository = repository
        self._resolver = resolver
        self._settings = settings or get_settings()

    async def create_animal(self, context: FarmContext, request: AnimalCreateRequest) -> Animal:
        try:
            return self._repository.create_animal(request.to_insert(context.farm.id))
        except APIError as exc:
            if is_unique_violation(exc):
                raise DuplicateTagError(context.farm.id, request.tag_id) from exc
            raise

    async def list_animals(self, context: FarmContext, filters: AnimalFilters) -> AnimalListResponse:
        limit = min(filters.limit, self._settings.max_page_size)
        animals, total = self._repository.list_animals(
            context.farm.id,
            page=filters.page,
            page_size=limit,
            search=filters.search,
            status=filters.status,
            animal_type=filters.type,
        )

        counts = self._repository.count_open_activities([a.id for a in animals])
        animals = [
            a.model_copy(update={"notification_count": counts.get(a.id, 0)}) for a in animals
        ]
        return AnimalListResponse(
            animals=animals,
            pagination=Pagination.build(filters.page, limit, total),
        )

    async def get_animal(self, user_id: str, animal_id: str) -> Animal:
        animal, _ = await self._get_accessible(user_id, animal_id)
        return animal

    async def update_animal(
        self, user_id: str, animal_id: str, request: AnimalUpdateRequest
    ) -> Animal:
        animal, _ = await self._get_accessible(user_id, animal_id)
        data = request.to_update()
        if not data:
            return animal
        return self._repository.update_animal(animal.id, data)

    async def change_status(
        self, user_id: str, animal_id: str, request: AnimalStatusChangeRequest
    ) -> Animal:
        animal, context = await self._get_accessible(user_id, animal_id)
        if not context.has_full_access:
            raise FarmAccessLevelError(context.farm.id, user_id)

        updated = self._repository.update_animal(animal.id, {"status": request.status.value})
        logger.info(
            "Animal %s moved to %s by %s (reason: %s)",
            animal.id,
            request.status.value,
            user_id,
            request.reason or "-",
        )
        return updated

    async def _get_accessible(self, user_id: str, animal_id: str) -> tuple[Animal, FarmContext]:
        """Load an animal and the caller's context on its farm."""
        animal = self._repository.get_by_id(animal_id)
        if animal is None:
            raise AnimalNotFoundError(animal_id)

        try:
            context = await self._resolver.resolve(user_id, animal.farm_id)
        except NoFarmAccessError as exc:
            raise AnimalAccessDeniedError(animal_id, user_id) from exc
        return animal, context
