"""
Animals module interface.
"""

from typing import Protocol, runtime_checkable

from modules.farms.models import FarmContext

from .models import (
    Animal,
    AnimalCreateRequest,
    AnimalFilters,
    AnimalListResponse,
    AnimalStatusChangeRequest,
    AnimalUpdateRequest,
)


@runtime_checkable
class IAnimalService(Protocol):
    """
    Interface for animal operations.

    List and create work on the caller's resolved farm. Operations on a
    single animal check the caller's access to that animal's farm.
    """

    async def create_animal(self, context: FarmContext, request: AnimalCreateRequest) -> Animal:
        """
        Raises:
            DuplicateTagError: tag_id already used in this farm
        """
        ...

    async def list_animals(self, context: FarmContext, filters: AnimalFilters) -> AnimalListResponse:
        ...

    async def get_animal(self, user_id: str, animal_id: str) -> Animal:
        """
        Raises:
            AnimalNotFoundError: no such animal
            AnimalAccessDeniedError: caller has no access to its farm
        """
        ...

    async def update_animal(
        self, user_id: str, animal_id: str, request: AnimalUpdateRequest
    ) -> Animal:
        ...

    async def change_status(
        self, user_id: str, animal_id: str, request: AnimalStatusChangeRequest
    ) -> Animal:
        """
        Soft delete: move the animal to TRANSFERRED, DECEASED or SOLD.

        Raises:
            FarmAccessLevelError: caller only has limited access
        """
        ...
