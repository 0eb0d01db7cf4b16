"""
Animals module.

Animal records for a farm: create, list with notification counts, view,
update and soft delete.

Public API:
- IAnimalService: Interface for animal operations
- Animal and request models
- AnimalNotFoundError, AnimalAccessDeniedError, DuplicateTagError
"""

from .interfaces import IAnimalService
from .models import (
    Animal,
    AnimalCreateRequest,
    AnimalFilters,
    AnimalGender,
    AnimalListResponse,
    AnimalStatus,
    AnimalStatusChangeRequest,
    AnimalType,
    AnimalUpdateRequest,
)
from .exceptions import AnimalAccessDeniedError, AnimalNotFoundError, DuplicateTagError

__all__ = [
    # Interface
    "IAnimalService",
    # Models
    "Animal",
    "AnimalCreateRequest",
    "AnimalFilters",
    "AnimalGender",
    "AnimalListResponse",
    "AnimalStatus",
    "AnimalStatusChangeRequest",
    "AnimalType",
    "AnimalUpdateRequest",
    # Exceptions
    "AnimalAccessDeniedError",
    "AnimalNotFoundError",
    "DuplicateTagError",
]
