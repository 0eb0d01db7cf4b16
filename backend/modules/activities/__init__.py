"""
Activities module.

Care activities recorded against animals: create, filter and paginate,
view and update with completion tracking.

Public API:
- IActivityService: Interface for activity operations
- Activity, ActivityStatus and request models
- ActivityNotFoundError, ActivityAccessDeniedError, AnimalNotInFarmError,
  InvalidStatusError
"""

from .interfaces import IActivityService
from .models import (
    Activity,
    ActivityCreateRequest,
    ActivityFilters,
    ActivityListResponse,
    ActivityStatus,
    ActivityUpdateRequest,
)
from .exceptions import (
    ActivityAccessDeniedError,
    ActivityNotFoundError,
    AnimalNotInFarmError,
    InvalidStatusError,
)

__all__ = [
    # Interface
    "IActivityService",
    # Models
    "Activity",
    "ActivityCreateRequest",
    "ActivityFilters",
    "ActivityListResponse",
    "ActivityStatus",
    "ActivityUpdateRequest",
    # Exceptions
    "ActivityAccessDeniedError",
    "ActivityNotFoundError",
    "AnimalNotInFarmError",
    "InvalidStatusError",
]
