"""
Farms module.

Farm ownership, staff membership and the farm context resolver.

Public API:
- FarmContextResolver: resolve(), resolve_all(), check_access()
- IFarmService: farm reads, auto-provisioning and updates
- FarmContext, Farm, FarmMember, Role, AccessLevel
- FarmContextError and its four variants
"""

from .context import FarmContextResolver
from .interfaces import IFarmService
from .models import (
    AccessLevel,
    Farm,
    FarmContext,
    FarmMember,
    FarmUpdateRequest,
    Role,
    access_level_for,
)
from .exceptions import (
    FarmAccessLevelError,
    FarmContextError,
    FarmContextErrorCode,
    FarmDatabaseError,
    InvalidUserError,
    MultipleFarmsError,
    NoFarmAccessError,
)

__all__ = [
    # Resolver
    "FarmContextResolver",
    # Interface
    "IFarmService",
    # Models
    "AccessLevel",
    "Farm",
    "FarmContext",
    "FarmMember",
    "FarmUpdateRequest",
    "Role",
    "access_level_for",
    # Exceptions
    "FarmAccessLevelError",
    "FarmContextError",
    "FarmContextErrorCode",
    "FarmDatabaseError",
    "InvalidUserError",
    "MultipleFarmsError",
    "NoFarmAccessError",
]
