"""
Farm context dependencies.

Every farm-scoped route resolves the caller's farm from the authenticated
user id. Resolver failures are turned into Thai error envelopes here so
routes never show the resolver's own messages.
"""

from fastapi import Depends

from modules.farms.context import FarmContextResolver
from modules.farms.exceptions import FarmContextError, InvalidUserError, NoFarmAccessError
from modules.farms.models import FarmContext
from shared.models import AuthenticatedUser

from ..dependencies import get_farm_context_resolver
from ..errors import ApiError, MSG_FETCH_FAILED
from .auth import get_current_user

MSG_NO_FARM = "ไม่พบฟาร์มของคุณ"
MSG_INVALID_USER = "ข้อมูลผู้ใช้ไม่ถูกต้อง"
MSG_FULL_ACCESS_REQUIRED = "เฉพาะเจ้าของฟาร์มเท่านั้นที่ทำรายการนี้ได้"


def farm_context_error(exc: FarmContextError, internal_message: str = MSG_FETCH_FAILED) -> ApiError:
    """Map a resolver error to the response the client sees."""
    if isinstance(exc, NoFarmAccessError):
        return ApiError(403, "NO_FARM_ACCESS", MSG_NO_FARM)
    if isinstance(exc, InvalidUserError):
        return ApiError(400, "INVALID_USER", MSG_INVALID_USER)
    return ApiError(500, "INTERNAL_ERROR", internal_message)


async def get_farm_context(
    user: AuthenticatedUser = Depends(get_current_user),
    resolver: FarmContextResolver = Depends(get_farm_context_resolver),
) -> FarmContext:
    """Dependency resolving the farm the caller acts on."""
    try:
        return await resolver.resolve(user.id)
    except FarmContextError as exc:
        raise farm_context_error(exc) from exc


async def require_full_access(
    context: FarmContext = Depends(get_farm_context),
) -> FarmContext:
    """Dependency for owner-only operations."""
    if not context.has_full_access:
        raise ApiError(403, "FORBIDDEN", MSG_FULL_ACCESS_REQUIRED)
    return context
