"""
User-related endpoints.

Staff management lives in modules.staff and is mounted under
/api/users/staff.
"""

from fastapi import APIRouter, Depends

from modules.auth.interfaces import IAuthService
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service
from ..errors import ApiError
from ..middleware.auth import get_current_user
from ..responses import success

router = APIRouter()


@router.get("/me")
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
):
    """
    Get the current user's profile.

    Requires authentication.
    """
    profile = await auth.get_user_by_id(user.id)
    if profile is None:
        raise ApiError(404, "USER_NOT_FOUND", "ไม่พบข้อมูลผู้ใช้")
    return success({"user": profile})
