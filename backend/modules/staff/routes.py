"""
Staff management endpoints, mounted under /api/users/staff.
"""

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_staff_service
from api.errors import ApiError
from api.middleware.auth import get_current_user
from api.middleware.farm_context import require_full_access
from api.responses import success
from modules.farms.models import FarmContext
from shared.models import AuthenticatedUser

from .exceptions import DuplicateEmailError, DuplicateUsernameError
from .interfaces import IStaffService
from .models import StaffCreateRequest, StaffResponse

router = APIRouter()


@router.get("")
async def list_staff(
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=20, ge=1, le=100, description="Items per page"),
    user: AuthenticatedUser = Depends(get_current_user),
    context: FarmContext = Depends(require_full_access),
    service: IStaffService = Depends(get_staff_service),
):
    """List the farm's staff accounts, newest first. Farm owners only."""
    return success(await service.list_staff(user.id, context, page, limit))


@router.post("", status_code=201)
async def create_staff(
    request: StaffCreateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    context: FarmContext = Depends(require_full_access),
    service: IStaffService = Depends(get_staff_service),
):
    """Create a staff account in the caller's farm. Farm owners only."""
    try:
        staff = await service.create_staff(user.id, context, request)
    except DuplicateUsernameError:
        raise ApiError(409, "DUPLICATE_USERNAME", "ชื่อผู้ใช้นี้มีในระบบแล้ว")
    except DuplicateEmailError:
        raise ApiError(409, "DUPLICATE_EMAIL", "อีเมลนี้มีในระบบแล้ว")
    return success(StaffResponse(staff=staff), "สร้างบัญชีพนักงานสำเร็จแล้ว", status_code=201)
