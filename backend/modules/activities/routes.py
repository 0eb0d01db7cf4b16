"""
Activity API endpoints.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_activity_service
from api.errors import ApiError
from api.middleware.auth import get_current_user
from api.middleware.farm_context import farm_context_error, get_farm_context
from api.responses import success
from modules.animals.exceptions import AnimalNotFoundError
from modules.farms.exceptions import FarmContextError
from modules.farms.models import FarmContext
from shared.models import AuthenticatedUser

from .exceptions import (
    ActivityAccessDeniedError,
    ActivityNotFoundError,
    AnimalNotInFarmError,
    InvalidStatusError,
)
from .interfaces import IActivityService
from .models import (
    ActivityCreateRequest,
    ActivityFilters,
    ActivityResponse,
    ActivityUpdateRequest,
)

router = APIRouter()

MSG_NOT_FOUND = "ไม่พบข้อมูลกิจกรรม"


@router.post("", status_code=201)
async def create_activity(
    request: ActivityCreateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    context: FarmContext = Depends(get_farm_context),
    service: IActivityService = Depends(get_activity_service),
):
    """Record an activity for one of the farm's animals."""
    try:
        activity = await service.create_activity(user.id, context, request)
    except AnimalNotFoundError:
        raise ApiError(404, "ANIMAL_NOT_FOUND", "ไม่พบข้อมูลกระบือ")
    except AnimalNotInFarmError:
        raise ApiError(403, "FORBIDDEN", "คุณไม่มีสิทธิ์สร้างกิจกรรมสำหรับกระบือนี้")
    return success(ActivityResponse(activity=activity), "สร้างกิจกรรมสำเร็จแล้ว", status_code=201)


@router.get("")
async def list_activities(
    animal_id: Optional[str] = Query(default=None),
    status: Optional[str] = Query(default=None),
    start_date: Optional[datetime] = Query(default=None, description="Earliest activity_date"),
    end_date: Optional[datetime] = Query(default=None, description="Latest activity_date"),
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=20, ge=1, le=100, description="Items per page"),
    context: FarmContext = Depends(get_farm_context),
    service: IActivityService = Depends(get_activity_service),
):
    """List the farm's activities, latest activity_date first."""
    filters = ActivityFilters(
        animal_id=animal_id,
        status=status,
        start_date=start_date,
        end_date=end_date,
        page=page,
        limit=limit,
    )
    try:
        result = await service.list_activities(context, filters)
    except InvalidStatusError:
        raise ApiError(400, "INVALID_STATUS", "สถานะไม่ถูกต้อง")
    return success(result)


@router.get("/{activity_id}")
async def get_activity(
    activity_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IActivityService = Depends(get_activity_service),
):
    try:
        activity = await service.get_activity(user.id, activity_id)
    except ActivityNotFoundError:
        raise ApiError(404, "ACTIVITY_NOT_FOUND", MSG_NOT_FOUND)
    except ActivityAccessDeniedError:
        raise ApiError(403, "FORBIDDEN", "คุณไม่มีสิทธิ์เข้าถึงข้อมูลนี้")
    except FarmContextError as exc:
        raise farm_context_error(exc)
    return success(ActivityResponse(activity=activity))


@router.put("/{activity_id}")
async def update_activity(
    activity_id: str,
    request: ActivityUpdateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IActivityService = Depends(get_activity_service),
):
    """Update an activity; completing it records who completed it and when."""
    try:
        activity = await service.update_activity(user.id, activity_id, request)
    except ActivityNotFoundError:
        raise ApiError(404, "ACTIVITY_NOT_FOUND", MSG_NOT_FOUND)
    except ActivityAccessDeniedError:
        raise ApiError(403, "FORBIDDEN", "คุณไม่มีสิทธิ์แก้ไขข้อมูลนี้")
    except FarmContextError as exc:
        raise farm_context_error(exc, "เกิดข้อผิดพลาดในการอัปเดตข้อมูล")
    return success(ActivityResponse(activity=activity), "อัปเดตกิจกรรมสำเร็จแล้ว")
