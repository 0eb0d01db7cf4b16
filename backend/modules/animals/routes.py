"""
Animal API endpoints.

List and create act on the caller's resolved farm; single-animal
endpoints check access to the animal's own farm.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_animal_service
from api.errors import ApiError
from api.middleware.auth import get_current_user
from api.middleware.farm_context import farm_context_error, get_farm_context
from api.responses import success
from modules.farms.exceptions import FarmAccessLevelError, FarmContextError
from modules.farms.models import FarmContext
from shared.models import AuthenticatedUser

from .exceptions import AnimalAccessDeniedError, AnimalNotFoundError, DuplicateTagError
from .interfaces import IAnimalService
from .models import (
    AnimalCreateRequest,
    AnimalFilters,
    AnimalResponse,
    AnimalStatus,
    AnimalStatusChangeRequest,
    AnimalType,
    AnimalUpdateRequest,
)

router = APIRouter()

MSG_NOT_FOUND = "ไม่พบข้อมูลกระบือ"


def _animal_error(exc: Exception, forbidden_message: str, internal_message: str) -> ApiError:
    if isinstance(exc, AnimalNotFoundError):
        return ApiError(404, "ANIMAL_NOT_FOUND", MSG_NOT_FOUND)
    if isinstance(exc, (AnimalAccessDeniedError, FarmAccessLevelError)):
        return ApiError(403, "FORBIDDEN", forbidden_message)
    return farm_context_error(exc, internal_message)


_ANIMAL_ERRORS = (AnimalNotFoundError, AnimalAccessDeniedError, FarmAccessLevelError, FarmContextError)


@router.post("", status_code=201)
async def create_animal(
    request: AnimalCreateRequest,
    context: FarmContext = Depends(get_farm_context),
    service: IAnimalService = Depends(get_animal_service),
):
    """Create an animal in the caller's farm."""
    try:
        animal = await service.create_animal(context, request)
    except DuplicateTagError:
        raise ApiError(409, "DUPLICATE_TAG", "หมายเลขแท็กนี้มีในระบบแล้ว")
    return success(AnimalResponse(animal=animal), "บันทึกข้อมูลกระบือสำเร็จแล้ว", status_code=201)


@router.get("")
async def list_animals(
    search: Optional[str] = Query(default=None, description="Match tag id or name"),
    status: Optional[AnimalStatus] = Query(default=None),
    animal_type: Optional[AnimalType] = Query(default=None, alias="type"),
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=20, ge=1, le=100, description="Items per page"),
    context: FarmContext = Depends(get_farm_context),
    service: IAnimalService = Depends(get_animal_service),
):
    """
    List the farm's animals, newest first.

    Each animal carries notification_count, its PENDING + OVERDUE activities.
    """
    filters = AnimalFilters(search=search, status=status, type=animal_type, page=page, limit=limit)
    return success(await service.list_animals(context, filters))


@router.get("/{animal_id}")
async def get_animal(
    animal_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAnimalService = Depends(get_animal_service),
):
    try:
        animal = await service.get_animal(user.id, animal_id)
    except _ANIMAL_ERRORS as exc:
        raise _animal_error(exc, "คุณไม่มีสิทธิ์เข้าถึงข้อมูลนี้", "เกิดข้อผิดพลาดในการดึงข้อมูล")
    return success(AnimalResponse(animal=animal))


@router.put("/{animal_id}")
async def update_animal(
    animal_id: str,
    request: AnimalUpdateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAnimalService = Depends(get_animal_service),
):
    """Update name, color, measurements, parent tags or genome."""
    try:
        animal = await service.update_animal(user.id, animal_id, request)
    except _ANIMAL_ERRORS as exc:
        raise _animal_error(exc, "คุณไม่มีสิทธิ์แก้ไขข้อมูลนี้", "เกิดข้อผิดพลาดในการอัปเดตข้อมูล")
    return success(AnimalResponse(animal=animal), "อัปเดตข้อมูลกระบือสำเร็จแล้ว")


@router.delete("/{animal_id}")
async def remove_animal(
    animal_id: str,
    request: AnimalStatusChangeRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAnimalService = Depends(get_animal_service),
):
    """
    Soft delete: the record stays, its status becomes TRANSFERRED,
    DECEASED or SOLD. Farm owners only.
    """
    try:
        animal = await service.change_status(user.id, animal_id, request)
    except _ANIMAL_ERRORS as exc:
        raise _animal_error(exc, "คุณไม่มีสิทธิ์ลบข้อมูลนี้", "เกิดข้อผิดพลาดในการลบข้อมูล")
    return success(
        AnimalResponse(animal=animal),
        f"เปลี่ยนสถานะกระบือเป็น {request.status.value} สำเร็จแล้ว",
    )
