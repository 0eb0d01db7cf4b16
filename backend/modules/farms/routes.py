"""
Farm API endpoints.

Provides the caller's farm, auto-provisioning for new owners, farm
updates and farm-context enumeration.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_farm_service
from api.middleware.auth import get_current_user
from api.middleware.farm_context import farm_context_error
from api.responses import success
from shared.models import AuthenticatedUser

from .exceptions import FarmContextError
from .interfaces import IFarmService
from .models import FarmAccessResponse, FarmResponse, FarmUpdateRequest

router = APIRouter()


@router.get("")
async def get_farm(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFarmService = Depends(get_farm_service),
):
    """Get the farm the caller owns or works on."""
    try:
        farm = await service.get_farm(user.id)
    except FarmContextError as exc:
        raise farm_context_error(exc)
    return success(FarmResponse(farm=farm))


@router.post("")
async def ensure_farm(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFarmService = Depends(get_farm_service),
):
    """
    Get the caller's farm, creating one if they have none.

    Returns 200 with the existing farm, or 201 with a new farm owned by
    the caller.
    """
    try:
        farm, created = await service.ensure_farm(user.id)
    except FarmContextError as exc:
        raise farm_context_error(exc, "เกิดข้อผิดพลาดในการสร้างฟาร์ม")

    if created:
        return success(FarmResponse(farm=farm), "สร้างฟาร์มสำเร็จแล้ว", status_code=201)
    return success(FarmResponse(farm=farm))


@router.put("")
async def update_farm(
    request: FarmUpdateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFarmService = Depends(get_farm_service),
):
    """Rename the farm or change its province."""
    try:
        farm = await service.update_farm(user.id, request)
    except FarmContextError as exc:
        raise farm_context_error(exc, "เกิดข้อผิดพลาดในการอัปเดตข้อมูล")
    return success(FarmResponse(farm=farm), "อัปเดตข้อมูลฟาร์มสำเร็จแล้ว")


@router.get("/contexts")
async def list_farm_contexts(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFarmService = Depends(get_farm_service),
):
    """Every farm the caller can act on, owned farms first."""
    try:
        contexts = await service.list_contexts(user.id)
    except FarmContextError as exc:
        raise farm_context_error(exc)
    return success({"contexts": contexts})


@router.get("/access")
async def check_farm_access(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFarmService = Depends(get_farm_service),
):
    """Whether the caller has access to any farm."""
    try:
        has_access = await service.has_access(user.id)
    except FarmContextError as exc:
        raise farm_context_error(exc)
    return success(FarmAccessResponse(has_access=has_access))
