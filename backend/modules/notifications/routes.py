"""
Notification endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_notification_service
from api.middleware.farm_context import get_farm_context
from api.responses import success
from modules.farms.models import FarmContext

from .service import NotificationService

router = APIRouter()


@router.get("/badge")
async def get_badge(
    context: FarmContext = Depends(get_farm_context),
    service: NotificationService = Depends(get_notification_service),
):
    """Pending and overdue activity counts for the caller's farm."""
    return success(await service.get_badge(context))
