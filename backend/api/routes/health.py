"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import Settings, get_settings

from ..responses import failure, success

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    auth: str


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return success(HealthResponse(status="healthy", version=settings.app_version))


@router.get("/ready")
async def readiness_check(settings: Settings = Depends(get_settings)):
    """
    Readiness check endpoint.

    Reports 503 until Supabase credentials and the JWT secret are configured.
    """
    database = "configured" if settings.supabase_url and settings.supabase_service_role_key else "missing"
    auth = "configured" if settings.jwt_secret else "missing"

    if database != "configured" or auth != "configured":
        return failure(
            "NOT_READY",
            "ระบบยังไม่พร้อมใช้งาน",
            503,
            details=ReadinessResponse(status="not_ready", database=database, auth=auth).model_dump(),
        )
    return success(ReadinessResponse(status="ready", database=database, auth=auth))
