"""
Activities module data models.

Care activities (feeding, vaccination, health checks) recorded against an
animal, and the request bodies for the activity API.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, Field

from shared.models import Pagination


class ActivityStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    OVERDUE = "OVERDUE"


class ActivityAnimal(BaseModel):
    """Animal summary embedded in activity responses."""

    id: str
    tag_id: str
    name: Optional[str] = None
    image_url: Optional[str] = None


class Activity(BaseModel):
    """An activity row."""

    id: str
    farm_id: str
    animal_id: str
    title: str
    description: Optional[str] = None
    activity_date: datetime
    due_date: Optional[datetime] = None
    status: ActivityStatus = ActivityStatus.PENDING
    status_reason: Optional[str] = None
    created_by: Optional[str] = None
    completed_by: Optional[str] = None
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    animal: Optional[ActivityAnimal] = None


class ActivityCreateRequest(BaseModel):
    """Request body for POST /api/activities."""

    model_config = {"extra": "ignore"}

    animal_id: UUID
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    activity_date: datetime
    due_date: Optional[datetime] = None
    status: ActivityStatus = ActivityStatus.PENDING


class ActivityUpdateRequest(BaseModel):
    """Request body for PUT /api/activities/{id}. Only fields sent are written."""

    model_config = {"extra": "ignore"}

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    activity_date: Optional[datetime] = None
    due_date: Optional[datetime] = None
    status: Optional[ActivityStatus] = None
    status_reason: Optional[str] = None

    def to_update(self) -> dict:
        return self.model_dump(mode="json", exclude_unset=True)


class ActivityFilters(BaseModel):
    """
    Query filters for GET /api/activities.

    status stays a plain string so an unknown value can be reported as
    INVALID_STATUS rather than a generic validation error.
    """

    animal_id: Optional[str] = None
    status: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    page: int = Field(1, ge=1)
    limit: int = Field(20, ge=1)


class ActivityResponse(BaseModel):
    activity: Activity


class ActivityListResponse(BaseModel):
    activities: list[Activity]
    pagination: Pagination
