"""
Staff module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from modules.farms.models import Role
from shared.models import Pagination


class StaffCreateRequest(BaseModel):
    """Request body for POST /api/users/staff."""

    username: str = Field(..., min_length=3, max_length=50, pattern=r"^[A-Za-z0-9_-]+$")
    password: str = Field(..., min_length=6, max_length=100)
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: Optional[EmailStr] = None

    @field_validator("email", mode="before")
    @classmethod
    def _blank_email(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class StaffMember(BaseModel):
    """A staff account as listed for the farm owner."""

    id: str = Field(..., description="User ID")
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    role: Role = Role.MEMBER
    joined_at: datetime
    created_at: datetime
    updated_at: datetime


class StaffResponse(BaseModel):
    staff: StaffMember


class StaffListResponse(BaseModel):
    staff: list[StaffMember]
    pagination: Pagination
