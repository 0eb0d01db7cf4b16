"""
Farms module data models.

Farm and membership rows as the resolver returns them, the resolved
farm context, and request bodies for the farm API.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class Role(str, Enum):
    """Role held by a user on a farm."""

    OWNER = "OWNER"
    MEMBER = "MEMBER"


class AccessLevel(str, Enum):
    """Coarse privilege tag derived from role."""

    FULL = "full"
    LIMITED = "limited"


def access_level_for(role: "Role | str") -> AccessLevel:
    """OWNER maps to full access, anything else to limited."""
    return AccessLevel.FULL if Role(role) == Role.OWNER else AccessLevel.LIMITED


class Farm(BaseModel):
    """A farm row."""

    id: str = Field(..., description="Farm ID (UUID)")
    name: str = Field(..., description="Farm display name")
    owner_id: str = Field(..., description="User ID of the owner")
    province: Optional[str] = Field(None, description="Province")
    code: Optional[str] = Field(None, description="Registry code, unique when set")
    created_at: datetime
    updated_at: datetime


class FarmMember(BaseModel):
    """A membership row, optionally joined with its farm."""

    id: str
    farm_id: str
    user_id: str
    role: Role = Role.MEMBER
    joined_at: datetime
    farm: Optional[Farm] = None


class FarmContext(BaseModel):
    """Which farm a user acts on behalf of, and with what privilege."""

    farm: Farm
    role: Role
    access_level: AccessLevel

    model_config = {"frozen": True}

    @classmethod
    def for_role(cls, farm: Farm, role: "Role | str") -> "FarmContext":
        return cls(farm=farm, role=Role(role), access_level=access_level_for(role))

    @property
    def has_full_access(self) -> bool:
        return self.access_level == AccessLevel.FULL


class FarmUpdateRequest(BaseModel):
    """
    Request body for PUT /api/farm.

    Only name and province are editable. Unknown fields are ignored,
    values are trimmed, and at least one field must be present.
    """

    model_config = {"extra": "ignore"}

    name: Optional[str] = Field(None, description="New farm name")
    province: Optional[str] = Field(None, description="New province")

    @field_validator("name", "province", mode="before")
    @classmethod
    def _non_empty_string(cls, value, info):
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{info.field_name} must be a non-empty string")
        return value.strip()

    @model_validator(mode="after")
    def _at_least_one_field(self) -> "FarmUpdateRequest":
        if not self.to_update():
            raise ValueError("No valid fields to update")
        return self

    def to_update(self) -> dict[str, str]:
        """Column values to write, keyed by database column name."""
        data = {}
        if self.name is not None:
            data["farm_name"] = self.name
        if self.province is not None:
            data["province"] = self.province
        return data


class FarmResponse(BaseModel):
    """Envelope payload for single-farm endpoints."""

    farm: Farm


class FarmAccessResponse(BaseModel):
    """Envelope payload for GET /api/farm/access."""

    has_access: bool
