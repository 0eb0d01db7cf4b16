"""
Animals module data models.

Animal records and the request bodies accepted by the animal API.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from shared.models import Pagination


class AnimalType(str, Enum):
    WATER_BUFFALO = "WATER_BUFFALO"
    SWAMP_BUFFALO = "SWAMP_BUFFALO"
    CATTLE = "CATTLE"
    GOAT = "GOAT"
    PIG = "PIG"
    CHICKEN = "CHICKEN"


class AnimalGender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    UNKNOWN = "UNKNOWN"


class AnimalStatus(str, Enum):
    ACTIVE = "ACTIVE"
    TRANSFERRED = "TRANSFERRED"
    DECEASED = "DECEASED"
    SOLD = "SOLD"


# Statuses a soft delete may move an animal into
REMOVAL_STATUSES = (AnimalStatus.TRANSFERRED, AnimalStatus.DECEASED, AnimalStatus.SOLD)


class Animal(BaseModel):
    """An animal row."""

    id: str
    farm_id: str
    tag_id: str
    name: Optional[str] = None
    type: AnimalType
    gender: AnimalGender = AnimalGender.FEMALE
    status: AnimalStatus = AnimalStatus.ACTIVE
    birth_date: Optional[date] = None
    color: Optional[str] = None
    weight_kg: Optional[float] = None
    height_cm: Optional[int] = None
    mother_tag: Optional[str] = None
    father_tag: Optional[str] = None
    genome: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    notification_count: int = Field(0, description="PENDING + OVERDUE activities")


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class AnimalCreateRequest(BaseModel):
    """
    Request body for POST /api/animals.

    farm_id is never read from the body; the animal always goes to the
    caller's resolved farm.
    """

    model_config = {"extra": "ignore"}

    tag_id: str = Field(..., min_length=1, max_length=255)
    type: AnimalType
    name: Optional[str] = Field(None, max_length=255)
    gender: AnimalGender = AnimalGender.FEMALE
    color: Optional[str] = Field(None, max_length=255)
    birth_date: Optional[date] = None
    weight_kg: Optional[float] = Field(None, gt=0)
    height_cm: Optional[int] = Field(None, gt=0)
    mother_tag: Optional[str] = Field(None, max_length=255)
    father_tag: Optional[str] = Field(None, max_length=255)
    genome: Optional[str] = None

    @field_validator("name", "color", "mother_tag", "father_tag", "genome", mode="before")
    @classmethod
    def _blank_strings(cls, value):
        return _blank_to_none(value)

    def to_insert(self, farm_id: str) -> dict:
        data = self.model_dump(mode="json")
        data["farm_id"] = farm_id
        return data


class AnimalUpdateRequest(BaseModel):
    """Request body for PUT /api/animals/{id}. Only fields sent are written."""

    model_config = {"extra": "ignore"}

    name: Optional[str] = Field(None, max_length=255)
    color: Optional[str] = Field(None, max_length=255)
    weight_kg: Optional[float] = Field(None, gt=0)
    height_cm: Optional[int] = Field(None, gt=0)
    mother_tag: Optional[str] = Field(None, max_length=255)
    father_tag: Optional[str] = Field(None, max_length=255)
    genome: Optional[str] = None

    def to_update(self) -> dict:
        return self.model_dump(mode="json", exclude_unset=True)


class AnimalStatusChangeRequest(BaseModel):
    """Request body for DELETE /api/animals/{id}."""

    status: AnimalStatus
    reason: Optional[str] = None

    @field_validator("status")
    @classmethod
    def _removal_status(cls, value: AnimalStatus) -> AnimalStatus:
        if value not in REMOVAL_STATUSES:
            raise ValueError("สถานะต้องเป็น TRANSFERRED, DECEASED, หรือ SOLD")
        return value


class AnimalFilters(BaseModel):
    """Query filters for GET /api/animals."""

    search: Optional[str] = None
    status: Optional[AnimalStatus] = None
    type: Optional[AnimalType] = None
    page: int = Field(1, ge=1)
    limit: int = Field(20, ge=1)


class AnimalResponse(BaseModel):
    animal: Animal


class AnimalListResponse(BaseModel):
    animals: list[Animal]
    pagination: Pagination
