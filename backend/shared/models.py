"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models stay in their respective module directories.
"""

import math
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Populated from the session token claims and made available to route
    handlers via dependency injection. Only the id is trusted for
    authorization; everything else is informational.
    """

    id: str = Field(..., description="User ID (UUID)")
    username: Optional[str] = Field(None, description="Login name for password accounts")
    email: Optional[str] = Field(None, description="Email address, if known")
    last_sign_in: Optional[datetime] = Field(None, description="Token issue time")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


class Pagination(BaseModel):
    """Pagination block returned by list endpoints."""

    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit) if limit else 0,
        )
