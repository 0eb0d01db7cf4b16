"""
Notifications module data models.
"""

from pydantic import BaseModel, Field


class BadgeBreakdown(BaseModel):
    pending: int = 0
    overdue: int = 0


class FarmBadgeCount(BaseModel):
    farm_id: str
    farm_name: str
    count: int


class BadgeCounts(BaseModel):
    """Payload of GET /api/notifications/badge."""

    badge_count: int = Field(..., description="pending + overdue")
    breakdown: BadgeBreakdown
    farm_counts: list[FarmBadgeCount]
