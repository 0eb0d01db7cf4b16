"""
Notification badge counts.

The badge counts a farm's activities that still need attention:
PENDING plus OVERDUE.
"""

from modules.activities.models import ActivityStatus
from modules.activities.repository import ActivityRepository
from modules.farms.models import FarmContext

from .models import BadgeBreakdown, BadgeCounts, FarmBadgeCount


class NotificationService:
    """Computes badge counts for the caller's farm."""

    def __init__(self, activities: ActivityRepository):
        self._activities = activities

    async def get_badge(self, context: FarmContext) -> BadgeCounts:
        farm = context.farm
        pending = self._activities.count_by_status(farm.id, ActivityStatus.PENDING)
        overdue = self._activities.count_by_status(farm.id, ActivityStatus.OVERDUE)
        total = pending + overdue

        return BadgeCounts(
            badge_count=total,
            breakdown=BadgeBreakdown(pending=pending, overdue=overdue),
            farm_counts=[FarmBadgeCount(farm_id=farm.id, farm_name=farm.name, count=total)],
        )
