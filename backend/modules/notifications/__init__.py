"""
Notifications module.

Badge counts of activities needing attention.
"""

from .models import BadgeBreakdown, BadgeCounts, FarmBadgeCount
from .service import NotificationService

__all__ = [
    "BadgeBreakdown",
    "BadgeCounts",
    "FarmBadgeCount",
    "NotificationService",
]
