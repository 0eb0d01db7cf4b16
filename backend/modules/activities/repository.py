"""
Activity repository for database access.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository, page_range
from .models import Activity, ActivityAnimal, ActivityStatus

# PostgREST embed: activity row with a summary of its animal
_ACTIVITY_WITH_ANIMAL = "*, animal:animals(id, tag_id, name, image_url)"


class ActivityRepository(BaseRepository[Activity]):
    """Repository for the activities table."""

    def get_by_id(self, activity_id: str) -> Optional[Activity]:
        result = (
            self._db.table("activities")
            .select(_ACTIVITY_WITH_ANIMAL)
            .eq("id", activity_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_activity(result.data[0])

    def create_activity(self, data: dict[str, Any]) -> Activity:
        payload = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = self._db.table("activities").insert(payload).execute()
        return self._map_to_activity(result.data[0])

    def update_activity(self, activity_id: str, data: dict[str, Any]) -> Activity:
        payload = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = self._db.table("activities").update(payload).eq("id", activity_id).execute()
        return self._map_to_activity(result.data[0])

    def list_activities(
        self,
        farm_id: str,
        page: int = 1,
        page_size: int = 20,
        animal_id: Optional[str] = None,
        status: Optional[ActivityStatus] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> tuple[list[Activity], int]:
        """
        List a farm's activities, latest activity_date first.

        start_date and end_date bound activity_date inclusively.

        Returns:
            (activities on the page, total matching rows)
        """
        query = (
            self._db.table("activities")
            .select(_ACTIVITY_WITH_ANIMAL, count="exact")
            .eq("farm_id", farm_id)
        )
        if animal_id:
            query = query.eq("animal_id", animal_id)
        if status:
            query = query.eq("status", status.value)
        if start_date:
            query = query.gte("activity_date", start_date.isoformat())
        if end_date:
            query = query.lte("activity_date", end_date.isoformat())

        start, end = page_range(page, page_size)
        result = query.order("activity_date", desc=True).range(start, end).execute()
        activities = [self._map_to_activity(row) for row in result.data]
        return activities, result.count or 0

    def count_by_status(self, farm_id: str, status: ActivityStatus) -> int:
        """Number of the farm's activities in a status."""
        result = (
            self._db.table("activities")
            .select("id", count="exact", head=True)
            .eq("farm_id", farm_id)
            .eq("status", status.value)
            .execute()
        )
        return result.count or 0

    def _map_to_activity(self, data: dict[str, Any]) -> Activity:
        animal_data = data.get("animal")
        return Activity(
            id=str(data["id"]),
            farm_id=str(data["farm_id"]),
            animal_id=str(data["animal_id"]),
            title=data["title"],
            description=data.get("description"),
            activity_date=data["activity_date"],
            due_date=data.get("due_date"),
            status=ActivityStatus(data.get("status") or "PENDING"),
            status_reason=data.get("status_reason"),
            created_by=_optional_str(data.get("created_by")),
            completed_by=_optional_str(data.get("completed_by")),
            completed_at=data.get("completed_at"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
            animal=ActivityAnimal(
                id=str(animal_data["id"]),
                tag_id=animal_data["tag_id"],
                name=animal_data.get("name"),
                image_url=animal_data.get("image_url"),
            ) if animal_data else None,
        )


def _optional_str(value) -> Optional[str]:
    return str(value) if value is not None else None
