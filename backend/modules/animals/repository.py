"""
Animal repository for database access.
"""

import re
from collections import Counter
from datetime import datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository, page_range
from .models import Animal, AnimalStatus, AnimalType

# Activity statuses that count towards an animal's notification badge
OPEN_ACTIVITY_STATUSES = ("PENDING", "OVERDUE")

# Characters with meaning inside a PostgREST or=() filter
_FILTER_SYNTAX = re.compile(r"[,()]")


class AnimalRepository(BaseRepository[Animal]):
    """Repository for the animals table."""

    def get_by_id(self, animal_id: str) -> Optional[Animal]:
        result = self._db.table("animals").select("*").eq("id", animal_id).execute()
        if not result.data:
            return None
        return self._map_to_animal(result.data[0])

    def create_animal(self, data: dict[str, Any]) -> Animal:
        """Insert an animal. A duplicate (farm_id, tag_id) raises APIError 23505."""
        payload = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = self._db.table("animals").insert(payload).execute()
        return self._map_to_animal(result.data[0])

    def list_animals(
        self,
        farm_id: str,
        page: int = 1,
        page_size: int = 20,
        search: Optional[str] = None,
        status: Optional[AnimalStatus] = None,
        animal_type: Optional[AnimalType] = None,
    ) -> tuple[list[Animal], int]:
        """
        List a farm's animals, newest first.

        Args:
            search: Case-insensitive match on tag_id or name.

        Returns:
            (animals on the page, total matching rows)
        """
        query = self._db.table("animals").select("*", count="exact").eq("farm_id", farm_id)
        if status:
            query = query.eq("status", status.value)
        if animal_type:
            query = query.eq("type", animal_type.value)
        if search:
            term = _FILTER_SYNTAX.sub(" ", search).strip()
            if term:
                query = query.or_(f"tag_id.ilike.%{term}%,name.ilike.%{term}%")

        start, end = page_range(page, page_size)
        result = query.order("created_at", desc=True).range(start, end).execute()
        animals = [self._map_to_animal(row) for row in result.data]
        return animals, result.count or 0

    def update_animal(self, animal_id: str, data: dict[str, Any]) -> Animal:
        payload = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = self._db.table("animals").update(payload).eq("id", animal_id).execute()
        return self._map_to_animal(result.data[0])

    def count_open_activities(self, animal_ids: list[str]) -> dict[str, int]:
        """PENDING + OVERDUE activity counts per animal, from one query."""
        if not animal_ids:
            return {}
        result = (
            self._db.table("activities")
            .select("animal_id")
            .in_("animal_id", animal_ids)
            .in_("status", list(OPEN_ACTIVITY_STATUSES))
            .execute()
        )
        return dict(Counter(str(row["animal_id"]) for row in result.data))

    def _map_to_animal(self, data: dict[str, Any]) -> Animal:
        return Animal(
            id=str(data["id"]),
            farm_id=str(data["farm_id"]),
            tag_id=data["tag_id"],
            name=data.get("name"),
            type=AnimalType(data["type"]),
            gender=data.get("gender") or "FEMALE",
            status=data.get("status") or "ACTIVE",
            birth_date=data.get("birth_date"),
            color=data.get("color"),
            weight_kg=data.get("weight_kg"),
            height_cm=data.get("height_cm"),
            mother_tag=data.get("mother_tag"),
            father_tag=data.get("father_tag"),
            genome=data.get("genome"),
            image_url=data.get("image_url"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
