"""
Staff listing queries.

Memberships of a farm joined with their user accounts. Membership writes
live in FarmRepository; user writes in UserRepository.
"""

from typing import Any

from modules.farms.models import Role
from shared.repository import BaseRepository, page_range
from .models import StaffMember

_MEMBERSHIP_WITH_USER = (
    "role, joined_at, user:users(id, username, first_name, last_name, email, created_at, updated_at)"
)


class StaffRepository(BaseRepository[StaffMember]):
    """Read-only view over farm_members joined with users."""

    def list_staff(
        self,
        farm_id: str,
        page: int = 1,
        page_size: int = 20,
    ) -> tuple[list[StaffMember], int]:
        """MEMBER-role accounts of a farm, most recently joined first."""
        start, end = page_range(page, page_size)
        result = (
            self._db.table("farm_members")
            .select(_MEMBERSHIP_WITH_USER, count="exact")
            .eq("farm_id", farm_id)
            .eq("role", Role.MEMBER.value)
            .order("joined_at", desc=True)
            .range(start, end)
            .execute()
        )
        staff = [self._map_to_staff(row) for row in result.data if row.get("user")]
        return staff, result.count or 0

    def _map_to_staff(self, data: dict[str, Any]) -> StaffMember:
        user = data["user"]
        return StaffMember(
            id=str(user["id"]),
            username=user.get("username"),
            first_name=user.get("first_name"),
            last_name=user.get("last_name"),
            email=user.get("email"),
            role=Role(data.get("role") or Role.MEMBER.value),
            joined_at=data["joined_at"],
            created_at=user["created_at"],
            updated_at=user["updated_at"],
        )
