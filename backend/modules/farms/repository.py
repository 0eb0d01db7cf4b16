"""
Farm repository for database access.

Encapsulates all Supabase queries and data mapping for:
- farms
- farm_members
- the get_user_farm_context() SQL function (see migrations/002)
"""

from datetime import datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Farm, FarmMember, Role


# PostgREST embed: membership row with its farm under the "farm" key
_MEMBERSHIP_WITH_FARM = "*, farm:farms(*)"


class FarmRepository(BaseRepository[Farm]):
    """
    Repository for farm and membership data access.

    Note: This repository does NOT perform authorization checks.
    FarmContextResolver decides who may act on which farm.
    """

    # -------------------------------------------------------------------------
    # Ownership lookups
    # -------------------------------------------------------------------------

    def find_owned_farm(self, user_id: str) -> Optional[Farm]:
        """Oldest farm owned by the user, or None."""
        result = (
            self._db.table("farms")
            .select("*")
            .eq("owner_id", user_id)
            .order("created_at")
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_farm(result.data[0])

    def find_owned_farm_by_id(self, farm_id: str, user_id: str) -> Optional[Farm]:
        """The farm with this id if the user owns it, else None."""
        result = (
            self._db.table("farms")
            .select("*")
            .eq("id", farm_id)
            .eq("owner_id", user_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_farm(result.data[0])

    def list_owned_farms(self, user_id: str) -> list[Farm]:
        """All farms owned by the user, oldest first."""
        result = (
            self._db.table("farms")
            .select("*")
            .eq("owner_id", user_id)
            .order("created_at")
            .execute()
        )
        return [self._map_to_farm(row) for row in result.data]

    # -------------------------------------------------------------------------
    # Membership lookups
    # -------------------------------------------------------------------------

    def find_membership(self, user_id: str) -> Optional[FarmMember]:
        """Earliest membership of the user, joined with its farm."""
        result = (
            self._db.table("farm_members")
            .select(_MEMBERSHIP_WITH_FARM)
            .eq("user_id", user_id)
            .order("joined_at")
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_member(result.data[0])

    def find_membership_in_farm(self, farm_id: str, user_id: str) -> Optional[FarmMember]:
        """The user's membership in exactly this farm, joined with the farm."""
        result = (
            self._db.table("farm_members")
            .select(_MEMBERSHIP_WITH_FARM)
            .eq("farm_id", farm_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_member(result.data[0])

    def list_memberships(self, user_id: str) -> list[FarmMember]:
        """All memberships of the user, joined with their farms."""
        result = (
            self._db.table("farm_members")
            .select(_MEMBERSHIP_WITH_FARM)
            .eq("user_id", user_id)
            .order("joined_at")
            .execute()
        )
        return [self._map_to_member(row) for row in result.data]

    # -------------------------------------------------------------------------
    # Single-query resolution
    # -------------------------------------------------------------------------

    def find_accessible_farm(self, user_id: str) -> Optional[tuple[Farm, Role]]:
        """
        Resolve the user's farm with one round trip.

        Calls get_user_farm_context(), which unions owned farms and member
        farms, sorts ownership rows first and returns at most one row.

        Returns:
            (farm, role) or None when the user has no farm.
        """
        result = self._db.rpc("get_user_farm_context", {"p_user_id": user_id}).execute()
        if not result.data:
            return None

        row = result.data[0]
        if row["access_type"] == "owner":
            role = Role.OWNER
        else:
            role = Role(row.get("member_role") or Role.MEMBER.value)
        return self._map_to_farm(row), role

    # -------------------------------------------------------------------------
    # Farm writes
    # -------------------------------------------------------------------------

    def create_farm(self, owner_id: str, name: str, province: Optional[str]) -> Farm:
        """Insert a farm owned by owner_id."""
        now = datetime.now(timezone.utc).isoformat()
        data = {
            "owner_id": owner_id,
            "farm_name": name,
            "province": province,
            "updated_at": now,
        }
        result = self._db.table("farms").insert(data).execute()
        return self._map_to_farm(result.data[0])

    def update_farm(self, farm_id: str, data: dict[str, Any]) -> Farm:
        """Apply column updates to a farm and return the new row."""
        payload = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = self._db.table("farms").update(payload).eq("id", farm_id).execute()
        return self._map_to_farm(result.data[0])

    # -------------------------------------------------------------------------
    # Membership writes
    # -------------------------------------------------------------------------

    def add_member(self, farm_id: str, user_id: str, role: Role = Role.MEMBER) -> FarmMember:
        """Insert a membership. Raises on a duplicate (farm_id, user_id)."""
        data = {"farm_id": farm_id, "user_id": user_id, "role": role.value}
        result = self._db.table("farm_members").insert(data).execute()
        return self._map_to_member(result.data[0])

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_farm(self, data: dict[str, Any]) -> Farm:
        """Map a farms row (or get_user_farm_context row) to Farm."""
        return Farm(
            id=str(data["id"]),
            name=data["farm_name"],
            owner_id=str(data["owner_id"]),
            province=data.get("province"),
            code=data.get("farm_code"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )

    def _map_to_member(self, data: dict[str, Any]) -> FarmMember:
        """Map a farm_members row with optional embedded farm."""
        farm_data = data.get("farm")
        return FarmMember(
            id=str(data["id"]),
            farm_id=str(data["farm_id"]),
            user_id=str(data["user_id"]),
            role=Role(data.get("role") or Role.MEMBER.value),
            joined_at=data["joined_at"],
            farm=self._map_to_farm(farm_data) if farm_data else None,
        )
