"""
User repository for database access.

Reads and writes the users table. Password hashes leave this module only
through get_credentials().
"""

from datetime import datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import UserProfile

_PROFILE_COLUMNS = (
    "id, username, first_name, last_name, email, line_id, avatar_url, created_at, updated_at"
)


class UserRepository(BaseRepository[UserProfile]):
    """Repository for user accounts."""

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        result = self._db.table("users").select(_PROFILE_COLUMNS).eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def get_credentials(self, username: str) -> Optional[tuple[UserProfile, Optional[str]]]:
        """
        Look up a user by username for login.

        Returns:
            (profile, password_hash) or None. The hash is None for
            accounts that only sign in through OAuth.
        """
        result = (
            self._db.table("users")
            .select(f"{_PROFILE_COLUMNS}, password_hash")
            .eq("username", username)
            .execute()
        )
        if not result.data:
            return None
        row = result.data[0]
        return self._map_to_profile(row), row.get("password_hash")

    def username_exists(self, username: str) -> bool:
        result = self._db.table("users").select("id").eq("username", username).execute()
        return bool(result.data)

    def create_user(self, data: dict[str, Any]) -> UserProfile:
        """Insert a user row; data uses column names and may include password_hash."""
        payload = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = self._db.table("users").insert(payload).execute()
        return self._map_to_profile(result.data[0])

    def update_password_hash(self, user_id: str, password_hash: str) -> None:
        data = {
            "password_hash": password_hash,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        self._db.table("users").update(data).eq("id", user_id).execute()

    def delete_user(self, user_id: str) -> None:
        self._db.table("users").delete().eq("id", user_id).execute()

    def _map_to_profile(self, data: dict[str, Any]) -> UserProfile:
        return UserProfile(
            id=str(data["id"]),
            username=data.get("username"),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            email=data.get("email"),
            line_id=data.get("line_id"),
            avatar_url=data.get("avatar_url"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
