"""Tests for farms repository."""

from unittest.mock import MagicMock
from datetime import datetime, timezone

from modules.farms.models import Role
from modules.farms.repository import FarmRepository


def create_farm_row(
    farm_id: str = "farm-123",
    owner_id: str = "user-123",
    farm_name: str = "ฟาร์มของฉัน",
) -> dict:
    """Helper to create a farms row."""
    now = datetime.now(timezone.utc).isoformat()
    return {
        "id": farm_id,
        "farm_name": farm_name,
        "owner_id": owner_id,
        "province": "ไม่ระบุ",
        "farm_code": None,
        "created_at": now,
        "updated_at": now,
    }


def create_member_row(
    user_id: str = "staff-123",
    farm: dict = None,
    role: str = "MEMBER",
) -> dict:
    """Helper to create a farm_members row with an embedded farm."""
    farm = farm or create_farm_row()
    return {
        "id": "member-123",
        "farm_id": farm["id"],
        "user_id": user_id,
        "role": role,
        "joined_at": datetime.now(timezone.utc).isoformat(),
        "farm": farm,
    }


class TestOwnershipLookups:
    """Tests for farm ownership queries."""

    def test_find_owned_farm(self):
        """Should map farm_name and farm_code onto Farm."""
        mock_db = MagicMock()
        repo = FarmRepository(mock_db)
        chain = mock_db.table.return_value.select.return_value.eq.return_value
        chain.order.return_value.limit.return_value.execute.return_value.data = [
            create_farm_row(farm_name="ฟาร์มควายไทย")
        ]

        farm = repo.find_owned_farm("user-123")

        assert farm.id == "farm-123"
        assert farm.name == "ฟาร์มควายไทย"
        assert farm.province == "ไม่ระบุ"
        mock_db.table.assert_called_with("farms")
        mock_db.table.return_value.select.return_value.eq.assert_called_with("owner_id", "user-123")
        chain.order.assert_called_with("created_at")

    def test_find_owned_farm_not_found(self):
        mock_db = MagicMock()
        repo = FarmRepository(mock_db)
        chain = mock_db.table.return_value.select.return_value.eq.return_value
        chain.order.return_value.limit.return_value.execute.return_value.data = []

        assert repo.find_owned_farm("user-123") is None

    def test_find_owned_farm_by_id(self):
        """Should filter on both farm id and owner."""
        mock_db = MagicMock()
        repo = FarmRepository(mock_db)
        eq_farm = mock_db.table.return_value.select.return_value.eq
        eq_owner = eq_farm.return_value.eq
        eq_owner.return_value.limit.return_value.execute.return_value.data = [create_farm_row()]

        farm = repo.find_owned_farm_by_id("farm-123", "user-123")

        assert farm.id == "farm-123"
        eq_farm.assert_called_with("id", "farm-123")
        eq_owner.assert_called_with("owner_id", "user-123")

    def test_list_owned_farms(self):
        mock_db = MagicMock()
        repo = FarmRepository(mock_db)
        chain = mock_db.table.return_value.select.return_value.eq.return_value
        chain.order.return_value.execute.return_value.data = [
            create_farm_row("farm-1"),
            create_farm_row("farm-2"),
        ]

        farms = repo.list_owned_farms("user-123")

        assert [f.id for f in farms] == ["farm-1", "farm-2"]


class TestMembershipLookups:
    """Tests for farm_members queries."""

    def test_find_membership_embeds_farm(self):
        mock_db = MagicMock()
        repo = FarmRepository(mock_db)
        chain = mock_db.table.return_value.select.return_value.eq.return_value
        chain.order.return_value.limit.return_value.execute.return_value.data = [
            create_member_row()
        ]

        member = repo.find_membership("staff-123")

        assert member.user_id == "staff-123"
        assert member.role == Role.MEMBER
        assert member.farm is not None
        assert member.farm.id == "farm-123"
        mock_db.table.assert_called_with("farm_members")
        mock_db.table.return_value.select.assert_called_with("*, farm:farms(*)")

    def test_find_membership_without_farm(self):
        """A membership whose farm row is gone maps to farm=None."""
        mock_db = MagicMock()
        repo = FarmRepository(mock_db)
        row = create_member_row()
        row["farm"] = None
        chain = mock_db.table.return_value.select.return_value.eq.return_value
        chain.order.return_value.limit.return_value.execute.return_value.data = [row]

        member = repo.find_membership("staff-123")

        assert member.farm is None

    def test_find_membership_in_farm_not_found(self):
        mock_db = MagicMock()
        repo = FarmRepository(mock_db)
        chain = mock_db.table.return_value.select.return_value.eq.return_value.eq.return_value
        chain.limit.return_value.execute.return_value.data = []

        assert repo.find_membership_in_farm("farm-123", "staff-123") is None

    def test_list_memberships(self):
        mock_db = MagicMock()
        repo = FarmRepository(mock_db)
        chain = mock_db.table.return_value.select.return_value.eq.return_value
        chain.order.return_value.execute.return_value.data = [
            create_member_row(role="MEMBER"),
            create_member_row(role="OWNER"),
        ]

        members = repo.list_memberships("staff-123")

        assert [m.role for m in members] == [Role.MEMBER, Role.OWNER]


class TestFindAccessibleFarm:
    """Tests for the get_user_farm_context() RPC."""

    def test_owner_row(self):
        mock_db = MagicMock()
        repo = FarmRepository(mock_db)
        row = {**create_farm_row(), "access_type": "owner", "member_role": None}
        mock_db.rpc.return_value.execute.return_value.data = [row]

        farm, role = repo.find_accessible_farm("user-123")

        assert farm.id == "farm-123"
        assert role == Role.OWNER
        mock_db.rpc.assert_called_once_with("get_user_farm_context", {"p_user_id": "user-123"})

    def test_member_row_uses_member_role(self):
        mock_db = MagicMock()
        repo = FarmRepository(mock_db)
        row = {**create_farm_row(), "access_type": "member", "member_role": "MEMBER"}
        mock_db.rpc.return_value.execute.return_value.data = [row]

        _, role = repo.find_accessible_farm("staff-123")

        assert role == Role.MEMBER

    def test_no_rows(self):
        mock_db = MagicMock()
        repo = FarmRepository(mock_db)
        mock_db.rpc.return_value.execute.return_value.data = []

        assert repo.find_accessible_farm("nobody") is None


class TestFarmWrites:
    """Tests for farm and membership inserts and updates."""

    def test_create_farm(self):
        mock_db = MagicMock()
        repo = FarmRepository(mock_db)
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [create_farm_row()]

        farm = repo.create_farm("user-123", "ฟาร์มของฉัน", "ไม่ระบุ")

        assert farm.owner_id == "user-123"
        inserted = mock_db.table.return_value.insert.call_args[0][0]
        assert inserted["owner_id"] == "user-123"
        assert inserted["farm_name"] == "ฟาร์มของฉัน"
        assert inserted["province"] == "ไม่ระบุ"
        assert "updated_at" in inserted

    def test_update_farm(self):
        mock_db = MagicMock()
        repo = FarmRepository(mock_db)
        mock_db.table.return_value.update.return_value.eq.return_value.execute.return_value.data = [
            create_farm_row(farm_name="ฟาร์มใหม่")
        ]

        farm = repo.update_farm("farm-123", {"farm_name": "ฟาร์มใหม่"})

        assert farm.name == "ฟาร์มใหม่"
        payload = mock_db.table.return_value.update.call_args[0][0]
        assert payload["farm_name"] == "ฟาร์มใหม่"
        assert "updated_at" in payload
        mock_db.table.return_value.update.return_value.eq.assert_called_with("id", "farm-123")

    def test_add_member(self):
        mock_db = MagicMock()
        repo = FarmRepository(mock_db)
        row = create_member_row()
        row.pop("farm")
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [row]

        member = repo.add_member("farm-123", "staff-123")

        assert member.role == Role.MEMBER
        mock_db.table.return_value.insert.assert_called_with(
            {"farm_id": "farm-123", "user_id": "staff-123", "role": "MEMBER"}
        )
