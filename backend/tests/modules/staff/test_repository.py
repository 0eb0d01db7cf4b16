from unittest.mock import MagicMock

from modules.farms.models import Role
from modules.staff.repository import StaffRepository


def create_row(user_id: str = "staff-1", **overrides) -> dict:
    row = {
        "role": "MEMBER",
        "joined_at": "2024-02-01T00:00:00+00:00",
        "user": {
            "id": user_id,
            "username": "staff01",
            "first_name": "สมหญิง",
            "last_name": "ขยัน",
            "email": None,
            "created_at": "2024-02-01T00:00:00+00:00",
            "updated_at": "2024-02-01T00:00:00+00:00",
        },
    }
    row.update(overrides)
    return row


class TestStaffRepository:
    def test_list_staff(self):
        mock_db = MagicMock()
        repo = StaffRepository(mock_db)
        select = mock_db.table.return_value.select
        chain = select.return_value.eq.return_value.eq.return_value
        result = chain.order.return_value.range.return_value.execute.return_value
        result.data = [create_row("s1"), create_row("s2", user=None)]
        result.count = 2

        staff, total = repo.list_staff("farm-123", page=2, page_size=5)

        assert [s.id for s in staff] == ["s1"]
        assert staff[0].role == Role.MEMBER
        assert total == 2
        mock_db.table.assert_called_with("farm_members")
        assert select.call_args.kwargs == {"count": "exact"}
        select.return_value.eq.return_value.eq.assert_called_with("role", "MEMBER")
        chain.order.assert_called_with("joined_at", desc=True)
        chain.order.return_value.range.assert_called_with(5, 9)
