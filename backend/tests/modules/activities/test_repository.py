from unittest.mock import MagicMock
from datetime import datetime, timezone

from modules.activities.models import ActivityStatus
from modules.activities.repository import ActivityRepository


def create_activity_row(activity_id: str = "activity-1", **overrides) -> dict:
    row = {
        "id": activity_id,
        "farm_id": "farm-123",
        "animal_id": "animal-1",
        "title": "ฉีดวัคซีน",
        "activity_date": "2024-06-01T02:00:00+00:00",
        "status": "PENDING",
        "created_by": "user-1",
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
        "animal": {"id": "animal-1", "tag_id": "TH-001", "name": "ทองดี", "image_url": None},
    }
    row.update(overrides)
    return row


class TestActivityRepository:
    def test_get_by_id_embeds_animal(self):
        mock_db = MagicMock()
        repo = ActivityRepository(mock_db)
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            create_activity_row()
        ]

        activity = repo.get_by_id("activity-1")

        assert activity.animal.tag_id == "TH-001"
        assert activity.created_by == "user-1"
        assert activity.completed_by is None
        mock_db.table.return_value.select.assert_called_with(
            "*, animal:animals(id, tag_id, name, image_url)"
        )

    def test_get_by_id_without_animal(self):
        mock_db = MagicMock()
        repo = ActivityRepository(mock_db)
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            create_activity_row(animal=None)
        ]

        assert repo.get_by_id("activity-1").animal is None

    def test_get_by_id_not_found(self):
        mock_db = MagicMock()
        repo = ActivityRepository(mock_db)
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []

        assert repo.get_by_id("missing") is None

    def test_list_with_date_range(self):
        mock_db = MagicMock()
        repo = ActivityRepository(mock_db)
        query = mock_db.table.return_value.select.return_value.eq.return_value
        query.eq.return_value = query
        query.gte.return_value = query
        query.lte.return_value = query
        result = query.order.return_value.range.return_value.execute.return_value
        result.data = [create_activity_row()]
        result.count = 1

        start = datetime(2024, 6, 1, tzinfo=timezone.utc)
        end = datetime(2024, 6, 30, tzinfo=timezone.utc)
        activities, total = repo.list_activities(
            "farm-123",
            page=1,
            page_size=20,
            animal_id="animal-1",
            status=ActivityStatus.PENDING,
            start_date=start,
            end_date=end,
        )

        assert total == 1
        assert activities[0].id == "activity-1"
        query.eq.assert_any_call("animal_id", "animal-1")
        query.eq.assert_any_call("status", "PENDING")
        query.gte.assert_called_once_with("activity_date", start.isoformat())
        query.lte.assert_called_once_with("activity_date", end.isoformat())
        query.order.assert_called_with("activity_date", desc=True)
        query.order.return_value.range.assert_called_with(0, 19)

    def test_count_by_status(self):
        mock_db = MagicMock()
        repo = ActivityRepository(mock_db)
        chain = mock_db.table.return_value.select.return_value.eq.return_value.eq.return_value
        chain.execute.return_value.count = 4

        assert repo.count_by_status("farm-123", ActivityStatus.OVERDUE) == 4
        mock_db.table.return_value.select.assert_called_with("id", count="exact", head=True)
        mock_db.table.return_value.select.return_value.eq.return_value.eq.assert_called_with(
            "status", "OVERDUE"
        )

    def test_update_activity(self):
        mock_db = MagicMock()
        repo = ActivityRepository(mock_db)
        mock_db.table.return_value.update.return_value.eq.return_value.execute.return_value.data = [
            create_activity_row(status="COMPLETED", completed_by="user-2")
        ]

        activity = repo.update_activity("activity-1", {"status": "COMPLETED"})

        assert activity.status == ActivityStatus.COMPLETED
        assert activity.completed_by == "user-2"
