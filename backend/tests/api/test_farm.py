"""Tests for /api/farm endpoints."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from api.dependencies import get_farm_service
from modules.farms.exceptions import FarmDatabaseError, InvalidUserError, NoFarmAccessError
from modules.farms.models import Role


@pytest.fixture
def farm_service(app, make_farm):
    service = MagicMock()
    service.get_farm = AsyncMock(return_value=make_farm())
    service.ensure_farm = AsyncMock(return_value=(make_farm(), False))
    service.update_farm = AsyncMock(return_value=make_farm())
    service.list_contexts = AsyncMock(return_value=[])
    service.has_access = AsyncMock(return_value=True)
    app.dependency_overrides[get_farm_service] = lambda: service
    return service


class TestGetFarm:
    def test_requires_auth(self, client, token_auth, farm_service):
        response = client.get("/api/farm")

        assert response.status_code == 401
        farm_service.get_farm.assert_not_called()

    def test_returns_farm(self, client, authed, farm_service):
        response = client.get("/api/farm")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["farm"]["id"] == "farm-123"
        assert body["data"]["farm"]["name"] == "ฟาร์มของฉัน"
        farm_service.get_farm.assert_awaited_once_with("owner-1")

    def test_no_farm(self, client, authed, farm_service):
        farm_service.get_farm.side_effect = NoFarmAccessError()

        response = client.get("/api/farm")

        assert response.status_code == 403
        assert response.json()["error"] == {"code": "NO_FARM_ACCESS", "message": "ไม่พบฟาร์มของคุณ"}

    def test_invalid_user(self, client, authed, farm_service):
        farm_service.get_farm.side_effect = InvalidUserError()

        response = client.get("/api/farm")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_USER"

    def test_database_error_hides_details(self, client, authed, farm_service):
        farm_service.get_farm.side_effect = FarmDatabaseError()

        response = client.get("/api/farm")

        assert response.status_code == 500
        assert response.json()["error"] == {
            "code": "INTERNAL_ERROR",
            "message": "เกิดข้อผิดพลาดในการดึงข้อมูล",
        }


class TestEnsureFarm:
    def test_existing_farm(self, client, authed, farm_service):
        response = client.post("/api/farm")

        assert response.status_code == 200
        assert "message" not in response.json()

    def test_created_farm(self, client, authed, farm_service, make_farm):
        farm_service.ensure_farm.return_value = (make_farm(owner_id="owner-1"), True)

        response = client.post("/api/farm")

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "สร้างฟาร์มสำเร็จแล้ว"
        assert body["data"]["farm"]["owner_id"] == "owner-1"

    def test_database_error_message(self, client, authed, farm_service):
        farm_service.ensure_farm.side_effect = FarmDatabaseError()

        response = client.post("/api/farm")

        assert response.status_code == 500
        assert response.json()["error"]["message"] == "เกิดข้อผิดพลาดในการสร้างฟาร์ม"


class TestUpdateFarm:
    def test_update(self, client, authed, farm_service):
        response = client.put("/api/farm", json={"name": "  ฟาร์มใหม่ ", "farm_code": "x"})

        assert response.status_code == 200
        assert response.json()["message"] == "อัปเดตข้อมูลฟาร์มสำเร็จแล้ว"
        request = farm_service.update_farm.call_args[0][1]
        assert request.to_update() == {"farm_name": "ฟาร์มใหม่"}

    def test_empty_body_rejected(self, client, authed, farm_service):
        response = client.put("/api/farm", json={})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        farm_service.update_farm.assert_not_called()

    def test_null_name_rejected(self, client, authed, farm_service):
        response = client.put("/api/farm", json={"name": None, "province": "เชียงใหม่"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        farm_service.update_farm.assert_not_called()

    def test_invalid_json(self, client, authed, farm_service):
        response = client.put(
            "/api/farm",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == {
            "code": "INVALID_JSON",
            "message": "รูปแบบข้อมูลไม่ถูกต้อง",
        }


class TestContextsAndAccess:
    def test_contexts(self, client, authed, farm_service, make_context):
        farm_service.list_contexts.return_value = [
            make_context(Role.OWNER, "farm-1"),
            make_context(Role.MEMBER, "farm-2"),
        ]

        response = client.get("/api/farm/contexts")

        contexts = response.json()["data"]["contexts"]
        assert [c["farm"]["id"] for c in contexts] == ["farm-1", "farm-2"]
        assert [c["access_level"] for c in contexts] == ["full", "limited"]

    def test_access(self, client, authed, farm_service):
        farm_service.has_access.return_value = False

        response = client.get("/api/farm/access")

        assert response.json()["data"] == {"has_access": False}
