"""Tests for FarmService."""

import pytest
from unittest.mock import AsyncMock, MagicMock
from datetime import datetime, timezone

from modules.farms.context import FarmContextResolver
from modules.farms.exceptions import FarmDatabaseError, NoFarmAccessError
from modules.farms.models import Farm, FarmContext, FarmUpdateRequest, Role
from modules.farms.repository import FarmRepository
from modules.farms.service import FarmService
from shared.config import Settings


def make_farm(farm_id: str = "farm-123", owner_id: str = "user-123", name: str = "ฟาร์มของฉัน") -> Farm:
    now = datetime.now(timezone.utc)
    return Farm(
        id=farm_id,
        name=name,
        owner_id=owner_id,
        province="ไม่ระบุ",
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def repository():
    return MagicMock(spec=FarmRepository)


@pytest.fixture
def resolver():
    mock = MagicMock(spec=FarmContextResolver)
    mock.resolve = AsyncMock()
    mock.resolve_all = AsyncMock()
    mock.check_access = AsyncMock()
    return mock


@pytest.fixture
def service(repository, resolver):
    return FarmService(
        repository,
        resolver,
        settings=Settings(default_farm_name="ฟาร์มทดสอบ", default_province="ชลบุรี"),
    )


class TestGetFarm:
    @pytest.mark.asyncio
    async def test_returns_resolved_farm(self, service, resolver):
        farm = make_farm()
        resolver.resolve.return_value = FarmContext.for_role(farm, Role.OWNER)

        assert await service.get_farm("user-123") == farm
        resolver.resolve.assert_awaited_once_with("user-123")

    @pytest.mark.asyncio
    async def test_staff_sees_owners_farm(self, service, resolver):
        farm = make_farm(owner_id="owner-1")
        resolver.resolve.return_value = FarmContext.for_role(farm, Role.MEMBER)

        result = await service.get_farm("staff-1")

        assert result.owner_id == "owner-1"

    @pytest.mark.asyncio
    async def test_no_access_propagates(self, service, resolver):
        resolver.resolve.side_effect = NoFarmAccessError()

        with pytest.raises(NoFarmAccessError):
            await service.get_farm("user-123")


class TestEnsureFarm:
    @pytest.mark.asyncio
    async def test_existing_farm_is_not_recreated(self, service, resolver, repository):
        farm = make_farm()
        resolver.resolve.return_value = FarmContext.for_role(farm, Role.OWNER)

        result, created = await service.ensure_farm("user-123")

        assert result == farm
        assert created is False
        repository.create_farm.assert_not_called()

    @pytest.mark.asyncio
    async def test_staff_does_not_get_own_farm(self, service, resolver, repository):
        resolver.resolve.return_value = FarmContext.for_role(make_farm(owner_id="owner-1"), Role.MEMBER)

        _, created = await service.ensure_farm("staff-1")

        assert created is False
        repository.create_farm.assert_not_called()

    @pytest.mark.asyncio
    async def test_creates_farm_with_defaults(self, service, resolver, repository):
        resolver.resolve.side_effect = NoFarmAccessError()
        repository.create_farm.return_value = make_farm(name="ฟาร์มทดสอบ")

        result, created = await service.ensure_farm("user-123")

        assert created is True
        assert result.name == "ฟาร์มทดสอบ"
        repository.create_farm.assert_called_once_with(
            owner_id="user-123",
            name="ฟาร์มทดสอบ",
            province="ชลบุรี",
        )

    @pytest.mark.asyncio
    async def test_database_error_does_not_create(self, service, resolver, repository):
        resolver.resolve.side_effect = FarmDatabaseError()

        with pytest.raises(FarmDatabaseError):
            await service.ensure_farm("user-123")

        repository.create_farm.assert_not_called()


class TestUpdateFarm:
    @pytest.mark.asyncio
    async def test_updates_resolved_farm(self, service, resolver, repository):
        resolver.resolve.return_value = FarmContext.for_role(make_farm("farm-9"), Role.MEMBER)
        repository.update_farm.return_value = make_farm("farm-9", name="ฟาร์มใหม่")

        result = await service.update_farm("staff-1", FarmUpdateRequest(name="  ฟาร์มใหม่  "))

        assert result.name == "ฟาร์มใหม่"
        repository.update_farm.assert_called_once_with("farm-9", {"farm_name": "ฟาร์มใหม่"})


class TestContextsAndAccess:
    @pytest.mark.asyncio
    async def test_list_contexts(self, service, resolver):
        contexts = [FarmContext.for_role(make_farm(), Role.OWNER)]
        resolver.resolve_all.return_value = contexts

        assert await service.list_contexts("user-123") == contexts

    @pytest.mark.asyncio
    async def test_has_access(self, service, resolver):
        resolver.check_access.return_value = False

        assert await service.has_access("user-123") is False
        resolver.check_access.assert_awaited_once_with("user-123")
