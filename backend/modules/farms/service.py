"""
Farm service implementation.

Farm reads go through the context resolver so owners and staff see the
same farm; auto-provisioning only happens for users with no farm at all.
"""

import logging
from typing import Optional

from shared.config import Settings, get_settings

from .context import FarmContextResolver
from .exceptions import NoFarmAccessError
from .interfaces import IFarmService
from .models import Farm, FarmContext, FarmUpdateRequest
from .repository import FarmRepository

logger = logging.getLogger(__name__)


class FarmService(IFarmService):
    """Farm operations backed by FarmRepository."""

    def __init__(
        self,
        repository: FarmRepository,
        resolver: FarmContextResolver,
        settings: Optional[Settings] = None,
    ):
        self._repository = repository
        self._resolver = resolver
        self._settings = settings or get_settings()

    async def get_farm(self, user_id: str) -> Farm:
        context = await self._resolver.resolve(user_id)
        return context.farm

    async def ensure_farm(self, user_id: str) -> tuple[Farm, bool]:
        try:
            context = await self._resolver.resolve(user_id)
            return context.farm, False
        except NoFarmAccessError:
            pass

        farm = self._repository.create_farm(
            owner_id=user_id,
            name=self._settings.default_farm_name,
            province=self._settings.default_province,
        )
        logger.info("Provisioned farm %s for user %s", farm.id, user_id)
        return farm, True

    async def update_farm(self, user_id: str, request: FarmUpdateRequest) -> Farm:
        context = await self._resolver.resolve(user_id)
        return self._repository.update_farm(context.farm.id, request.to_update())

    async def list_contexts(self, user_id: str) -> list[FarmContext]:
        return await self._resolver.resolve_all(user_id)

    async def has_access(self, user_id: str) -> bool:
        return await self._resolver.check_access(user_id)
