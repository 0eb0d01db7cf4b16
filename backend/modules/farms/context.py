"""
Farm context resolver.

Determines which farm a user acts on behalf of and with what access level.
Ownership is checked first and always wins over membership; membership is
the fallback for staff accounts. Every API route calls this per request
instead of trusting a farm id supplied by the client.
"""

import logging
from typing import Optional

from .exceptions import (
    FarmContextError,
    FarmDatabaseError,
    InvalidUserError,
    NoFarmAccessError,
)
from .models import FarmContext, Role
from .repository import FarmRepository

logger = logging.getLogger(__name__)


class FarmContextResolver:
    """
    Resolves farm contexts for users.

    Args:
        repository: Farm data access.
        use_union_query: Resolve "my farm" with the single
            get_user_farm_context() query instead of two lookups.
    """

    def __init__(self, repository: FarmRepository, use_union_query: bool = True):
        self._repository = repository
        self._use_union_query = use_union_query

    async def resolve(
        self,
        user_id: Optional[str],
        farm_id: Optional[str] = None,
    ) -> FarmContext:
        """
        Resolve the user's farm context.

        Args:
            user_id: Authenticated user id.
            farm_id: Check access to this farm only, instead of resolving
                the user's default farm.

        Returns:
            FarmContext with farm, role and access level.

        Raises:
            InvalidUserError: user_id is empty or not a string.
            NoFarmAccessError: no ownership or membership (of farm_id, if given).
            FarmDatabaseError: the lookup itself failed.
        """
        _validate_user_id(user_id)

        try:
            if farm_id:
                return self._resolve_specific(user_id, farm_id)
            if self._use_union_query:
                return self._resolve_single_query(user_id)
            return self._resolve_two_step(user_id)
        except FarmContextError:
            raise
        except Exception as exc:
            logger.exception("Database error resolving farm context for user %s", user_id)
            raise FarmDatabaseError() from exc

    async def resolve_all(self, user_id: Optional[str]) -> list[FarmContext]:
        """
        List every farm the user can access.

        Owned farms come first, then memberships whose farm still exists.

        Raises:
            InvalidUserError: user_id is empty or not a string.
            NoFarmAccessError: the list would be empty.
            FarmDatabaseError: a lookup failed.
        """
        _validate_user_id(user_id)

        try:
            owned = self._repository.list_owned_farms(user_id)
            memberships = self._repository.list_memberships(user_id)
        except Exception as exc:
            logger.exception("Database error listing farm contexts for user %s", user_id)
            raise FarmDatabaseError(
                "Failed to resolve farm contexts due to database error"
            ) from exc

        contexts = [FarmContext.for_role(farm, Role.OWNER) for farm in owned]
        contexts.extend(
            FarmContext.for_role(member.farm, member.role)
            for member in memberships
            if member.farm is not None
        )

        if not contexts:
            raise NoFarmAccessError()
        return contexts

    async def check_access(self, user_id: Optional[str]) -> bool:
        """
        Whether the user has access to any farm.

        Only NO_ACCESS maps to False; other failures propagate.
        """
        try:
            await self.resolve(user_id)
        except NoFarmAccessError:
            return False
        return True

    # -------------------------------------------------------------------------
    # Resolution strategies
    # -------------------------------------------------------------------------

    def _resolve_two_step(self, user_id: str) -> FarmContext:
        owned = self._repository.find_owned_farm(user_id)
        if owned:
            return FarmContext.for_role(owned, Role.OWNER)

        membership = self._repository.find_membership(user_id)
        if membership and membership.farm:
            return FarmContext.for_role(membership.farm, membership.role)

        raise NoFarmAccessError()

    def _resolve_single_query(self, user_id: str) -> FarmContext:
        found = self._repository.find_accessible_farm(user_id)
        if found is None:
            raise NoFarmAccessError()
        farm, role = found
        return FarmContext.for_role(farm, role)

    def _resolve_specific(self, user_id: str, farm_id: str) -> FarmContext:
        owned = self._repository.find_owned_farm_by_id(farm_id, user_id)
        if owned:
            return FarmContext.for_role(owned, Role.OWNER)

        membership = self._repository.find_membership_in_farm(farm_id, user_id)
        if membership and membership.farm:
            return FarmContext.for_role(membership.farm, membership.role)

        raise NoFarmAccessError(farm_id)


def _validate_user_id(user_id) -> None:
    if not user_id or not isinstance(user_id, str):
        raise InvalidUserError()
