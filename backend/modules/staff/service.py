"""
Staff service implementation.

Farm owners create username/password accounts for their staff. A staff
account is a users row plus a MEMBER membership in the owner's farm.
"""

import logging
from typing import Optional

from postgrest.exceptions import APIError

from modules.auth.interfaces import IAuthService
from modules.auth.repository import UserRepository
from modules.farms.exceptions import FarmAccessLevelError
from modules.farms.models import FarmContext, Role
from modules.farms.repository import FarmRepository
from shared.config import Settings, get_settings
from shared.database import is_unique_violation
from shared.models import Pagination

from .exceptions import DuplicateEmailError, DuplicateUsernameError
from .interfaces import IStaffService
from .models import StaffCreateRequest, StaffListResponse, StaffMember
from .repository import StaffRepository

logger = logging.getLogger(__name__)


class StaffService(IStaffService):
    """Staff account management for farm owners."""

    def __init__(
        self,
        staff: StaffRepository,
        users: UserRepository,
        farms: FarmRepository,
        auth: IAuthService,
        settings: Optional[Settings] = None,
    ):
        self._staff = staff
        self._users = users
        self._farms = farms
        self._auth = auth
        self._settings = settings or get_settings()

    async def list_staff(
        self, user_id: str, context: FarmContext, page: int = 1, limit: int = 20
    ) -> StaffListResponse:
        _require_full_access(user_id, context)

        limit = min(limit, self._settings.max_page_size)
        staff, total = self._staff.list_staff(context.farm.id, page=page, page_size=limit)
        return StaffListResponse(
            staff=staff,
            pagination=Pagination.build(page, limit, total),
        )

    async def create_staff(
        self, user_id: str, context: FarmContext, request: StaffCreateRequest
    ) -> StaffMember:
        _require_full_access(user_id, context)

        if self._users.username_exists(request.username):
            raise DuplicateUsernameError(request.username)

        try:
            user = self._users.create_user({
                "username": request.username,
                "password_hash": self._auth.hash_password(request.password),
                "first_name": request.first_name,
                "last_name": request.last_name,
                "email": request.email,
            })
        except APIError as exc:
            if not is_unique_violation(exc):
                raise
            if request.email and "email" in (exc.message or ""):
                raise DuplicateEmailError(request.email) from exc
            raise DuplicateUsernameError(request.username) from exc

        try:
            membership = self._farms.add_member(context.farm.id, user.id, Role.MEMBER)
        except Exception:
            logger.exception("Membership insert failed, removing user %s", user.id)
            try:
                self._users.delete_user(user.id)
            except Exception:
                logger.exception("Could not remove user %s after failed membership insert", user.id)
            raise

        logger.info("Staff account %s added to farm %s", user.id, context.farm.id)
        return StaffMember(
            id=user.id,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            role=membership.role,
            joined_at=membership.joined_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


def _require_full_access(user_id: str, context: FarmContext) -> None:
    if not context.has_full_access:
        raise FarmAccessLevelError(context.farm.id, user_id)
