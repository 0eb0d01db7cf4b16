"""
Staff module interface.
"""

from typing import Protocol, runtime_checkable

from modules.farms.models import FarmContext

from .models import StaffCreateRequest, StaffListResponse, StaffMember


@runtime_checkable
class IStaffService(Protocol):
    """
    Interface for staff account management.

    Both operations require full access to the farm.
    """

    async def list_staff(
        self, user_id: str, context: FarmContext, page: int = 1, limit: int = 20
    ) -> StaffListResponse:
        ...

    async def create_staff(
        self, user_id: str, context: FarmContext, request: StaffCreateRequest
    ) -> StaffMember:
        """
        Create a staff account and add it to the farm as MEMBER.

        Raises:
            DuplicateUsernameError: username taken
            DuplicateEmailError: email taken
            FarmAccessLevelError: caller is not the farm owner
        """
        ...
