"""
Staff module.

Owner-managed staff accounts: listing and creation with argon2id passwords.
"""

from .interfaces import IStaffService
from .models import StaffCreateRequest, StaffListResponse, StaffMember
from .exceptions import DuplicateEmailError, DuplicateUsernameError

__all__ = [
    "IStaffService",
    "StaffCreateRequest",
    "StaffListResponse",
    "StaffMember",
    "DuplicateEmailError",
    "DuplicateUsernameError",
]
