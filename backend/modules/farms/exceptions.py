"""
Farms module exceptions.

FarmContextError is the resolver's own error type. Each variant carries a
machine-readable code; callers branch on the class or the code, never on
the message text.
"""

from enum import Enum
from typing import Optional

from shared.exceptions import (
    JaothuiError,
    ValidationError,
    AuthorizationError,
)


class FarmContextErrorCode(str, Enum):
    INVALID_USER = "INVALID_USER"
    NO_ACCESS = "NO_ACCESS"
    MULTIPLE_FARMS = "MULTIPLE_FARMS"
    DATABASE_ERROR = "DATABASE_ERROR"


class FarmContextError(JaothuiError):
    """Base exception for farm context resolution failures."""

    def __init__(
        self,
        message: str,
        code: FarmContextErrorCode,
        details: Optional[dict] = None,
    ):
        super().__init__(message, code=code.value, details=details)
        self.error_code = code


class InvalidUserError(FarmContextError, ValidationError):
    """Raised when the user id is missing or not a string."""

    def __init__(self, message: str = "Invalid user ID provided"):
        super().__init__(message, FarmContextErrorCode.INVALID_USER)


class NoFarmAccessError(FarmContextError, AuthorizationError):
    """Raised when the user neither owns nor belongs to a (given) farm."""

    def __init__(self, farm_id: Optional[str] = None):
        if farm_id:
            message = f"User has no access to farm with ID: {farm_id}"
            details = {"farm_id": farm_id}
        else:
            message = "User has no access to any farm"
            details = None
        super().__init__(message, FarmContextErrorCode.NO_ACCESS, details)
        self.farm_id = farm_id


class MultipleFarmsError(FarmContextError):
    """Reserved for users holding more than one farm; not raised today."""

    def __init__(self, message: str = "User has access to multiple farms"):
        super().__init__(message, FarmContextErrorCode.MULTIPLE_FARMS)


class FarmDatabaseError(FarmContextError):
    """Raised when a lookup fails for reasons other than access."""

    def __init__(
        self,
        message: str = "Failed to resolve farm context due to database error",
    ):
        super().__init__(message, FarmContextErrorCode.DATABASE_ERROR)


class FarmAccessLevelError(AuthorizationError):
    """Raised when a mutation needs full access and the caller has limited."""

    def __init__(self, farm_id: str, user_id: str):
        super().__init__(
            f"Full farm access required for farm: {farm_id}",
            code="FULL_ACCESS_REQUIRED",
            details={"farm_id": farm_id, "user_id": user_id},
        )
