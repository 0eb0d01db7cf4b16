"""
Activities module exceptions.
"""

from shared.exceptions import AuthorizationError, NotFoundError, ValidationError


class ActivityNotFoundError(NotFoundError):
    """Raised when an activity doesn't exist."""

    def __init__(self, activity_id: str):
        super().__init__(
            f"Activity not found: {activity_id}",
            code="ACTIVITY_NOT_FOUND",
            details={"activity_id": activity_id},
        )


class ActivityAccessDeniedError(AuthorizationError):
    """Raised when the caller has no access to the activity's farm."""

    def __init__(self, activity_id: str, user_id: str):
        super().__init__(
            f"Access denied to activity: {activity_id}",
            code="FORBIDDEN",
            details={"activity_id": activity_id, "user_id": user_id},
        )


class AnimalNotInFarmError(AuthorizationError):
    """Raised when an activity targets an animal from another farm."""

    def __init__(self, animal_id: str, farm_id: str):
        super().__init__(
            f"Animal {animal_id} does not belong to farm {farm_id}",
            code="FORBIDDEN",
            details={"animal_id": animal_id, "farm_id": farm_id},
        )


class InvalidStatusError(ValidationError):
    """Raised when a status filter is not an ActivityStatus value."""

    def __init__(self, status: str):
        super().__init__(
            f"Invalid activity status: {status}",
            code="INVALID_STATUS",
            details={"status": status},
        )
