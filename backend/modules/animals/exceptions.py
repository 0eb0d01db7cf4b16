"""
Animals module exceptions.
"""

from shared.exceptions import AuthorizationError, ConflictError, NotFoundError


class AnimalNotFoundError(NotFoundError):
    """Raised when an animal doesn't exist."""

    def __init__(self, animal_id: str):
        super().__init__(
            f"Animal not found: {animal_id}",
            code="ANIMAL_NOT_FOUND",
            details={"animal_id": animal_id},
        )


class AnimalAccessDeniedError(AuthorizationError):
    """Raised when the caller has no access to the animal's farm."""

    def __init__(self, animal_id: str, user_id: str):
        super().__init__(
            f"Access denied to animal: {animal_id}",
            code="FORBIDDEN",
            details={"animal_id": animal_id, "user_id": user_id},
        )


class DuplicateTagError(ConflictError):
    """Raised when a tag id is already used in the farm."""

    def __init__(self, farm_id: str, tag_id: str):
        super().__init__(
            f"Tag {tag_id} already exists in farm {farm_id}",
            code="DUPLICATE_TAG",
            details={"farm_id": farm_id, "tag_id": tag_id},
        )
