"""
Staff module exceptions.
"""

from shared.exceptions import ConflictError


class DuplicateUsernameError(ConflictError):
    """Raised when the requested username is taken."""

    def __init__(self, username: str):
        super().__init__(
            f"Username already exists: {username}",
            code="DUPLICATE_USERNAME",
            details={"username": username},
        )


class DuplicateEmailError(ConflictError):
    """Raised when the requested email belongs to another account."""

    def __init__(self, email: str):
        super().__init__(
            f"Email already exists: {email}",
            code="DUPLICATE_EMAIL",
            details={"email": email},
        )
