"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
layer to return 401 responses.
"""

from shared.exceptions import AuthenticationError


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class AuthNotConfiguredError(AuthenticationError):
    """Raised when the server has no JWT secret configured."""

    def __init__(self):
        super().__init__("Server authentication not configured", code="AUTH_NOT_CONFIGURED")


class InvalidCredentialsError(AuthenticationError):
    """Raised when a username/password pair does not match."""

    def __init__(self):
        super().__init__("Invalid username or password", code="INVALID_CREDENTIALS")


class UserNotFoundError(AuthenticationError):
    """Raised when the authenticated user doesn't exist in the database."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )
