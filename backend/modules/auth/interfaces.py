"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import TokenResponse, UserProfile


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a session token and return the authenticated user.

        Args:
            token: Bearer token from the Authorization header

        Returns:
            AuthenticatedUser with user ID and basic info

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...

    async def authenticate(self, username: str, password: str) -> TokenResponse:
        """
        Check a username/password pair and issue a session token.

        Raises:
            InvalidCredentialsError: Unknown username or wrong password
        """
        ...

    def hash_password(self, password: str) -> str:
        """Hash a password with argon2id."""
        ...

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        """
        Get a user's profile by their ID.

        Returns:
            UserProfile if found, None otherwise
        """
        ...
