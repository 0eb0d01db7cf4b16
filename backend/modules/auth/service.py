"""
Authentication service implementation.

Issues and validates HS256 session tokens and checks argon2id password
hashes for username/password accounts.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import jwt
from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError

from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser

from .exceptions import (
    AuthNotConfiguredError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
)
from .interfaces import IAuthService
from .models import JWTPayload, TokenResponse, UserProfile
from .repository import UserRepository

logger = logging.getLogger(__name__)


def build_password_hasher(settings: Settings) -> PasswordHasher:
    """argon2id hasher configured from settings."""
    return PasswordHasher(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
        type=Type.ID,
    )


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Session tokens are signed with JWT_SECRET and carry the user id in
    ``sub``. Password hashes are stored in users.password_hash.
    """

    def __init__(
        self,
        users: UserRepository,
        settings: Optional[Settings] = None,
        hasher: Optional[PasswordHasher] = None,
    ):
        self._users = users
        self._settings = settings or get_settings()
        self._hasher = hasher or build_password_hasher(self._settings)

    async def validate_token(self, token: str) -> AuthenticatedUser:
        if not token:
            raise MissingTokenError()
        if not self._settings.jwt_secret:
            raise AuthNotConfiguredError()

        try:
            payload = jwt.decode(
                token,
                self._settings.jwt_secret,
                algorithms=[self._settings.jwt_algorithm],
                audience=self._settings.jwt_audience,
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))

        try:
            claims = JWTPayload(**payload)
        except ValueError:
            raise InvalidTokenError("Token is missing required claims")

        return AuthenticatedUser(
            id=claims.sub,
            username=claims.username,
            email=claims.email,
            last_sign_in=datetime.fromtimestamp(claims.iat, tz=timezone.utc),
        )

    async def authenticate(self, username: str, password: str) -> TokenResponse:
        """
        Check a username/password pair and issue a session token.

        Hashes created with older argon2 parameters are upgraded in place.
        """
        found = self._users.get_credentials(username)
        if found is None:
            raise InvalidCredentialsError()

        user, password_hash = found
        if not password_hash:
            raise InvalidCredentialsError()

        try:
            self._hasher.verify(password_hash, password)
        except (VerificationError, InvalidHashError):
            logger.info("Failed login for username %s", username)
            raise InvalidCredentialsError()

        if self._hasher.check_needs_rehash(password_hash):
            self._users.update_password_hash(user.id, self._hasher.hash(password))

        return TokenResponse(
            access_token=self.issue_token(user),
            expires_in=self._settings.session_expires_in,
            user=user,
        )

    def issue_token(self, user: UserProfile) -> str:
        if not self._settings.jwt_secret:
            raise AuthNotConfiguredError()

        now = int(datetime.now(timezone.utc).timestamp())
        claims = {
            "sub": user.id,
            "username": user.username,
            "email": user.email,
            "aud": self._settings.jwt_audience,
            "iat": now,
            "exp": now + self._settings.session_expires_in,
        }
        return jwt.encode(claims, self._settings.jwt_secret, algorithm=self._settings.jwt_algorithm)

    def hash_password(self, password: str) -> str:
        return self._hasher.hash(password)

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        return self._users.get_by_id(user_id)
