"""
Bearer token authentication dependencies.

Token checks are delegated to the auth service; any failure becomes a 401
envelope.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.interfaces import IAuthService
from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service
from ..errors import ApiError, MSG_UNAUTHORIZED

logger = logging.getLogger(__name__)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def unauthorized() -> ApiError:
    return ApiError(
        401,
        "UNAUTHORIZED",
        MSG_UNAUTHORIZED,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise unauthorized()

    try:
        return await auth.validate_token(credentials.credentials)
    except AuthenticationError as exc:
        logger.debug("Rejected bearer token: %s", exc.code)
        raise unauthorized() from exc
