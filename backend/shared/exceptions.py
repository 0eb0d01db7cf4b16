"""
Error categories shared by the farm, animal, activity, staff and auth modules.

Module exceptions subclass one of these so the API can answer with a
sensible envelope when a route does not map the error itself:

    AuthenticationError  401 UNAUTHORIZED
    AuthorizationError   403 FORBIDDEN
    NotFoundError        404 NOT_FOUND
    ConflictError        409 CONFLICT
    ValidationError      400 VALIDATION_ERROR

Anything else deriving from JaothuiError becomes a 500 INTERNAL_ERROR
with a generic Thai message.
"""

from typing import Optional, Any


class JaothuiError(Exception):
    """
    Base for errors raised by the domain modules.

    ``code`` defaults to the class name and is only written to logs;
    the message shown to users comes from the API layer.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class NotFoundError(JaothuiError):
    """A farm record (animal, activity) does not exist."""

    pass


class ValidationError(JaothuiError):
    """A value was rejected after request parsing, e.g. an unknown status."""

    pass


class AuthenticationError(JaothuiError):
    """Bearer token or login credentials were missing or wrong."""

    pass


class AuthorizationError(JaothuiError):
    """The user is signed in but the record belongs to another farm or needs owner rights."""

    pass


class ConflictError(JaothuiError):
    """A unique tag, username or email is already taken."""

    pass
