"""
API error type and exception handlers.

Routes raise ApiError with the Thai message the user should see; module
exceptions that escape a route fall back to a generic message for their
category.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    JaothuiError,
    NotFoundError,
    ValidationError,
)

from .responses import failure

logger = logging.getLogger(__name__)

MSG_UNAUTHORIZED = "ต้องเข้าสู่ระบบก่อน"
MSG_INVALID_DATA = "ข้อมูลไม่ถูกต้อง"
MSG_INVALID_JSON = "รูปแบบข้อมูลไม่ถูกต้อง"
MSG_FETCH_FAILED = "เกิดข้อผิดพลาดในการดึงข้อมูล"


class ApiError(Exception):
    """An error response with a status code, machine code and user message."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Any = None,
        headers: Optional[dict[str, str]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        self.headers = headers


# Category fallbacks, checked in order
_CATEGORY_ERRORS: list[tuple[type[JaothuiError], int, str, str]] = [
    (AuthenticationError, 401, "UNAUTHORIZED", MSG_UNAUTHORIZED),
    (AuthorizationError, 403, "FORBIDDEN", "คุณไม่มีสิทธิ์เข้าถึงข้อมูลนี้"),
    (NotFoundError, 404, "NOT_FOUND", "ไม่พบข้อมูล"),
    (ConflictError, 409, "CONFLICT", "ข้อมูลนี้มีในระบบแล้ว"),
    (ValidationError, 400, "VALIDATION_ERROR", MSG_INVALID_DATA),
]


def validation_details(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into [{field, message}] with dotted field paths."""
    details = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        details.append({"field": ".".join(loc), "message": error.get("msg", "")})
    return details


async def api_error_handler(request: Request, exc: ApiError):
    return failure(exc.code, exc.message, exc.status_code, exc.details, exc.headers)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        return failure("INVALID_JSON", MSG_INVALID_JSON, 400)
    return failure("VALIDATION_ERROR", MSG_INVALID_DATA, 400, validation_details(exc))


async def jaothui_error_handler(request: Request, exc: JaothuiError):
    for category, status_code, code, message in _CATEGORY_ERRORS:
        if isinstance(exc, category):
            return failure(code, message, status_code)

    logger.error("Unhandled %s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
    return failure("INTERNAL_ERROR", MSG_FETCH_FAILED, 500)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return failure("INTERNAL_ERROR", MSG_FETCH_FAILED, 500)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing handlers on the application."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(JaothuiError, jaothui_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
