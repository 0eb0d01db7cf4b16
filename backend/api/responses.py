"""
Response envelope helpers.

Every endpoint answers with the same JSON shape:

    {"success": true, "data": {...}, "message": "...", "timestamp": "..."}
    {"success": false, "error": {"code": "...", "message": "...", "details": [...]}, "timestamp": "..."}

``message`` and ``error.details`` are omitted when empty.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def success(
    data: Any = None,
    message: Optional[str] = None,
    status_code: int = 200,
) -> JSONResponse:
    """Build a success envelope. Pydantic models in data are serialized."""
    body: dict[str, Any] = {"success": True, "data": data}
    if message:
        body["message"] = message
    body["timestamp"] = _timestamp()
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def failure(
    code: str,
    message: str,
    status_code: int,
    details: Any = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Build an error envelope."""
    error: dict[str, Any] = {"code": code, "message": message}
    if details:
        error["details"] = details
    body = {"success": False, "error": error, "timestamp": _timestamp()}
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body),
        headers=headers,
    )
