"""
Authentication endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.errors import ApiError
from api.responses import success

from .exceptions import AuthNotConfiguredError, InvalidCredentialsError
from .interfaces import IAuthService
from .models import LoginRequest

router = APIRouter()


@router.post("/login")
async def login(
    request: LoginRequest,
    auth: IAuthService = Depends(get_auth_service),
):
    """Username/password login. Returns a bearer token valid for seven days."""
    try:
        token = await auth.authenticate(request.username, request.password)
    except InvalidCredentialsError:
        raise ApiError(401, "INVALID_CREDENTIALS", "ชื่อผู้ใช้หรือรหัสผ่านไม่ถูกต้อง")
    except AuthNotConfiguredError:
        raise ApiError(500, "INTERNAL_ERROR", "ระบบยืนยันตัวตนยังไม่พร้อมใช้งาน")
    return success(token, "เข้าสู่ระบบสำเร็จ")
