"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class JWTPayload(BaseModel):
    """
    Decoded session token payload.

    Tokens are issued by AuthService.issue_token() for password logins and
    share the claim layout of OAuth-backed sessions.
    """

    sub: str = Field(..., description="Subject (user ID)")
    username: Optional[str] = Field(None, description="Login name")
    email: Optional[str] = Field(None, description="User's email")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")
    aud: str = Field(default="authenticated", description="Audience")


class UserProfile(BaseModel):
    """
    User profile as stored in the users table.

    Never carries the password hash.
    """

    id: str = Field(..., description="User ID (UUID)")
    username: Optional[str] = Field(None, description="Login name")
    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    email: Optional[str] = Field(None, description="Email address")
    line_id: Optional[str] = Field(None, description="LINE account identifier")
    avatar_url: Optional[str] = Field(None, description="Avatar URL")
    created_at: datetime = Field(..., description="Account creation time")
    updated_at: datetime = Field(..., description="Last update time")


class LoginRequest(BaseModel):
    """Username/password login."""

    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1, max_length=100)


class TokenResponse(BaseModel):
    """Issued session token."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Lifetime in seconds")
    user: UserProfile
