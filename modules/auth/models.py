"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from modules.users.models import PublicUser

# bcrypt rejects passwords longer than this many bytes
MAX_PASSWORD_BYTES = 72


class TokenType(str, Enum):
    """Which half of the session pair a token is."""

    ACCESS = "access"
    REFRESH = "refresh"


class TokenClaims(BaseModel):
    """
    Decoded session token payload.

    Both tokens of a pair carry the same identity claims; the type
    claim keeps them from being used interchangeably.
    """

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email")
    type: TokenType = Field(..., description="Token type")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    model_config = {"frozen": True}


class AccessToken(BaseModel):
    """A freshly signed access token."""

    token: str
    expires_at: datetime
    ttl: timedelta


class TokenPair(BaseModel):
    """Access and refresh tokens issued together."""

    access_token: str
    refresh_token: str
    access_expires_at: datetime
    refresh_expires_at: datetime
    access_ttl: timedelta
    refresh_ttl: timedelta


# -----------------------------------------------------------------------------
# Request / response models
# -----------------------------------------------------------------------------


class LoginRequest(BaseModel):
    """Email + password login."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)


class GoogleLoginRequest(BaseModel):
    """Identity asserted by Google and forwarded by the client."""

    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    avatar: Optional[str] = None


class RegisterRequest(BaseModel):
    """Local account registration."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., min_length=1, max_length=100, alias="firstName")
    last_name: str = Field(..., min_length=1, max_length=100, alias="lastName")
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    avatar: Optional[str] = None

    @field_validator("password")
    @classmethod
    def _check_password_bytes(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class AuthResponse(BaseModel):
    """Response to login, federated login and registration."""

    message: str
    user: PublicUser
    token: str = Field(..., description="Access token (also set as cookie)")


class RefreshResponse(BaseModel):
    """Response to an access-token refresh."""

    message: str
    token: str


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
