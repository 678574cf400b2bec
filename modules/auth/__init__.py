"""
Authentication module.

Handles credential verification, session tokens and session cookies.

Public API:
- IAuthService: Interface for credential operations
- TokenManager, TokenConfig: Session token issuance and verification
- SessionCookies: Cookie policy for the token pair
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import TokenClaims, TokenPair, TokenType, AccessToken
from .tokens import TokenConfig, TokenManager
from .cookies import SessionCookies, ACCESS_COOKIE, REFRESH_COOKIE
from .exceptions import (
    UserNotRegisteredError,
    InvalidPasswordError,
    EmailAlreadyRegisteredError,
    TokenError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    TokenUserNotFoundError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Tokens and cookies
    "TokenConfig",
    "TokenManager",
    "SessionCookies",
    "ACCESS_COOKIE",
    "REFRESH_COOKIE",
    # Models
    "TokenClaims",
    "TokenPair",
    "TokenType",
    "AccessToken",
    # Exceptions
    "UserNotRegisteredError",
    "InvalidPasswordError",
    "EmailAlreadyRegisteredError",
    "TokenError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "TokenUserNotFoundError",
]
