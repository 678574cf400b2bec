"""
Access-token authentication dependency.

Reads the access token from the session cookie (or a Bearer header)
and verifies it with the TokenManager.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.cookies import ACCESS_COOKIE
from modules.auth.tokens import TokenManager
from shared.models import AuthenticatedUser

from ..dependencies import get_token_manager

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def extract_access_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    """Prefer the session cookie, fall back to the Authorization header."""
    token = request.cookies.get(ACCESS_COOKIE)
    if token:
        return token
    if credentials is not None:
        return credentials.credentials
    return None


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenManager = Depends(get_token_manager),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Raises MissingTokenError, ExpiredTokenError or InvalidTokenError,
    which the error handlers render as 401 with distinct codes.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    claims = tokens.verify_access(extract_access_token(request, credentials))
    return AuthenticatedUser(id=claims.id, email=claims.email)

