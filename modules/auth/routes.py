"""
Authentication API endpoints.

Login, federated login, registration, token refresh and logout. Each
successful login sets the access/refresh cookie pair.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Response

from api.dependencies import get_auth_service, get_session_cookies, get_token_manager
from api.middleware.auth import get_current_user
from modules.users.models import PublicUser, User
from shared.models import AuthenticatedUser

from .cookies import REFRESH_COOKIE, SessionCookies
from .interfaces import IAuthService
from .models import (
    AuthResponse,
    GoogleLoginRequest,
    LoginRequest,
    MessageResponse,
    RefreshResponse,
    RegisterRequest,
)
from .tokens import TokenManager

logger = logging.getLogger(__name__)

router = APIRouter()


def start_session(
    response: Response,
    user: User,
    message: str,
    tokens: TokenManager,
    cookies: SessionCookies,
) -> AuthResponse:
    pair = tokens.issue_pair(user)
    cookies.attach(response, pair)
    return AuthResponse(message=message, user=user.to_public(), token=pair.access_token)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    response: Response,
    auth: IAuthService = Depends(get_auth_service),
    tokens: TokenManager = Depends(get_token_manager),
    cookies: SessionCookies = Depends(get_session_cookies),
) -> AuthResponse:
    """
    Log in with email and password.
    """
    user = await auth.verify_password(request.email, request.password)
    logger.info(f"User {user.id} logged in")
    return start_session(response, user, "Login successful", tokens, cookies)


@router.post("/login/google", response_model=AuthResponse)
async def login_google(
    request: GoogleLoginRequest,
    response: Response,
    auth: IAuthService = Depends(get_auth_service),
    tokens: TokenManager = Depends(get_token_manager),
    cookies: SessionCookies = Depends(get_session_cookies),
) -> AuthResponse:
    """
    Log in with an identity asserted by Google.

    Creates the account on first login; later logins return the
    existing account without updating it.
    """
    user = await auth.resolve_federated_identity(
        request.email,
        first_name=request.first_name,
        last_name=request.last_name,
        avatar=request.avatar,
    )
    logger.info(f"User {user.id} logged in with Google")
    return start_session(response, user, "Google login successful", tokens, cookies)


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    request: RegisterRequest,
    response: Response,
    auth: IAuthService = Depends(get_auth_service),
    tokens: TokenManager = Depends(get_token_manager),
    cookies: SessionCookies = Depends(get_session_cookies),
) -> AuthResponse:
    """
    Create a local account and start a session.
    """
    user = await auth.register(request)
    return start_session(response, user, "Registration successful", tokens, cookies)


@router.post("/refresh", response_model=RefreshResponse)
async def refresh(
    response: Response,
    refresh_token: Optional[str] = Cookie(None, alias=REFRESH_COOKIE),
    tokens: TokenManager = Depends(get_token_manager),
    cookies: SessionCookies = Depends(get_session_cookies),
) -> RefreshResponse:
    """
    Issue a new access token from the refresh cookie.

    The refresh token is not renewed; once it expires the user must log in.
    """
    access = await tokens.rotate_access(refresh_token)
    cookies.attach_access(response, access.token, access.ttl)
    return RefreshResponse(message="Token refreshed", token=access.token)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    cookies: SessionCookies = Depends(get_session_cookies),
) -> MessageResponse:
    """
    Clear the session cookies.

    Tokens are stateless, so this does not revoke them server-side.
    """
    cookies.clear(response)
    return MessageResponse(message="Logout successful")


@router.get("/me", response_model=PublicUser)
async def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
) -> PublicUser:
    """
    Get the current user's account.

    Requires authentication.
    """
    stored = await auth.get_user(user.id)
    return stored.to_public()
