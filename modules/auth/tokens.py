"""
Session token issuance and verification.

A session is a pair of HS256 JWTs signed with two independent secrets:
a short-lived access token and a long-lived refresh token. Nothing is
persisted; validity is signature plus expiry.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
import pydantic
from pydantic import BaseModel, model_validator

from shared.config import Settings
from modules.users.interfaces import IUserStore
from modules.users.models import User

from .exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    TokenUserNotFoundError,
)
from .models import AccessToken, TokenClaims, TokenPair, TokenType

logger = logging.getLogger(__name__)


class TokenConfig(BaseModel):
    """Secrets and lifetimes for the two session tokens."""

    access_secret: str
    refresh_secret: str
    access_ttl: timedelta = timedelta(minutes=10)
    refresh_ttl: timedelta = timedelta(days=7)
    algorithm: str = "HS256"

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check(self) -> "TokenConfig":
        if not self.access_secret or not self.refresh_secret:
            raise ValueError("Both token secrets must be set")
        if self.access_secret == self.refresh_secret:
            raise ValueError("Access and refresh secrets must differ")
        if self.access_ttl <= timedelta(0) or self.refresh_ttl <= timedelta(0):
            raise ValueError("Token lifetimes must be positive")
        if self.access_ttl > self.refresh_ttl:
            raise ValueError("Access token lifetime cannot exceed refresh token lifetime")
        return self

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenConfig":
        return cls(
            access_secret=settings.access_token_secret,
            refresh_secret=settings.refresh_token_secret,
            access_ttl=settings.access_token_ttl,
            refresh_ttl=settings.refresh_token_ttl,
            algorithm=settings.jwt_algorithm,
        )


class TokenManager:
    """
    Issues, verifies and rotates session tokens.

    Only a refresh token can mint an access token, and nothing mints a
    refresh token except a new login.
    """

    def __init__(self, config: TokenConfig, store: IUserStore):
        self._config = config
        self._store = store

    @property
    def config(self) -> TokenConfig:
        return self._config

    # -------------------------------------------------------------------------
    # Issuance
    # -------------------------------------------------------------------------

    def issue_pair(self, user: User, now: Optional[datetime] = None) -> TokenPair:
        """
        Sign an access/refresh pair for a user.

        Both tokens are stamped from the same instant, so the access
        token never outlives the refresh token.
        """
        now = now or datetime.now(timezone.utc)
        access = self._sign(user.id, user.email, TokenType.ACCESS, now)
        refresh = self._sign(user.id, user.email, TokenType.REFRESH, now)
        return TokenPair(
            access_token=access.token,
            refresh_token=refresh.token,
            access_expires_at=access.expires_at,
            refresh_expires_at=refresh.expires_at,
            access_ttl=access.ttl,
            refresh_ttl=refresh.ttl,
        )

    def issue_access(
        self,
        user_id: str,
        email: str,
        now: Optional[datetime] = None,
    ) -> AccessToken:
        """Sign a standalone access token with the default lifetime."""
        return self._sign(user_id, email, TokenType.ACCESS, now or datetime.now(timezone.utc))

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    def verify_access(self, token: Optional[str]) -> TokenClaims:
        """
        Verify an access token.

        Raises:
            MissingTokenError: No token supplied
            ExpiredTokenError: Token expired (client should refresh)
            InvalidTokenError: Bad signature, malformed, or wrong type
        """
        return self._verify(token, TokenType.ACCESS)

    def verify_refresh(self, token: Optional[str]) -> TokenClaims:
        """Verify a refresh token. Raises the same errors as verify_access."""
        return self._verify(token, TokenType.REFRESH)

    async def rotate_access(
        self,
        refresh_token: Optional[str],
        now: Optional[datetime] = None,
    ) -> AccessToken:
        """
        Mint a new access token from a refresh token.

        The referenced user is re-read so deleted accounts cannot keep
        refreshing. The refresh token itself is not renewed.

        Raises:
            TokenError: Refresh token missing, expired or invalid
            TokenUserNotFoundError: User no longer exists
        """
        claims = self.verify_refresh(refresh_token)
        user = await self._store.find_by_id(claims.id)
        if user is None:
            logger.warning(f"Refresh attempted for deleted user {claims.id}")
            raise TokenUserNotFoundError(claims.id)
        return self.issue_access(user.id, user.email, now=now)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _secret_for(self, token_type: TokenType) -> str:
        if token_type is TokenType.ACCESS:
            return self._config.access_secret
        return self._config.refresh_secret

    def _ttl_for(self, token_type: TokenType) -> timedelta:
        if token_type is TokenType.ACCESS:
            return self._config.access_ttl
        return self._config.refresh_ttl

    def _sign(
        self,
        user_id: str,
        email: str,
        token_type: TokenType,
        now: datetime,
    ) -> AccessToken:
        ttl = self._ttl_for(token_type)
        expires_at = now + ttl
        payload = {
            "id": user_id,
            "email": email,
            "type": token_type.value,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, self._secret_for(token_type), algorithm=self._config.algorithm)
        return AccessToken(token=token, expires_at=expires_at, ttl=ttl)

    def _verify(self, token: Optional[str], token_type: TokenType) -> TokenClaims:
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret_for(token_type),
                algorithms=[self._config.algorithm],
                options={"require": ["exp", "iat"]},
            )
            claims = TokenClaims(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")
        except pydantic.ValidationError:
            raise InvalidTokenError("Invalid token claims")

        if claims.type is not token_type:
            raise InvalidTokenError(f"Expected a {token_type.value} token")

        return claims
