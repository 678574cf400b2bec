"""
Session cookie policy.

Maps a token pair onto the two session cookies. This layer never looks
inside the tokens; it only decides transport attributes.
"""

from datetime import timedelta

from starlette.responses import Response

from .models import TokenPair

ACCESS_COOKIE = "access_token"
REFRESH_COOKIE = "refresh_token"


class SessionCookies:
    """
    Sets and clears the access/refresh cookies.

    Cookies are httpOnly and SameSite=strict; Secure is enabled in
    production. Each cookie lives exactly as long as its token.
    """

    def __init__(self, secure: bool, path: str = "/"):
        self._secure = secure
        self._path = path

    @property
    def secure(self) -> bool:
        return self._secure

    def attach(self, response: Response, pair: TokenPair) -> None:
        """Set both session cookies from a freshly issued pair."""
        self._set(response, ACCESS_COOKIE, pair.access_token, pair.access_ttl)
        self._set(response, REFRESH_COOKIE, pair.refresh_token, pair.refresh_ttl)

    def attach_access(self, response: Response, token: str, ttl: timedelta) -> None:
        """Replace only the access cookie (used after a refresh)."""
        self._set(response, ACCESS_COOKIE, token, ttl)

    def clear(self, response: Response) -> None:
        """Expire both cookies. Safe to call when they are not set."""
        for name in (ACCESS_COOKIE, REFRESH_COOKIE):
            response.delete_cookie(
                name,
                path=self._path,
                secure=self._secure,
                httponly=True,
                samesite="strict",
            )

    def _set(self, response: Response, name: str, value: str, ttl: timedelta) -> None:
        response.set_cookie(
            name,
            value,
            max_age=int(ttl.total_seconds()),
            path=self._path,
            secure=self._secure,
            httponly=True,
            samesite="strict",
        )
