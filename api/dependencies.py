"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations with their
collaborators injected explicitly.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.tokens import TokenManager
    from modules.auth.cookies import SessionCookies
    from modules.profiles.interfaces import IProfileService
    from modules.users.interfaces import IUserStore


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._user_store: "IUserStore | None" = None
        self._auth_service: "IAuthService | None" = None
        self._token_manager: "TokenManager | None" = None
        self._session_cookies: "SessionCookies | None" = None
        self._profile_service: "IProfileService | None" = None

    @property
    def user_store(self) -> "IUserStore":
        """Get the user store instance."""
        if self._user_store is None:
            from modules.users.repository import UserRepository
            from shared.database import get_users_collection
            self._user_store = UserRepository(get_users_collection())
        return self._user_store

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            from modules.auth.passwords import BcryptPasswordHasher
            self._auth_service = AuthService(
                store=self.user_store,
                hasher=BcryptPasswordHasher(),
            )
        return self._auth_service

    @property
    def tokens(self) -> "TokenManager":
        """Get the token manager instance."""
        if self._token_manager is None:
            from modules.auth.tokens import TokenConfig, TokenManager
            from shared.config import get_settings
            self._token_manager = TokenManager(
                config=TokenConfig.from_settings(get_settings()),
                store=self.user_store,
            )
        return self._token_manager

    @property
    def cookies(self) -> "SessionCookies":
        """Get the session cookie policy."""
        if self._session_cookies is None:
            from modules.auth.cookies import SessionCookies
            from shared.config import get_settings
            self._session_cookies = SessionCookies(secure=get_settings().is_production)
        return self._session_cookies

    @property
    def profiles(self) -> "IProfileService":
        """Get the profile service instance."""
        if self._profile_service is None:
            from modules.profiles.service import ProfileService
            from modules.profiles.toggle import ListToggleResolver
            from shared.config import get_settings
            self._profile_service = ProfileService(
                store=self.user_store,
                toggler=ListToggleResolver(
                    self.user_store,
                    max_attempts=get_settings().toggle_max_attempts,
                ),
            )
        return self._profile_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_store = None
        self._auth_service = None
        self._token_manager = None
        self._session_cookies = None
        self._profile_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_user_store() -> "IUserStore":
    """FastAPI dependency for the user store."""
    return get_container().user_store


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_token_manager() -> "TokenManager":
    """FastAPI dependency for the token manager."""
    return get_container().tokens


def get_session_cookies() -> "SessionCookies":
    """FastAPI dependency for the session cookie policy."""
    return get_container().cookies


def get_profile_service() -> "IProfileService":
    """FastAPI dependency for profile service."""
    return get_container().profiles
