"""
Authentication service implementation.

Verifies local credentials and resolves federated identities against
the users collection.
"""

import logging
from typing import Any, Optional

from modules.users.exceptions import DuplicateEmailError, UserNotFoundError
from modules.users.interfaces import IUserStore
from modules.users.models import IdentityProvider, User, UserRole

from .interfaces import IAuthService
from .models import RegisterRequest
from .passwords import IPasswordHasher
from .exceptions import (
    EmailAlreadyRegisteredError,
    InvalidPasswordError,
    UserNotRegisteredError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Collaborators are injected so tests can substitute an in-memory
    store and a fast hasher.
    """

    def __init__(self, store: IUserStore, hasher: IPasswordHasher):
        self._store = store
        self._hasher = hasher

    async def verify_password(self, email: str, password: str) -> User:
        user = await self._store.find_by_email(email)
        if user is None:
            logger.info("Login attempt for unregistered email")
            raise UserNotRegisteredError()

        # Federated accounts have no local password
        if not user.password_hash or not await self._hasher.verify(password, user.password_hash):
            logger.warning(f"Failed password login for user {user.id}")
            raise InvalidPasswordError()

        return user

    async def resolve_federated_identity(
        self,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        avatar: Optional[str] = None,
    ) -> User:
        existing = await self._store.find_by_email(email)
        if existing is not None:
            return existing

        data: dict[str, Any] = {
            "firstName": first_name,
            "lastName": last_name,
            "email": email,
            "avatar": avatar,
            "role": UserRole.USER.value,
            "provider": IdentityProvider.GOOGLE.value,
            "profiles": [],
        }
        try:
            user = await self._store.insert(data)
        except DuplicateEmailError:
            # A concurrent first login inserted the same email
            user = await self._store.find_by_email(email)
            if user is None:
                raise
            return user

        logger.info(f"Created federated user {user.id}")
        return user

    async def register(self, request: RegisterRequest) -> User:
        if await self._store.find_by_email(request.email) is not None:
            raise EmailAlreadyRegisteredError(request.email)

        data: dict[str, Any] = {
            "firstName": request.first_name,
            "lastName": request.last_name,
            "email": request.email,
            "avatar": request.avatar,
            "password": await self._hasher.hash(request.password),
            "role": UserRole.USER.value,
            "provider": IdentityProvider.LOCAL.value,
            "profiles": [],
        }
        try:
            user = await self._store.insert(data)
        except DuplicateEmailError as e:
            raise EmailAlreadyRegisteredError(request.email) from e

        logger.info(f"Registered user {user.id}")
        return user

    async def get_user(self, user_id: str) -> User:
        user = await self._store.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
