"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from modules.users.models import User

from .models import RegisterRequest


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for credential operations.

    This protocol defines the contract that the auth module exposes
    to the API layer. Implementations must provide all these methods.
    """

    async def verify_password(self, email: str, password: str) -> User:
        """
        Check an email/password pair.

        Args:
            email: Account email
            password: Plaintext password

        Returns:
            The stored user

        Raises:
            UserNotRegisteredError: If no account has this email
            InvalidPasswordError: If the password does not match
        """
        ...

    async def resolve_federated_identity(
        self,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        avatar: Optional[str] = None,
    ) -> User:
        """
        Find or create the user for an externally asserted identity.

        An existing user is returned unchanged; the display fields are
        only used when creating.
        """
        ...

    async def register(self, request: RegisterRequest) -> User:
        """
        Create a local account.

        Raises:
            EmailAlreadyRegisteredError: If the email is taken
        """
        ...

    async def get_user(self, user_id: str) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        ...
