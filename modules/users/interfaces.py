"""
Users module interface.

Services depend on IUserStore, not on the MongoDB implementation.
This keeps the auth and profiles services testable with in-memory fakes.
"""

from typing import Any, Protocol, Optional, runtime_checkable

from .models import ListCategory, ListItem, Profile, User


@runtime_checkable
class IUserStore(Protocol):
    """
    Interface for reading and mutating user documents.

    Every mutating method is a single atomic update of one document.
    """

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Get a user by ID.

        Raises:
            InvalidUserIdError: If the ID is malformed
        """
        ...

    async def find_by_email(self, email: str) -> Optional[User]:
        """Get a user by email."""
        ...

    async def insert(self, data: dict[str, Any]) -> User:
        """
        Insert a new user document.

        Args:
            data: Document fields (stored names, e.g. "password", "firstName")

        Returns:
            The stored user with its generated ID

        Raises:
            DuplicateEmailError: If the email is already taken
        """
        ...

    async def push_profile(
        self,
        user_id: str,
        profile: Profile,
        max_profiles: int,
    ) -> bool:
        """
        Append a profile only while the user has fewer than max_profiles.

        Returns:
            True if the profile was appended, False if nothing matched
            (user missing or already at capacity)
        """
        ...

    async def pull_profile(self, user_id: str, profile_id: str) -> Optional[User]:
        """
        Remove a profile by ID.

        Returns:
            The user after removal (without password), or None if no
            profile with that ID existed
        """
        ...

    async def push_list_item(
        self,
        user_id: str,
        profile_id: str,
        category: ListCategory,
        item: ListItem,
    ) -> bool:
        """
        Append an item to a profile's category while no item with its ID is present.

        Returns:
            True if the document was modified
        """
        ...

    async def pull_list_item(
        self,
        user_id: str,
        profile_id: str,
        category: ListCategory,
        item_id: str,
    ) -> bool:
        """
        Remove an item from a profile's category while it is present.

        Returns:
            True if the document was modified
        """
        ...

    async def ping(self) -> None:
        """Check that the store is reachable."""
        ...
