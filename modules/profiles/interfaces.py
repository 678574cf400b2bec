"""
Profiles module interface.

The API layer depends on IProfileService for all profile operations.
"""

from typing import Protocol, Optional, runtime_checkable

from modules.users.models import Profile, PublicUser

from .models import CreateProfileRequest, ToggleItemRequest


@runtime_checkable
class IProfileService(Protocol):
    """
    Interface for profile operations.

    All operations address profiles embedded in one user document.
    """

    async def list_profiles(self, user_id: str) -> list[Profile]:
        """
        List a user's profiles.

        Returns:
            The profiles, or an empty list if the user has none

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        ...

    async def get_profile(self, user_id: str, profile_id: str) -> Profile:
        """
        Get one profile.

        Raises:
            UserNotFoundError: If the user doesn't exist
            ProfileNotFoundError: If no profile has this ID
        """
        ...

    async def create_profile(
        self,
        user_id: str,
        request: CreateProfileRequest,
    ) -> Profile:
        """
        Create a profile with an empty list.

        Raises:
            UserNotFoundError: If the user doesn't exist
            ProfileLimitReachedError: If the user already has the maximum
        """
        ...

    async def delete_profile(
        self,
        user_id: str,
        profile_id: str,
    ) -> Optional[PublicUser]:
        """
        Delete a profile.

        Returns:
            The user after removal, or None if no profile matched

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        ...

    async def toggle_item(self, user_id: str, request: ToggleItemRequest) -> Profile:
        """
        Toggle an item in a profile's list.

        Raises:
            UserNotFoundError: If the user doesn't exist
            ProfileNotFoundError: If the profile doesn't exist
            ListMutationError: If the update kept matching nothing
        """
        ...
