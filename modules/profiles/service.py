"""
Profiles service implementation.

Reads and mutates the profiles embedded in a user document.
"""

import logging
from typing import Optional

from bson import ObjectId

from modules.users.exceptions import UserNotFoundError
from modules.users.interfaces import IUserStore
from modules.users.models import MAX_PROFILES, MyList, Profile, PublicUser, User

from .interfaces import IProfileService
from .models import CreateProfileRequest, ToggleItemRequest
from .toggle import ListToggleResolver
from .exceptions import ProfileLimitReachedError, ProfileNotFoundError

logger = logging.getLogger(__name__)


class ProfileService(IProfileService):
    """
    Profile service backed by an IUserStore.

    Implements IProfileService protocol.
    """

    def __init__(
        self,
        store: IUserStore,
        toggler: ListToggleResolver,
        max_profiles: int = MAX_PROFILES,
    ):
        self._store = store
        self._toggler = toggler
        self._max_profiles = max_profiles

    async def list_profiles(self, user_id: str) -> list[Profile]:
        user = await self._require_user(user_id)
        return list(user.profiles)

    async def get_profile(self, user_id: str, profile_id: str) -> Profile:
        user = await self._require_user(user_id)
        profile = user.find_profile(profile_id)
        if profile is None:
            raise ProfileNotFoundError(profile_id)
        return profile

    async def create_profile(
        self,
        user_id: str,
        request: CreateProfileRequest,
    ) -> Profile:
        profile = Profile(
            id=str(ObjectId()),
            name=request.name,
            avatar=request.avatar,
            my_list=MyList(),
        )

        if await self._store.push_profile(user_id, profile, self._max_profiles):
            logger.info(f"Created profile {profile.id} for user {user_id}")
            return profile

        # Nothing matched: either no such user or the cap is reached
        await self._require_user(user_id)
        raise ProfileLimitReachedError(user_id, self._max_profiles)

    async def delete_profile(
        self,
        user_id: str,
        profile_id: str,
    ) -> Optional[PublicUser]:
        await self._require_user(user_id)

        user = await self._store.pull_profile(user_id, profile_id)
        if user is None:
            return None

        logger.info(f"Deleted profile {profile_id} of user {user_id}")
        return user.to_public()

    async def toggle_item(self, user_id: str, request: ToggleItemRequest) -> Profile:
        return await self._toggler.toggle(
            user_id,
            request.profile_id,
            request.category,
            request.item,
        )

    async def _require_user(self, user_id: str) -> User:
        user = await self._store.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
