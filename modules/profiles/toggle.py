"""
List membership toggle.

Decides add-versus-remove from the current state of a profile's list and
commits it as one conditional update. The condition repeats the observed
membership, so a write based on a stale read matches nothing; the whole
read-decide-write sequence is then retried a bounded number of times.
"""

import logging

from modules.users.exceptions import UserNotFoundError
from modules.users.interfaces import IUserStore
from modules.users.models import ListCategory, ListItem, Profile

from .exceptions import ListMutationError, ProfileNotFoundError

logger = logging.getLogger(__name__)


class ListToggleResolver:
    """
    Toggles an item in a profile's category list.

    Toggling is not idempotent: applying it twice restores the original
    membership.
    """

    def __init__(self, store: IUserStore, max_attempts: int = 3):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._store = store
        self._max_attempts = max_attempts

    async def toggle(
        self,
        user_id: str,
        profile_id: str,
        category: ListCategory,
        item: ListItem,
    ) -> Profile:
        """
        Add the item if absent from the category, remove it if present.

        Returns:
            The profile as re-read after the update

        Raises:
            UserNotFoundError: If the user doesn't exist
            ProfileNotFoundError: If the profile doesn't exist
            ListMutationError: If every attempt matched nothing
        """
        for attempt in range(1, self._max_attempts + 1):
            profile = await self._load_profile(user_id, profile_id)

            if profile.my_list.contains(category, item.id):
                logger.debug(f"Removing {item.id} from {profile_id}/{category.value}")
                modified = await self._store.pull_list_item(
                    user_id, profile_id, category, item.id
                )
            else:
                logger.debug(f"Adding {item.id} to {profile_id}/{category.value}")
                modified = await self._store.push_list_item(
                    user_id, profile_id, category, item
                )

            if modified:
                return await self._load_profile(user_id, profile_id)

            logger.debug(
                f"Toggle of {item.id} in {profile_id}/{category.value} had no effect "
                f"(attempt {attempt}/{self._max_attempts})"
            )

        logger.warning(
            f"Toggle of {item.id} in {profile_id}/{category.value} gave up "
            f"after {self._max_attempts} attempts"
        )
        raise ListMutationError(profile_id, category.value, item.id, self._max_attempts)

    async def _load_profile(self, user_id: str, profile_id: str) -> Profile:
        user = await self._store.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        profile = user.find_profile(profile_id)
        if profile is None:
            raise ProfileNotFoundError(profile_id)
        return profile
