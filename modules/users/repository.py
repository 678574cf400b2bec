"""
User repository for database access.

Encapsulates all MongoDB queries against the users collection. Profile
and list mutations are expressed as single conditional updates so the
store, not the application, arbitrates concurrent writers.
"""

import logging
from typing import Any, Optional

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from shared.repository import BaseRepository
from .exceptions import DuplicateEmailError, InvalidUserIdError
from .models import ListCategory, ListItem, Profile, User

logger = logging.getLogger(__name__)

PUBLIC_PROJECTION = {"password": 0}


class UserRepository(BaseRepository[User]):
    """
    Repository for user documents.

    Implements IUserStore on top of a pymongo AsyncCollection.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership.
    """

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def find_by_id(self, user_id: str) -> Optional[User]:
        oid = self._object_id(user_id)
        async with self._guard("find_by_id"):
            doc = await self._collection.find_one({"_id": oid})
        return self._to_user(doc)

    async def find_by_email(self, email: str) -> Optional[User]:
        async with self._guard("find_by_email"):
            doc = await self._collection.find_one({"email": email})
        return self._to_user(doc)

    async def ping(self) -> None:
        async with self._guard("ping"):
            await self._collection.database.command("ping")

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    async def insert(self, data: dict[str, Any]) -> User:
        doc = dict(data)
        async with self._guard("insert"):
            try:
                result = await self._collection.insert_one(doc)
            except DuplicateKeyError as e:
                raise DuplicateEmailError(data.get("email", "")) from e
        doc["_id"] = result.inserted_id
        return User.model_validate(doc)

    async def push_profile(
        self,
        user_id: str,
        profile: Profile,
        max_profiles: int,
    ) -> bool:
        oid = self._object_id(user_id)
        # Matches only while index max_profiles - 1 is unoccupied
        query = {"_id": oid, f"profiles.{max_profiles - 1}": {"$exists": False}}
        update = {"$push": {"profiles": profile.model_dump(by_alias=True)}}
        async with self._guard("push_profile"):
            result = await self._collection.update_one(query, update)
        return result.modified_count == 1

    async def pull_profile(self, user_id: str, profile_id: str) -> Optional[User]:
        oid = self._object_id(user_id)
        async with self._guard("pull_profile"):
            doc = await self._collection.find_one_and_update(
                {"_id": oid, "profiles.id": profile_id},
                {"$pull": {"profiles": {"id": profile_id}}},
                projection=PUBLIC_PROJECTION,
                return_document=ReturnDocument.AFTER,
            )
        return self._to_user(doc)

    async def push_list_item(
        self,
        user_id: str,
        profile_id: str,
        category: ListCategory,
        item: ListItem,
    ) -> bool:
        oid = self._object_id(user_id)
        query = {
            "_id": oid,
            "profiles": {
                "$elemMatch": {
                    "id": profile_id,
                    f"myList.{category.value}.id": {"$ne": item.id},
                }
            },
        }
        update = {"$push": {f"profiles.$.myList.{category.value}": item.model_dump()}}
        async with self._guard("push_list_item"):
            result = await self._collection.update_one(query, update)
        return result.modified_count == 1

    async def pull_list_item(
        self,
        user_id: str,
        profile_id: str,
        category: ListCategory,
        item_id: str,
    ) -> bool:
        oid = self._object_id(user_id)
        query = {
            "_id": oid,
            "profiles": {
                "$elemMatch": {
                    "id": profile_id,
                    f"myList.{category.value}.id": item_id,
                }
            },
        }
        update = {"$pull": {f"profiles.$.myList.{category.value}": {"id": item_id}}}
        async with self._guard("pull_list_item"):
            result = await self._collection.update_one(query, update)
        return result.modified_count == 1

    # -------------------------------------------------------------------------
    # Indexes
    # -------------------------------------------------------------------------

    async def ensure_indexes(self) -> list[str]:
        """
        Create the indexes the service relies on.

        The unique email index is what turns a concurrent duplicate
        registration into a DuplicateKeyError.
        """
        async with self._guard("ensure_indexes"):
            email_index = await self._collection.create_index(
                [("email", ASCENDING)], unique=True, name="email_unique"
            )
            profile_index = await self._collection.create_index(
                [("profiles.id", ASCENDING)], name="profiles_id"
            )
        logger.info(f"Ensured indexes on {self._collection.name}: {email_index}, {profile_index}")
        return [email_index, profile_index]

    async def index_information(self) -> dict[str, Any]:
        async with self._guard("index_information"):
            return await self._collection.index_information()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _object_id(user_id: str) -> ObjectId:
        if not ObjectId.is_valid(user_id):
            raise InvalidUserIdError(user_id)
        return ObjectId(user_id)

    @staticmethod
    def _to_user(doc: Optional[dict[str, Any]]) -> Optional[User]:
        if doc is None:
            return None
        return User.model_validate(doc)
