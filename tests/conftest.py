"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules,
including an in-memory IUserStore that applies the same conditional-update
rules as the MongoDB repository.
"""

import copy
from datetime import timedelta
from typing import Any, Optional

import pytest
from bson import ObjectId

from api.dependencies import reset_container
from modules.auth.passwords import BcryptPasswordHasher
from modules.auth.service import AuthService
from modules.auth.tokens import TokenConfig, TokenManager
from modules.profiles.service import ProfileService
from modules.profiles.toggle import ListToggleResolver
from modules.users.exceptions import DuplicateEmailError
from modules.users.models import ListCategory, ListItem, Profile, User
from shared.config import get_settings


# Test secrets (only for testing)
TEST_ACCESS_SECRET = "test-access-secret-for-testing-only"
TEST_REFRESH_SECRET = "test-refresh-secret-for-testing-only"
TEST_PASSWORD = "correct-horse"


class InMemoryUserStore:
    """IUserStore backed by a dict of user documents."""

    def __init__(self) -> None:
        self.documents: dict[str, dict[str, Any]] = {}
        self.insert_calls = 0

    # Test helpers

    def add_user(
        self,
        email: str = "test@example.com",
        password_hash: Optional[str] = None,
        provider: str = "local",
        role: str = "user",
        profiles: Optional[list[dict[str, Any]]] = None,
    ) -> str:
        user_id = str(ObjectId())
        self.documents[user_id] = {
            "_id": user_id,
            "email": email,
            "password": password_hash,
            "role": role,
            "provider": provider,
            "profiles": profiles or [],
        }
        return user_id

    def profiles_of(self, user_id: str) -> list[dict[str, Any]]:
        return self.documents[user_id]["profiles"]

    def _profile_doc(self, user_id: str, profile_id: str) -> Optional[dict[str, Any]]:
        doc = self.documents.get(user_id)
        if doc is None:
            return None
        return next((p for p in doc["profiles"] if p["id"] == profile_id), None)

    # IUserStore

    async def find_by_id(self, user_id: str) -> Optional[User]:
        doc = self.documents.get(user_id)
        return User.model_validate(copy.deepcopy(doc)) if doc else None

    async def find_by_email(self, email: str) -> Optional[User]:
        for doc in self.documents.values():
            if doc["email"] == email:
                return User.model_validate(copy.deepcopy(doc))
        return None

    async def insert(self, data: dict[str, Any]) -> User:
        self.insert_calls += 1
        if any(d["email"] == data.get("email") for d in self.documents.values()):
            raise DuplicateEmailError(data.get("email", ""))
        user_id = str(ObjectId())
        doc = copy.deepcopy(data)
        doc["_id"] = user_id
        self.documents[user_id] = doc
        return User.model_validate(copy.deepcopy(doc))

    async def push_profile(self, user_id: str, profile: Profile, max_profiles: int) -> bool:
        doc = self.documents.get(user_id)
        if doc is None or len(doc["profiles"]) >= max_profiles:
            return False
        doc["profiles"].append(profile.model_dump(by_alias=True))
        return True

    async def pull_profile(self, user_id: str, profile_id: str) -> Optional[User]:
        doc = self.documents.get(user_id)
        if doc is None or self._profile_doc(user_id, profile_id) is None:
            return None
        doc["profiles"] = [p for p in doc["profiles"] if p["id"] != profile_id]
        public = {k: v for k, v in copy.deepcopy(doc).items() if k != "password"}
        return User.model_validate(public)

    async def push_list_item(
        self,
        user_id: str,
        profile_id: str,
        category: ListCategory,
        item: ListItem,
    ) -> bool:
        profile = self._profile_doc(user_id, profile_id)
        if profile is None:
            return False
        items = profile["myList"][category.value]
        if any(i["id"] == item.id for i in items):
            return False
        items.append(item.model_dump())
        return True

    async def pull_list_item(
        self,
        user_id: str,
        profile_id: str,
        category: ListCategory,
        item_id: str,
    ) -> bool:
        profile = self._profile_doc(user_id, profile_id)
        if profile is None:
            return False
        items = profile["myList"][category.value]
        remaining = [i for i in items if i["id"] != item_id]
        if len(remaining) == len(items):
            return False
        profile["myList"][category.value] = remaining
        return True

    async def ping(self) -> None:
        return None


def make_profile_doc(
    profile_id: Optional[str] = None,
    name: str = "Main",
    avatar: str = "avatar-1.png",
    movies: Optional[list[dict]] = None,
) -> dict[str, Any]:
    """Helper to create a stored profile document."""
    return {
        "id": profile_id or str(ObjectId()),
        "name": name,
        "avatar": avatar,
        "myList": {"movies": movies or [], "series": [], "games": []},
    }


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container and settings cache around each test."""
    reset_container()
    get_settings.cache_clear()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    """Low-cost bcrypt so tests stay fast."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def password_hash(hasher: BcryptPasswordHasher) -> str:
    return hasher._hash_sync(TEST_PASSWORD)


@pytest.fixture
def token_config() -> TokenConfig:
    return TokenConfig(
        access_secret=TEST_ACCESS_SECRET,
        refresh_secret=TEST_REFRESH_SECRET,
        access_ttl=timedelta(minutes=10),
        refresh_ttl=timedelta(days=7),
    )


@pytest.fixture
def token_manager(token_config: TokenConfig, store: InMemoryUserStore) -> TokenManager:
    return TokenManager(token_config, store)


@pytest.fixture
def auth_service(store: InMemoryUserStore, hasher: BcryptPasswordHasher) -> AuthService:
    return AuthService(store, hasher)


@pytest.fixture
def profile_service(store: InMemoryUserStore) -> ProfileService:
    return ProfileService(store, ListToggleResolver(store, max_attempts=3))
