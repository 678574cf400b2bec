"""
User document data models.

A user document embeds its profiles, and each profile embeds its
categorized lists. These models mirror the stored shape; the camelCase
aliases are the names used both in MongoDB and on the wire.
"""

from enum import Enum
from typing import Any, Optional

from bson import ObjectId
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


MAX_PROFILES = 4


class UserRole(str, Enum):
    """Flat user role."""

    USER = "user"
    ADMIN = "admin"


class IdentityProvider(str, Enum):
    """Where the account's identity is asserted."""

    LOCAL = "local"
    GOOGLE = "google"


class ListCategory(str, Enum):
    """The fixed categories of a profile's list."""

    MOVIES = "movies"
    SERIES = "series"
    GAMES = "games"


class ListItem(BaseModel):
    """
    An entry in a profile's list.

    Only the id is interpreted; any other metadata supplied by the
    client (title, poster, ...) is kept verbatim.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("id", "_id"),
        description="Catalog item identifier",
    )


class MyList(BaseModel):
    """Per-category item lists of a profile."""

    movies: list[ListItem] = Field(default_factory=list)
    series: list[ListItem] = Field(default_factory=list)
    games: list[ListItem] = Field(default_factory=list)

    def items_for(self, category: ListCategory) -> list[ListItem]:
        return getattr(self, category.value)

    def contains(self, category: ListCategory, item_id: str) -> bool:
        return any(i.id == item_id for i in self.items_for(category))


class Profile(BaseModel):
    """A sub-account of a user holding its own lists."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Profile ID, unique within its user")
    name: str = Field(..., description="Display name")
    avatar: Optional[str] = Field(None, description="Avatar reference")
    my_list: MyList = Field(default_factory=MyList, alias="myList")

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        return str(value) if isinstance(value, ObjectId) else value


class PublicUser(BaseModel):
    """
    A user as returned to clients.

    Never carries the password hash.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., validation_alias=AliasChoices("id", "_id"))
    email: str
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    avatar: Optional[str] = None
    role: UserRole = UserRole.USER
    provider: IdentityProvider = IdentityProvider.LOCAL
    profiles: list[Profile] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        return str(value) if isinstance(value, ObjectId) else value

    @field_validator("profiles", mode="before")
    @classmethod
    def _default_profiles(cls, value: Any) -> Any:
        return [] if value is None else value


class User(PublicUser):
    """A stored user, including the password hash for local accounts."""

    password_hash: Optional[str] = Field(None, alias="password")

    def to_public(self) -> PublicUser:
        return PublicUser.model_validate(self.model_dump(exclude={"password_hash"}))

    def find_profile(self, profile_id: str) -> Optional[Profile]:
        return next((p for p in self.profiles if p.id == profile_id), None)
