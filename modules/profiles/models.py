"""
Profiles module data models.

The profile document shapes live in modules.users.models since they are
embedded in the user document; this module adds the request/response
models of the profile endpoints.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from modules.users.models import ListCategory, ListItem, MyList, Profile


class CreateProfileRequest(BaseModel):
    """Request to create a profile."""

    name: str = Field(..., min_length=1, max_length=50, description="Display name")
    avatar: Optional[str] = Field(None, description="Avatar reference")


class ToggleItemRequest(BaseModel):
    """
    Request to toggle an item in a profile's list.

    Adds the item when absent, removes it when present.
    """

    model_config = ConfigDict(populate_by_name=True)

    profile_id: str = Field(..., min_length=1, alias="profileId")
    category: ListCategory
    item: ListItem


class ToggleItemResponse(BaseModel):
    """Result of a list toggle."""

    message: str
    profile: Profile


__all__ = [
    "CreateProfileRequest",
    "ToggleItemRequest",
    "ToggleItemResponse",
    "ListCategory",
    "ListItem",
    "MyList",
    "Profile",
]
