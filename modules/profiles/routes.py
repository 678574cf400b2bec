"""
Profile API endpoints.

All endpoints require an access token whose user matches the path
user ID (administrators may address any user).
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_profile_service, get_user_store
from api.middleware.auth import get_current_user
from modules.users.interfaces import IUserStore
from modules.users.models import Profile, PublicUser, UserRole
from shared.models import AuthenticatedUser

from .interfaces import IProfileService
from .models import CreateProfileRequest, ToggleItemRequest, ToggleItemResponse
from .exceptions import ProfileAccessDeniedError, ProfileNotFoundError

router = APIRouter()


async def authorize_user(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    store: IUserStore = Depends(get_user_store),
) -> str:
    """Allow the path user itself, or an admin."""
    if user.id == user_id:
        return user_id

    caller = await store.find_by_id(user.id)
    if caller is None or caller.role is not UserRole.ADMIN:
        raise ProfileAccessDeniedError(user_id)
    return user_id


@router.get("/{user_id}", response_model=list[Profile])
async def list_profiles(
    owner_id: str = Depends(authorize_user),
    service: IProfileService = Depends(get_profile_service),
) -> list[Profile]:
    """
    List the user's profiles (empty if none).
    """
    return await service.list_profiles(owner_id)


@router.get("/{user_id}/{profile_id}", response_model=Profile)
async def get_profile(
    profile_id: str,
    owner_id: str = Depends(authorize_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """
    Get one profile.
    """
    return await service.get_profile(owner_id, profile_id)


@router.post("/{user_id}", response_model=Profile, status_code=201)
async def create_profile(
    request: CreateProfileRequest,
    owner_id: str = Depends(authorize_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """
    Create a profile with empty movies/series/games lists.

    A user can hold at most four profiles.
    """
    return await service.create_profile(owner_id, request)


@router.patch("/{user_id}", response_model=ToggleItemResponse)
async def toggle_list_item(
    request: ToggleItemRequest,
    owner_id: str = Depends(authorize_user),
    service: IProfileService = Depends(get_profile_service),
) -> ToggleItemResponse:
    """
    Toggle an item in a profile's list.

    The item is added if no item with its id is in the category, and
    removed otherwise. Sending the same request twice therefore undoes
    the first one.
    """
    profile = await service.toggle_item(owner_id, request)
    return ToggleItemResponse(message="MyList updated successfully", profile=profile)


@router.delete("/{user_id}/{profile_id}", response_model=PublicUser)
async def delete_profile(
    profile_id: str,
    owner_id: str = Depends(authorize_user),
    service: IProfileService = Depends(get_profile_service),
) -> PublicUser:
    """
    Delete a profile and return the updated user.
    """
    user = await service.delete_profile(owner_id, profile_id)
    if user is None:
        raise ProfileNotFoundError(profile_id)
    return user
