"""
Profiles module.

Manages the bounded set of profiles of a user and their categorized lists.

Public API:
- IProfileService: Interface for profile operations
- ListToggleResolver: Add-or-remove list updates
- Profile exceptions: ProfileNotFoundError, ProfileLimitReachedError, etc.
"""

from .interfaces import IProfileService
from .models import CreateProfileRequest, ToggleItemRequest, ToggleItemResponse
from .toggle import ListToggleResolver
from .exceptions import (
    ProfileNotFoundError,
    ProfileLimitReachedError,
    ProfileAccessDeniedError,
    ListMutationError,
)

__all__ = [
    # Interface
    "IProfileService",
    "ListToggleResolver",
    # Models
    "CreateProfileRequest",
    "ToggleItemRequest",
    "ToggleItemResponse",
    # Exceptions
    "ProfileNotFoundError",
    "ProfileLimitReachedError",
    "ProfileAccessDeniedError",
    "ListMutationError",
]
