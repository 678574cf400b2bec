"""
Profiles module exceptions.
"""

from shared.exceptions import (
    AuthorizationError,
    CapacityError,
    MutationError,
    NotFoundError,
)


class ProfileNotFoundError(NotFoundError):
    """Raised when a profile is not found."""

    def __init__(self, profile_id: str):
        super().__init__(
            "Profile not found",
            code="PROFILE_NOT_FOUND",
            details={"profile_id": profile_id},
        )


class ProfileLimitReachedError(CapacityError):
    """Raised when creating a profile for a user already at the limit."""

    def __init__(self, user_id: str, limit: int):
        super().__init__(
            "Maximum number of profiles reached",
            code="PROFILE_LIMIT_REACHED",
            details={"user_id": user_id, "limit": limit},
        )


class ProfileAccessDeniedError(AuthorizationError):
    """Raised when a user addresses another user's profiles."""

    def __init__(self, user_id: str):
        super().__init__(
            "Access denied to this user's profiles",
            code="PROFILE_ACCESS_DENIED",
            details={"user_id": user_id},
        )


class ListMutationError(MutationError):
    """Raised when a list toggle keeps matching nothing."""

    def __init__(self, profile_id: str, category: str, item_id: str, attempts: int):
        super().__init__(
            "Failed to update list",
            code="NO_EFFECT",
            details={
                "profile_id": profile_id,
                "category": category,
                "item_id": item_id,
                "attempts": attempts,
            },
        )
