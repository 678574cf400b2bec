"""
Users module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when a user document does not exist."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidUserIdError(ValidationError):
    """Raised when a user ID is not a valid ObjectId."""

    def __init__(self, user_id: str):
        super().__init__(
            "Invalid user ID",
            code="INVALID_USER_ID",
            details={"user_id": user_id},
        )


class DuplicateEmailError(ConflictError):
    """Raised when an insert collides with the unique email index."""

    def __init__(self, email: str):
        super().__init__(
            "Email is already registered",
            code="DUPLICATE_EMAIL",
            details={"email": email},
        )
