"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers to return appropriate HTTP responses. Token failures
keep distinct codes so clients can tell "refresh" from "log in again".
"""

from shared.exceptions import AuthenticationError, ConflictError


class UserNotRegisteredError(AuthenticationError):
    """Raised when logging in with an email that has no account."""

    def __init__(self, message: str = "User is not registered"):
        super().__init__(message, code="NOT_REGISTERED")


class InvalidPasswordError(AuthenticationError):
    """Raised when the password does not match the stored hash."""

    def __init__(self, message: str = "Incorrect password"):
        super().__init__(message, code="BAD_PASSWORD")


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "Email is already registered",
            code="EMAIL_TAKEN",
            details={"email": email},
        )


class TokenError(AuthenticationError):
    """Base class for session token failures."""

    pass


class InvalidTokenError(TokenError):
    """Raised when a token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(TokenError):
    """Raised when a token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(TokenError):
    """Raised when no token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class TokenUserNotFoundError(TokenError):
    """Raised when a valid refresh token references a deleted user."""

    def __init__(self, user_id: str):
        super().__init__(
            "User no longer exists",
            code="USER_GONE",
            details={"user_id": user_id},
        )
