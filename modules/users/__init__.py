"""
Users module.

Owns the user document: its models, the IUserStore interface and the
MongoDB-backed UserRepository.

Public API:
- IUserStore: Interface for user document access
- User, PublicUser, Profile, MyList, ListItem: Document models
- Users exceptions: UserNotFoundError, InvalidUserIdError, DuplicateEmailError
"""

from .interfaces import IUserStore
from .models import (
    MAX_PROFILES,
    IdentityProvider,
    ListCategory,
    ListItem,
    MyList,
    Profile,
    PublicUser,
    User,
    UserRole,
)
from .exceptions import UserNotFoundError, InvalidUserIdError, DuplicateEmailError

__all__ = [
    # Interface
    "IUserStore",
    # Models
    "MAX_PROFILES",
    "IdentityProvider",
    "ListCategory",
    "ListItem",
    "MyList",
    "Profile",
    "PublicUser",
    "User",
    "UserRole",
    # Exceptions
    "UserNotFoundError",
    "InvalidUserIdError",
    "DuplicateEmailError",
]
