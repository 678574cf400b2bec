"""
Shared infrastructure for the Catalog Accounts backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: MongoDB client factory
- exceptions: Base exception classes
- repository: Base repository with driver error translation

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    get_mongo_client,
    get_database,
    get_users_collection,
    close_client,
    reset_client_cache,
)
from .exceptions import (
    CatalogError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    CapacityError,
    MutationError,
    ExternalServiceError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_mongo_client",
    "get_database",
    "get_users_collection",
    "close_client",
    "reset_client_cache",
    "CatalogError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "CapacityError",
    "MutationError",
    "ExternalServiceError",
    "AuthenticatedUser",
]
