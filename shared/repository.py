"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
collection access and the translation of driver failures.
"""

from contextlib import asynccontextmanager
from typing import TypeVar, Generic, AsyncIterator

from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from .exceptions import ExternalServiceError


T = TypeVar("T")


class StoreError(ExternalServiceError):
    """Raised when the document store fails."""

    def __init__(self, operation: str, original_error: str):
        super().__init__(
            f"Document store failure during {operation}",
            service="mongodb",
            code="STORE_ERROR",
            details={"operation": operation, "original_error": original_error},
        )


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - MongoDB collection access via self._collection
    - Generic type parameter for model type hints
    - _guard() to translate driver errors into StoreError

    Subclasses should implement domain-specific data access methods
    and handle document-to-Pydantic model mapping internally.

    Example:
        class UserRepository(BaseRepository[User]):
            async def find_by_email(self, email: str) -> Optional[User]:
                async with self._guard("find_by_email"):
                    doc = await self._collection.find_one({"email": email})
                return self._to_user(doc) if doc else None
    """

    def __init__(self, collection: AsyncCollection) -> None:
        """
        Initialize the repository with a MongoDB collection.

        Args:
            collection: Async collection instance for database operations.
        """
        self._collection = collection

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        """Wrap driver calls so failures surface as StoreError."""
        try:
            yield
        except PyMongoError as e:
            raise StoreError(operation, str(e)) from e
