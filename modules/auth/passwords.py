"""
Password hashing with bcrypt.

Hashing is CPU-bound, so both operations run in a worker thread.
"""

import asyncio
from typing import Protocol, runtime_checkable

import bcrypt


@runtime_checkable
class IPasswordHasher(Protocol):
    """Interface for password hashing."""

    async def hash(self, password: str) -> str:
        ...

    async def verify(self, password: str, hashed: str) -> bool:
        ...


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt-backed password hasher."""

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(self._hash_sync, password)

    async def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            return False
        return await asyncio.to_thread(self._verify_sync, password, hashed)

    def _hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def _verify_sync(password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
