"""
User directories: the lookup component the UserService depends on.

- StaticUserDirectory is the fake lookup service: a fixed in-memory mapping.
- SqlUserDirectory answers the same question from the database through UserRepository.

Both satisfy the UserDirectory protocol, so the service can be integration-tested against either.
"""

from __future__ import annotations

import logging
from typing import Mapping, Protocol

from .repository import UserRepository

logger = logging.getLogger(__name__)

DEFAULT_USERS: dict[int, str] = {1: "John Doe"}


class UserDirectory(Protocol):
    async def get_user_name(self, user_id: int) -> str | None:
        ...


class StaticUserDirectory:
    """Fake user-lookup service backed by a fixed mapping (default: user 1 is "John Doe")."""

    def __init__(self, users: Mapping[int, str] | None = None):
        self._users = dict(DEFAULT_USERS if users is None else users)

    async def get_user_name(self, user_id: int) -> str | None:
        return self._users.get(user_id)

    def __len__(self) -> int:
        return len(self._users)


class SqlUserDirectory:
    """User lookup backed by the `users` table."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def get_user_name(self, user_id: int) -> str | None:
        user = await self.repository.get_by_id(user_id)
        return user.name if user is not None else None
