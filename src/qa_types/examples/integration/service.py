"""
UserService: the component exercised by the integration test.

The service validates the identifier and delegates the lookup to a UserDirectory. An integration
test wires the real service to a real directory (and, for SqlUserDirectory, a real database) and
checks that looking up user 1 yields "John Doe".
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from qa_types.exceptions.base import InvalidInputError, NotFoundError
from .directory import DEFAULT_USERS, UserDirectory
from .repository import UserRepository

logger = logging.getLogger(__name__)

# Largest value an SQLite INTEGER primary key can hold.
MAX_USER_ID = 2**63 - 1


class UserService:
    def __init__(self, directory: UserDirectory):
        self.directory = directory

    @staticmethod
    def _validate_id(user_id: int) -> None:
        # bool is an int subclass; True would otherwise look up user 1
        if isinstance(user_id, bool) or not isinstance(user_id, int) or not 0 < user_id <= MAX_USER_ID:
            raise InvalidInputError(f"User id must be an integer between 1 and {MAX_USER_ID}, got {user_id!r}", fields=["user_id"])

    async def get_user_name(self, user_id: int) -> str | None:
        """
        Return the name of user `user_id`, or None when there is no such user.

        Raises:
            InvalidInputError: if `user_id` is not an integer in 1..MAX_USER_ID.
        """
        self._validate_id(user_id)
        name = await self.directory.get_user_name(user_id)
        logger.debug(
            "user_service.lookup",
            extra={"user_id": user_id, "found": name is not None, "directory": type(self.directory).__name__},
        )
        return name

    async def require_user_name(self, user_id: int) -> str:
        """
        Same as get_user_name() but a missing user raises NotFoundError.
        """
        name = await self.get_user_name(user_id)
        if name is None:
            raise NotFoundError(f"User with ID {user_id} not found", fields=["user_id"])
        return name


async def seed_default_users(session: AsyncSession) -> int:
    """
    Insert the default users (user 1, "John Doe") when missing and commit.

    Returns the number of users inserted; calling it again inserts nothing.
    """
    repo = UserRepository(session)
    inserted = 0
    for user_id, name in DEFAULT_USERS.items():
        if await repo.get_by_id(user_id) is None:
            await repo.create_user(name, user_id=user_id)
            inserted += 1
    if inserted:
        await session.commit()
    logger.info("user_service.seeded", extra={"inserted": inserted})
    return inserted
