"""
User repository for the integration example.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from qa_types.repositories.base_repository import BaseRepository
from .models import User

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """
    Repository for User entity operations.

    Adds name-based lookup and name normalization on top of the generic CRUD in BaseRepository.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def create_user(self, name: str, *, user_id: int | None = None) -> User:
        """
        Create a user. Surrounding whitespace in `name` is removed.

        Args:
            name: display name, unique across users
            user_id: explicit identifier; the database assigns one when omitted

        Raises:
            InvalidInputError: if the name is blank
            DuplicateError: if a user with the same name (or id) already exists
        """
        payload: dict = {"name": name.strip() if name is not None else None}
        if not payload["name"]:
            payload["name"] = None  # reported as a missing required field
        if user_id is not None:
            payload["id"] = user_id
        return await self.create(**payload)

    async def find_by_name(self, name: str | None) -> User | None:
        """Look a user up by name; surrounding whitespace is ignored and a blank name finds nothing."""
        if name is None or not name.strip():
            return None
        return await self.find_by_field("name", name.strip())
