"""
Base repository class providing common database operations.

Model-specific repositories inherit from `BaseRepository` and add their own queries. Repositories
only `flush()`; committing is the caller's decision (service layer, request handler, fixture).
"""
import time
import logging
from typing import TypeVar, Generic, Type, Any

from sqlalchemy import select, func, inspect as sa_inspect
from sqlalchemy.ext.asyncio import AsyncSession

from qa_types.database.base import Base
from qa_types.exceptions.base import (
    RepositoryError,
    NotFoundError,
    InvalidInputError,
)
from qa_types.exceptions.mapper import db_error_handler

ModelType = TypeVar("ModelType", bound=Base)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameters:
        ModelType: The SQLAlchemy model class this repository manages.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Args:
            model: the model class itself (User, not User()); used to build select(self.model) etc.
            db: the async database session all queries run on.
        """
        self.model = model
        self.db = db
        self._fields = frozenset(sa_inspect(model).attrs.keys())

    def _unmapped(self, names) -> list[str]:
        return sorted(name for name in names if name not in self._fields)

    def _missing_required(self, values: dict) -> list[str]:
        """
        NOT NULL columns left empty in `values`. Columns with a default of their own and the
        autoincrement primary key are filled in by the database.
        """
        missing = []
        for col in self.model.__table__.columns:
            filled_by_db = (
                col.nullable
                or col.default is not None
                or col.server_default is not None
                or (col.primary_key and col.autoincrement in (True, "auto"))
            )
            if not filled_by_db and values.get(col.name) is None:
                missing.append(col.name)
        return sorted(missing)

    # =================================================================================================================
    # Create
    # =================================================================================================================

    async def create(self, **kwargs) -> ModelType:
        """
        Validate the payload, insert the entity and return it with DB-generated fields populated.

        Raises:
            InvalidInputError: unknown field names, or required fields missing/None.
            DuplicateError: a unique constraint was violated.
            RepositoryError: any other database failure.
        """
        model_name = self.model.__name__
        logger.debug(
            "repo.create.start",
            extra={"model": model_name, "operation": "create", "provided_keys": sorted(kwargs.keys())},
        )

        unknown = self._unmapped(kwargs)
        if unknown:
            logger.info(
                "repo.create.invalid_fields",
                extra={"model": model_name, "operation": "create", "invalid_fields": unknown},
            )
            raise InvalidInputError(f"Unknown field(s) for {model_name}: {', '.join(unknown)}", fields=unknown)

        missing = self._missing_required(kwargs)
        if missing:
            logger.info(
                "repo.create.missing_required",
                extra={"model": model_name, "operation": "create", "missing_fields": missing},
            )
            raise InvalidInputError(f"Missing required field(s) for {model_name}: {', '.join(missing)}", fields=missing)

        start = time.perf_counter()
        async with db_error_handler(self.db, model_name):
            entity = self.model(**kwargs)
            self.db.add(entity)
            await self.db.flush()
            await self.db.refresh(entity)

        logger.info(
            "repo.create.success",
            extra={
                "model": model_name,
                "operation": "create",
                "id": getattr(entity, "id", None),
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return entity

    # =================================================================================================================
    # Read
    # =================================================================================================================

    async def get_by_id(self, entity_id: Any) -> ModelType | None:
        """
        Get an entity by its primary key, or None.

        Raises:
            RepositoryError: If the query fails.
        """
        try:
            result = await self.db.execute(
                select(self.model).where(self.model.id == entity_id)
            )
            entity = result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Error retrieving {self.model.__name__} by ID {entity_id}: {e}")
            raise RepositoryError(f"Failed to retrieve {self.model.__name__}") from e

        logger.debug(f"Retrieved {self.model.__name__} by ID: {entity_id} (found={entity is not None})")
        return entity

    async def get_by_id_or_raise(self, entity_id: Any) -> ModelType:
        """
        Same as get_by_id() but raises NotFoundError instead of returning None.
        """
        entity = await self.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(f"{self.model.__name__} with ID {entity_id} not found", fields=["id"])
        return entity

    async def find_by_field(self, field: str, value: Any) -> ModelType | None:
        """
        Find a single entity by any mapped field.

        Raises:
            InvalidInputError: If the field does not exist on the model.
            RepositoryError: If the query fails.
        """
        if self._unmapped([field]):
            raise InvalidInputError(f"{self.model.__name__} has no field '{field}'", fields=[field])

        try:
            result = await self.db.execute(
                select(self.model).where(getattr(self.model, field) == value)
            )
            entity = result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Error finding {self.model.__name__} by {field}: {e}")
            raise RepositoryError(f"Failed to find {self.model.__name__}") from e

        logger.debug(f"Found {self.model.__name__} by {field} (found={entity is not None})")
        return entity

    async def count(self) -> int:
        try:
            result = await self.db.execute(select(func.count()).select_from(self.model))
            return int(result.scalar_one())
        except Exception as e:
            logger.error(f"Error counting {self.model.__name__}: {e}")
            raise RepositoryError(f"Failed to count {self.model.__name__}") from e
