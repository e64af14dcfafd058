"""
Base Repository.

Base class for all repositories with common CRUD operations.
Every operation translates SQLAlchemy failures into application errors,
so callers only ever see ConflictError, NotFoundError or StoreError.
"""

from collections.abc import Awaitable
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.core.exceptions import ConflictError, NotFoundError, StoreError
from notes_api.core.logging import get_logger
from notes_api.models.base import Base

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
T = TypeVar("T")


def is_unique_violation(error: IntegrityError) -> bool:
    """Check whether an integrity error comes from a unique constraint."""
    error_str = str(error.orig if error.orig is not None else error).lower()
    return "unique" in error_str or "duplicate" in error_str


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common CRUD operations.

    Subclasses should set the model class:

        class NoteRepository(BaseRepository[Note]):
            model = Note
    """

    model: type[ModelType]
    conflict_message: str = "Resource already exists"
    not_found_message: str = "Resource not found"

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _execute_db_operation(
        self,
        operation: str,
        coro: Awaitable[T],
    ) -> T:
        """
        Execute a database operation with error handling.

        Args:
            operation: Description of the operation for logging
            coro: Coroutine to execute

        Returns:
            Result of the coroutine

        Raises:
            ConflictError: For unique constraint violations
            StoreError: For other database errors
        """
        try:
            return await coro
        except IntegrityError as e:
            logger.warning(
                "Database integrity error",
                extra={"operation": operation, "error": str(e.orig)},
            )
            if is_unique_violation(e):
                raise ConflictError(self.conflict_message) from e
            raise StoreError(f"Database constraint violation: {operation}") from e
        except SQLAlchemyError as e:
            logger.error(
                "Database error",
                extra={"operation": operation, "error": str(e)},
            )
            raise StoreError(f"Database operation failed: {operation}") from e

    async def _insert(self, instance: ModelType) -> ModelType:
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def insert(self, instance: ModelType) -> ModelType:
        """
        Persist a new record.

        Raises:
            ConflictError: If a unique key is already taken
            StoreError: For any other database failure
        """
        return await self._execute_db_operation(
            f"insert {self.model.__tablename__}",
            self._insert(instance),
        )

    async def find_by_id(self, id: str | UUID) -> ModelType:
        """
        Get a single record by ID, reloaded from the database.

        Raises:
            NotFoundError: If record not found
            StoreError: For database failures
        """
        result = await self._execute_db_operation(
            f"find {self.model.__tablename__}",
            self.session.execute(
                select(self.model)
                .where(self.model.id == str(id))
                .execution_options(populate_existing=True)
            ),
        )
        instance = result.scalar_one_or_none()

        if instance is None:
            raise NotFoundError(self.not_found_message)

        return instance

    async def find_page(self, limit: int, offset: int = 0) -> list[ModelType]:
        """Get at most `limit` records, skipping the first `offset`."""
        result = await self._execute_db_operation(
            f"list {self.model.__tablename__}",
            self.session.execute(
                select(self.model)
                .order_by(*self._default_order())
                .limit(limit)
                .offset(offset)
            ),
        )
        return list(result.scalars().all())

    def _default_order(self) -> tuple[Any, ...]:
        return (self.model.id,)

    async def update_fields(self, id: str | UUID, fields: dict[str, Any]) -> int:
        """
        Apply the given column values to one record.

        Zero affected rows is not an error here; callers check existence.

        Returns:
            Number of rows affected

        Raises:
            ConflictError: If the new values collide with a unique key
            StoreError: For any other database failure
        """
        result = await self._execute_db_operation(
            f"update {self.model.__tablename__}",
            self.session.execute(
                update(self.model)
                .where(self.model.id == str(id))
                .values(**fields)
            ),
        )
        return result.rowcount

    async def delete_by_id(self, id: str | UUID) -> int:
        """
        Delete a record by ID.

        Returns:
            Number of rows affected, 0 when no record matched

        Raises:
            StoreError: For database failures
        """
        result = await self._execute_db_operation(
            f"delete {self.model.__tablename__}",
            self.session.execute(
                delete(self.model).where(self.model.id == str(id))
            ),
        )
        return result.rowcount
