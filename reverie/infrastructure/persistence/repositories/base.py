import uuid
from abc import ABC
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from reverie.application.exceptions import QueryError, RepositoryError
from reverie.infrastructure.persistence.database import Base
from reverie.shared.telemetry.logging import get_logger

ModelType = TypeVar("ModelType", bound=Base)

logger = get_logger(__name__)


class BaseRepository(ABC, Generic[ModelType]):
    """
    Base repository implementing common read and insert operations (LSP).

    Each call opens its own session and transaction from the session factory,
    so one repository instance can be shared by concurrent callers; pooling
    and isolation are the engine's job.

    SQLAlchemy errors never leave this class: they are logged and re-raised as
    the repository error type of the calling operation.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], model: type[ModelType]):
        self.session_factory = session_factory
        self.model = model

    async def _get_by_id(self, id: uuid.UUID) -> ModelType | None:
        """Get a single record by ID"""
        # Cast to Any for SQLAlchemy dynamic attribute access (id comes from UuidMixin)
        model: Any = self.model
        return await self._get_one(model.id == id)

    async def _get_one(self, *criteria: ColumnElement[bool]) -> ModelType | None:
        """Get the single record matching all criteria"""
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(self.model).where(*criteria))
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._failure(QueryError, "query", e) from e

    async def _list(
        self,
        *criteria: ColumnElement[bool],
        order_by: Sequence[Any] = (),
        skip: int = 0,
        limit: int | None = None,
    ) -> list[ModelType]:
        """Get records matching all criteria with optional pagination"""
        query = select(self.model).where(*criteria).order_by(*order_by).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise self._failure(QueryError, "query", e) from e

    async def _insert(self, obj: ModelType, error: type[RepositoryError]) -> ModelType:
        """Insert a new record in its own transaction"""
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    session.add(obj)
            return obj
        except SQLAlchemyError as e:
            raise self._failure(error, "insert", e) from e

    def _failure(
        self, error: type[RepositoryError], operation: str, exc: SQLAlchemyError
    ) -> RepositoryError:
        # Prefer the driver message (e.g. "UNIQUE constraint failed: user.name")
        message = str(getattr(exc, "orig", None) or exc)
        logger.warning("%s %s failed: %s", self.model.__tablename__, operation, message)
        return error(message)
