import abc
import logging
from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar, Optional

from sqlalchemy import Executable
from sqlalchemy.exc import SQLAlchemyError

from src.shared.database.base_mapper import BaseEntityMapper
from src.shared.database.database import Database
from src.shared.exceptions import StorageError

logger = logging.getLogger(__name__)

TEntity = TypeVar("TEntity")
TModel = TypeVar("TModel")


class BaseRepository(abc.ABC, Generic[TEntity, TModel]):
    """
    Session-per-operation repository base.

    Every helper opens its own session from the shared session maker, so a
    repository instance is safe to share between concurrent requests.
    SQLAlchemy failures are re-raised as StorageError; cancellation is not
    intercepted.
    """

    entity_name: str = "Entity"

    def __init__(self, db: Database, mapper: BaseEntityMapper[TModel, TEntity]):
        self.db = db
        self.mapper = mapper

    @contextmanager
    def _storage_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            logger.exception("%s failed for %s", operation, self.entity_name)
            raise StorageError(operation, self.entity_name) from e

    async def find_one(self, statement: Executable) -> Optional[TModel]:
        with self._storage_errors("find_one"):
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                entity = result.scalar_one_or_none()
        if entity is None:
            return None
        return self.mapper.to_model(entity)

    async def find_all(self, statement: Executable) -> list[TModel]:
        with self._storage_errors("find_all"):
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                entities = list(result.scalars().all())
        return self.mapper.to_models(entities)

    async def scalar(self, statement: Executable) -> int:
        """Execute an aggregate query (e.g. COUNT) and return its single value."""
        with self._storage_errors("scalar"):
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                return int(result.scalar_one())

    async def add(self, entity: TEntity) -> TEntity:
        """Insert an entity and commit. Store-generated columns are populated on return."""
        with self._storage_errors("add"):
            async with self.db.session_maker() as session:
                session.add(entity)
                await session.commit()
        return entity

    async def execute(self, statement: Executable) -> int:
        """Execute a write statement, commit, and return the number of affected rows."""
        with self._storage_errors("execute"):
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                await session.commit()
                return result.rowcount
