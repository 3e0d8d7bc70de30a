"""SQL Entity Store — SQLAlchemy implementation of the EntityStore protocol for one table.

Invariants:
    - One store instance per request session; holds no entity state between calls
    - insert/save/delete commit their own unit of work and roll back on failure
    - IntegrityError and DataError -> ConstraintViolationError (client-safe messages);
      other errors re-raised
    - insert refreshes the entity so the database-assigned id and column values are loaded
    - find_all returns rows in primary-key order

Design Decisions:
    - Generic over the ORM model class (ADR: one store for every flat single-table resource)
    - Commit inside the store: each CRUD call is its own transaction, there are no
      multi-entity transactions to coordinate
"""

import logging
from contextlib import asynccontextmanager
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.core.domain_types import EntityId
from resource_api.core.errors import ConstraintViolationError
from resource_api.db.base import Base
from resource_api.infrastructure.integrity import (
    describe_data_error, describe_integrity_error,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class SqlAlchemyStore(Generic[ModelT]):
    """Entity store backed by the table of `model`."""

    def __init__(self, model: type[ModelT], db: AsyncSession):
        self.model = model
        self.db = db

    @property
    def _name(self) -> str:
        return self.model.__name__

    @asynccontextmanager
    async def _write(self):
        """Commit on success; roll back and map integrity failures otherwise."""
        try:
            yield
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            messages = describe_integrity_error(e)
            logger.debug(
                f"{self._name} write rejected by constraint: {e.orig}",
                extra={"resource": self._name},
            )
            raise ConstraintViolationError(messages, resource=self._name) from e
        except DataError as e:
            await self.db.rollback()
            messages = describe_data_error(e)
            logger.debug(
                f"{self._name} write rejected by column type: {e.orig}",
                extra={"resource": self._name},
            )
            raise ConstraintViolationError(messages, resource=self._name) from e
        except Exception:
            await self.db.rollback()
            raise

    async def find_by_id(self, entity_id: EntityId) -> ModelT | None:
        result = await self.db.execute(
            select(self.model).where(self.model.id == entity_id),
        )
        entity = result.scalar_one_or_none()
        logger.debug(
            f"Lookup {self._name} {entity_id}: {'hit' if entity else 'miss'}",
            extra={"resource": self._name, "entity_id": entity_id},
        )
        return entity

    async def find_all(self) -> list[ModelT]:
        result = await self.db.execute(
            select(self.model).order_by(self.model.id),
        )
        return list(result.scalars().all())

    async def insert(self, entity: ModelT) -> ModelT:
        async with self._write():
            self.db.add(entity)
            await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def save(self, entity: ModelT) -> ModelT:
        async with self._write():
            self.db.add(entity)
            await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def delete(self, entity: ModelT) -> None:
        async with self._write():
            await self.db.delete(entity)
