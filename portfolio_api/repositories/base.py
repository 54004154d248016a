"""Entity Repository — shared CRUD statements for tables keyed by an integer id.

Invariants:
    - create() re-reads the inserted row so store defaults come back to the caller
    - update() is full replacement; zero rows affected means NotFoundError
    - delete() is idempotent: a missing or malformed id still succeeds
    - An id that cannot name a row never reaches the store (parse_entity_id)
"""

import logging
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.core.errors import NotFoundError
from portfolio_api.core.identifiers import EntityId, parse_entity_id
from portfolio_api.db.base import Base
from portfolio_api.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class EntityRepository(Generic[ModelT]):
    """CRUD over one table. Subclasses set model, resource_name and list order."""

    model: ClassVar[type[Base]]
    resource_name: ClassVar[str]

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    def _list_order(self) -> tuple:
        return (self.model.id.asc(),)

    def _require_id(self, raw_id: str | int) -> EntityId:
        entity_id = parse_entity_id(raw_id)
        if entity_id is None:
            raise NotFoundError(self.resource_name, str(raw_id))
        return entity_id

    async def _read(self, db: AsyncSession, entity_id: EntityId) -> ModelT:
        result = await db.execute(
            select(self.model)
            .where(self.model.id == entity_id)
            .execution_options(populate_existing=True),
        )
        entity = result.scalar_one_or_none()
        if entity is None:
            raise NotFoundError(self.resource_name, str(entity_id))
        return entity

    async def list_all(self) -> list[ModelT]:
        async with self._db.session() as db:
            result = await db.execute(
                select(self.model).order_by(*self._list_order()),
            )
            return list(result.scalars().all())

    async def get_by_id(self, raw_id: str | int) -> ModelT:
        entity_id = self._require_id(raw_id)
        async with self._db.session() as db:
            return await self._read(db, entity_id)

    async def create(self, fields: dict[str, Any]) -> ModelT:
        """Insert a row, then re-read it by its generated id."""
        async with self._db.session() as db:
            entity = self.model(**fields)
            db.add(entity)
            await db.commit()
            created = await self._read(db, EntityId(entity.id))
            logger.info(
                f"{self.resource_name} created",
                extra={"resource": self.resource_name, "resource_id": created.id},
            )
            return created

    async def update(self, raw_id: str | int, fields: dict[str, Any]) -> ModelT:
        """Replace every mutable column of the row, then re-read it."""
        entity_id = self._require_id(raw_id)
        async with self._db.session() as db:
            result = await db.execute(
                update(self.model)
                .where(self.model.id == entity_id)
                .values(**fields),
            )
            if result.rowcount == 0:
                raise NotFoundError(self.resource_name, str(entity_id))
            await db.commit()
            return await self._read(db, entity_id)

    async def delete(self, raw_id: str | int) -> None:
        entity_id = parse_entity_id(raw_id)
        if entity_id is None:
            return
        async with self._db.session() as db:
            await db.execute(
                delete(self.model).where(self.model.id == entity_id),
            )
            await db.commit()
