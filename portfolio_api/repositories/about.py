"""About Repository — read and upsert the singleton profile row.

Invariants:
    - get_singleton() reads the only row or raises NotFoundError
    - upsert_singleton() is one statement: INSERT ... ON CONFLICT (singleton_key)
      DO UPDATE, so concurrent first writes converge on one row
    - The unique constraint on singleton_key backs the invariant on every dialect

Design Decisions:
    - Dialect-specific insert constructs (postgresql, sqlite) over a
      read-then-branch-then-write sequence (ADR: singleton race)
    - Other dialects fall back to read-then-branch; the constraint turns a lost
      race into a StoreError instead of a second row
"""

import logging
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.core.errors import NotFoundError
from portfolio_api.infrastructure.database import DatabaseSessionManager
from portfolio_api.models.about import About

logger = logging.getLogger(__name__)

RESOURCE_NAME = "About information"

_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class AboutRepository:
    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def get_singleton(self) -> About:
        async with self._db.session() as db:
            about = await self._read(db)
            if about is None:
                raise NotFoundError(RESOURCE_NAME)
            return about

    async def upsert_singleton(self, fields: dict[str, Any]) -> About:
        """Insert the profile if absent, otherwise overwrite it. Returns the stored row."""
        dialect = self._db.engine.dialect.name
        async with self._db.session() as db:
            insert_fn = _UPSERT_INSERTS.get(dialect)
            if insert_fn is not None:
                stmt = insert_fn(About).values(**fields)
                stmt = stmt.on_conflict_do_update(
                    index_elements=["singleton_key"], set_=fields,
                )
                await db.execute(stmt)
            else:
                await self._branching_upsert(db, fields)
            await db.commit()

            about = await self._read(db)
            if about is None:
                # Deleted by another writer between commit and read
                raise NotFoundError(RESOURCE_NAME)
            return about

    @staticmethod
    async def _read(db: AsyncSession) -> About | None:
        result = await db.execute(
            select(About)
            .order_by(About.id)
            .limit(1)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def _branching_upsert(self, db: AsyncSession, fields: dict[str, Any]) -> None:
        existing = await self._read(db)
        if existing is None:
            db.add(About(**fields))
        else:
            await db.execute(
                update(About).where(About.id == existing.id).values(**fields),
            )
        logger.debug("About upsert used read-then-branch fallback")
