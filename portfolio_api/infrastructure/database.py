"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception and is closed on every exit path
    - Pool checkout is bounded: pool_size + max_overflow connections, then wait
      pool_timeout seconds, then PoolExhaustedError
    - All SQLAlchemy exceptions mapped to StoreError (core/errors.py); driver
      messages are logged, never attached to the raised error's message

Design Decisions:
    - Manager constructed in the FastAPI lifespan and kept on app.state, not a
      module-level singleton: tests hand the app their own manager (ADR: explicit lifetime)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Pool kwargs only forwarded when given: SQLite test engines use their
      dialect's default pool, which rejects pool_size
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from portfolio_api.core.errors import PoolExhaustedError, StoreError
from portfolio_api.db.base import Base
import portfolio_api.models  # noqa: F401 (registers every table on Base.metadata)

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int | None = None,
        max_overflow: int | None = None,
        pool_timeout: float | None = None,
    ):
        pool_kwargs = {
            key: value
            for key, value in (
                ("pool_size", pool_size),
                ("max_overflow", max_overflow),
                ("pool_timeout", pool_timeout),
            )
            if value is not None
        }
        self.pool_timeout = pool_timeout
        self.engine = create_async_engine(
            database_url,
            pool_pre_ping=True,
            pool_recycle=3600,
            **pool_kwargs,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except PoolTimeoutError as e:
            await session.rollback()
            logger.error(f"DB pool checkout timed out: {e}")
            raise PoolExhaustedError(self.pool_timeout)
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise StoreError("Integrity constraint violated", "commit")
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise StoreError("Connection or operational error", "execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise StoreError("Database driver error", "query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise StoreError("Database operation failed", "unknown")
        except OSError as e:
            logger.error(f"DB connection failed: {e}")
            raise StoreError("Connection failed", "connect")
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (startup check and readiness probe)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def create_all(self) -> None:
        """Create missing tables. Existing tables are left untouched."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


def get_db_manager(request: Request) -> DatabaseSessionManager:
    """FastAPI dependency: the manager attached to the app at startup."""
    manager = getattr(request.app.state, "db", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager
