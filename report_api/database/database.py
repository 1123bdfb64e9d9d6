"""Database configuration module."""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Optional, TypeVar

from fastapi import Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base

from report_api.exceptions.api_exception import StoreError
from report_api.settings import settings

T = TypeVar("T")

logger = logging.getLogger(__name__)

Base = declarative_base()


class RecordStore:
    """Store client owning the engine and session factory for the record table.

    One instance is created at application startup and disposed on shutdown.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine = create_async_engine(url, echo=echo)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open a session bound to this store."""
        async with self.session_factory() as session:
            yield session

    async def create_schema(self) -> None:
        """Create the tables if they do not exist yet."""
        # Registers the mapped classes on Base.metadata
        import report_api.models.transaction  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def store_call(
    operation: Awaitable[T],
    action: str,
    timeout: Optional[float] = None,
) -> T:
    """Await a store operation with a bounded timeout.

    Timeouts and SQLAlchemy errors are re-raised as StoreError, keeping the
    original exception as the cause.
    """
    limit = timeout if timeout is not None else settings.STORE_TIMEOUT_SECONDS
    try:
        return await asyncio.wait_for(operation, timeout=limit)
    except asyncio.TimeoutError as exc:
        logger.error("Store call timed out after %ss: %s", limit, action)
        raise StoreError(f"{action} timed out after {limit} seconds") from exc
    except SQLAlchemyError as exc:
        logger.error("Store call failed: %s: %s", action, exc)
        raise StoreError(f"{action} failed: {exc}") from exc


def get_store(request: Request) -> RecordStore:
    """Dependency for the application-wide record store."""
    return request.app.state.store


async def get_db(store: RecordStore = Depends(get_store)) -> AsyncIterator[AsyncSession]:
    """Dependency for database session."""
    async with store.session() as session:
        yield session
