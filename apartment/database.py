import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from apartment.config import settings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, **kwargs) -> AsyncEngine:
    eng = create_async_engine(url, echo=settings.debug, **kwargs)
    if eng.dialect.name == "sqlite":
        event.listen(eng.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return eng


engine = build_engine(settings.database_url)
async_session = async_sessionmaker(engine, expire_on_commit=False)


@asynccontextmanager
async def transaction(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """Commit the block's work as one unit, or roll all of it back."""
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise


async def get_session() -> AsyncIterator[AsyncSession]:
    """Request-scoped session. Work not committed by the handler is rolled back."""
    async with async_session() as session:
        try:
            yield session
        except Exception:
            logger.debug("Rolling back session after error")
            await session.rollback()
            raise
