"""Engine and session lifecycle for the catalog database.

PostgreSQL (asyncpg) in deployments, SQLite (aiosqlite) for tests and local
runs. The engine and session factory are process-wide singletons created on
first use from AppConfig.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from jewelcalc.config import get_config
from jewelcalc.db.models import Base

_engine: AsyncEngine | None = None
_session_factory: sessionmaker | None = None


def _is_sqlite(url: str) -> bool:
    return url.lower().startswith("sqlite")


def build_engine(url: str, **kwargs: Any) -> AsyncEngine:
    """Create an async engine for url.

    SQLite connections get PRAGMA foreign_keys=ON so dangling product, metal,
    purity or ring-size ids fail the same way they do on PostgreSQL.
    """
    engine = create_async_engine(url, **kwargs)

    if _is_sqlite(url):

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def get_engine() -> AsyncEngine:
    """Get or create the singleton engine from AppConfig.db."""
    global _engine

    if _engine is None:
        db_config = get_config().db
        engine_kwargs: dict[str, Any] = {"echo": db_config.echo}

        # SQLite doesn't support connection pooling parameters
        if not _is_sqlite(db_config.url):
            engine_kwargs.update(
                pool_size=db_config.pool_size,
                max_overflow=db_config.pool_max_overflow,
                pool_timeout=db_config.pool_timeout,
                pool_pre_ping=True,
                pool_recycle=3600,
            )

        _engine = build_engine(db_config.url, **engine_kwargs)

    return _engine


def get_session_factory() -> sessionmaker:
    """Get or create the session factory bound to get_engine().

    Catalog lookups each draw their own session from this factory.
    """
    global _session_factory

    if _session_factory is None:
        _session_factory = sessionmaker(get_engine(), class_=AsyncSession, expire_on_commit=False)

    return _session_factory


@asynccontextmanager
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Unit-of-work session for catalog writes and reads.

    Usage:
        async with get_session() as session:
            product = await repository.get_product(session, product_id)

    Commits on clean exit, rolls back and re-raises on error.
    """
    session = get_session_factory()()

    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency wrapping get_session()."""
    async with get_session() as session:
        yield session


async def init_db(drop: bool = False) -> None:
    """Create the catalog tables, optionally dropping them first."""
    async with get_engine().begin() as conn:
        if drop:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose the engine; the next get_engine() call builds a fresh one."""
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
