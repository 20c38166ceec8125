"""Async database configuration.

Provides:
- Async SQLAlchemy engine and session factory
- Transactional session context manager
- Schema bootstrap for local development
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from taxonomy_admin.config import settings
from taxonomy_admin.infra.logging import get_logger

logger = get_logger(__name__)

# Type alias for dependency injection
DatabaseSession = AsyncSession

# Global engine (initialized on first use)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_for_url(url: str, **kwargs) -> AsyncEngine:
    """Create an async engine, enabling foreign keys on SQLite."""
    engine = create_async_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def get_engine() -> AsyncEngine:
    """Get or create the async database engine."""
    global _engine

    if _engine is None:
        url = settings.database_url
        logger.info(
            "Creating database engine",
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_pool_max_overflow,
        )

        if url.startswith("sqlite"):
            _engine = create_engine_for_url(url, echo=settings.debug)
        else:
            _engine = create_engine_for_url(
                url,
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_pool_max_overflow,
                pool_pre_ping=True,  # Verify connections before use
                pool_recycle=1800,  # Recycle connections after 30 min
                echo=settings.debug,  # Log SQL in debug mode
            )

    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get or create the session factory."""
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    return _session_factory


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get an async database session.

    Commits on clean exit, rolls back and re-raises on error.

    Example:
        async with get_db_session() as session:
            result = await session.execute(select(ProductCategory))
    """
    factory = get_session_factory()
    session = factory()

    try:
        yield session
        await session.commit()

    except Exception as e:
        await session.rollback()
        logger.error("Database session error", error=str(e))
        raise

    finally:
        await session.close()


async def create_schema() -> None:
    """Create all tables that do not exist yet.

    Local development only; deployed databases are migrated separately.
    """
    from taxonomy_admin.models import Base

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ensured")


async def close_db_engine() -> None:
    """Close the database engine and all connections.

    Call this during application shutdown.
    """
    global _engine, _session_factory

    if _engine is not None:
        logger.info("Closing database engine")
        await _engine.dispose()
        _engine = None
        _session_factory = None


async def verify_db_connection() -> bool:
    """Verify database connectivity.

    Returns:
        True if connection successful, False otherwise
    """
    try:
        async with get_db_session() as session:
            await session.execute(text("SELECT 1"))
            logger.info("Database connection verified")
            return True
    except Exception as e:
        logger.error("Database connection failed", error=str(e))
        return False
