"""Database engine and session configuration."""

from __future__ import annotations

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from datacatalog.core.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured database."""
    engine = create_async_engine(
        settings.database_url,
        echo=settings.debug,
        future=True,
    )
    if engine.dialect.name == "sqlite":
        # SQLite ignores declared foreign keys unless asked per connection
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory used by the SQL backend.

    Note: The backend is responsible for committing its transactions.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """Create any missing catalog tables."""
    # Import all models so they are registered with SQLModel.metadata
    from datacatalog.models.category import Category  # noqa: F401
    from datacatalog.models.data_type import DataType  # noqa: F401
    from datacatalog.models.data_type_dataset import DataTypeDataset  # noqa: F401
    from datacatalog.models.dataset import Dataset  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
