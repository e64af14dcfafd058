"""
Database Configuration.

SQLAlchemy async engine and session management, plus the one-time
schema bootstrap run at startup.
Uses lazy initialization to prevent import-time failures when .env is not configured.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import Connection, MetaData, inspect, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.schema import CreateColumn

from notes_api.core.logging import get_logger

logger = get_logger(__name__)

# Module-level state for lazy initialization
_engine: AsyncEngine | None = None
_async_session_factory: async_sessionmaker[AsyncSession] | None = None


def _connect_args(driver: str, sslmode: str, timezone: str) -> dict[str, Any]:
    """Driver-level connection arguments for PostgreSQL via asyncpg."""
    if not driver.endswith("asyncpg"):
        return {}
    return {"ssl": sslmode, "server_settings": {"timezone": timezone}}


def _create_engine() -> AsyncEngine:
    """Create async SQLAlchemy engine."""
    from notes_api.core.config import get_app_config, get_database_url

    db_config = get_app_config().database

    engine = create_async_engine(
        get_database_url(),
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_recycle=db_config.pool_recycle,
        pool_pre_ping=True,
        echo=db_config.echo,
        connect_args=_connect_args(
            db_config.driver, db_config.sslmode, db_config.timezone
        ),
    )
    logger.debug(
        "Database engine created",
        extra={"host": db_config.host, "database": db_config.name},
    )
    return engine


def get_engine() -> AsyncEngine:
    """
    Get the database engine, creating it on first use.

    Returns:
        SQLAlchemy async engine instance
    """
    global _engine
    if _engine is None:
        _engine = _create_engine()
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Get the session factory, creating it on first use.

    Returns:
        SQLAlchemy async session factory
    """
    global _async_session_factory
    if _async_session_factory is None:
        _async_session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _async_session_factory


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides a database session.

    Commits when the request succeeds and rolls back on any exception.

    Usage in endpoints:
        @router.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    session_factory = get_session_factory()
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def _add_missing_columns(sync_conn: Connection, metadata: MetaData) -> list[str]:
    """
    Bring existing tables up to the model definitions.

    Adds columns and indexes the models declare but the database lacks.
    Columns and indexes are never dropped or altered in type.

    Returns:
        Names of the added columns as "table.column"
    """
    inspector = inspect(sync_conn)
    preparer = sync_conn.dialect.identifier_preparer
    added: list[str] = []

    for table in metadata.sorted_tables:
        existing = {column["name"] for column in inspector.get_columns(table.name)}
        for column in table.columns:
            if column.name in existing:
                continue
            column_ddl = CreateColumn(column).compile(dialect=sync_conn.dialect)
            table_name = preparer.format_table(table)
            sync_conn.exec_driver_sql(f"ALTER TABLE {table_name} ADD COLUMN {column_ddl}")
            added.append(f"{table.name}.{column.name}")

        existing_indexes = {index["name"] for index in inspector.get_indexes(table.name)}
        for index in table.indexes:
            if index.name not in existing_indexes:
                index.create(sync_conn)

    return added


async def bootstrap(engine: AsyncEngine) -> None:
    """
    Prepare the database for the application. Safe to run repeatedly.

    On PostgreSQL, enables the uuid-ossp extension. On every backend,
    creates missing tables, then adds any columns and indexes that an
    existing table lacks compared with its model.

    Args:
        engine: Engine to bootstrap

    Raises:
        sqlalchemy.exc.SQLAlchemyError: If the database is unreachable or
            the schema cannot be brought up to date. Callers treat this
            as fatal.
    """
    # Registers every model on Base.metadata
    from notes_api.models import Base

    async with engine.begin() as conn:
        if conn.dialect.name == "postgresql":
            await conn.execute(text('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"'))

        logger.info("Running migrations", extra={"dialect": conn.dialect.name})
        await conn.run_sync(Base.metadata.create_all)
        added = await conn.run_sync(_add_missing_columns, Base.metadata)

    if added:
        logger.info("Added missing columns", extra={"columns": added})
    logger.info("Database bootstrap complete")


async def dispose_engine() -> None:
    """Close all pooled connections and forget the engine."""
    global _engine, _async_session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _async_session_factory = None
