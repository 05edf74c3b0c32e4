"""Database base configuration and session management."""
from typing import Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from console.config import settings


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


def _enable_sqlite_serializable(engine: AsyncEngine) -> None:
    """
    Make every SQLite transaction start with BEGIN IMMEDIATE.

    The driver's implicit deferred BEGIN lets two connections read the same
    rows and then deadlock on upgrade. Taking the write lock up front
    serializes competing transactions; the loser waits up to the busy
    timeout instead of failing.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _do_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> AsyncEngine:
    """
    Create async engine with serializable transactions.

    Args:
        database_url: SQLAlchemy URL, defaults to settings.database_url
        echo: Echo SQL, defaults to settings.debug

    Returns:
        Configured AsyncEngine
    """
    url = database_url or settings.database_url
    echo = settings.debug if echo is None else echo

    if url.startswith("sqlite"):
        new_engine = create_async_engine(
            url,
            echo=echo,
            connect_args={"timeout": settings.sqlite_busy_timeout},
        )
        _enable_sqlite_serializable(new_engine)
        return new_engine

    return create_async_engine(
        url,
        echo=echo,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        isolation_level=settings.database_isolation_level,
        pool_pre_ping=True,
    )


def create_session_maker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory bound to an engine."""
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# Create async engine
engine = create_engine()

# Create async session factory
async_session_maker = create_session_maker(engine)


async def init_db(bind: Optional[AsyncEngine] = None):
    """Initialize database - create all tables."""
    # Register models on Base.metadata
    import database.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db(bind: Optional[AsyncEngine] = None):
    """Close database connections."""
    await (bind or engine).dispose()
