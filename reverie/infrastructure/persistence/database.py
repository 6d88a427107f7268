from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (AsyncEngine, AsyncSession,
                                    async_sessionmaker, create_async_engine)
from sqlalchemy.orm import DeclarativeBase


# Modern SQLAlchemy 2.0 pattern
class Base(DeclarativeBase):
    """Base class for all database models"""

    pass


def create_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine for a database URL.

    Server databases get a sized connection pool. SQLite connections get
    foreign key enforcement switched on, which SQLite leaves off by default.
    """
    is_sqlite = database_url.startswith("sqlite")
    options: dict[str, Any] = {"echo": echo}
    if not is_sqlite:
        options.update(
            pool_pre_ping=True,
            pool_size=20,
            max_overflow=30,
            pool_recycle=3600,
            connect_args=(
                {
                    "server_settings": {"jit": "off"},
                    "command_timeout": 60,
                }
                if "postgresql" in database_url
                else {}
            ),
        )

    engine = create_async_engine(database_url, **options)

    if is_sqlite:

        @event.listens_for(engine.sync_engine, "connect")
        def enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet"""
    # Register the models on Base.metadata before create_all
    from reverie.infrastructure.persistence import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
