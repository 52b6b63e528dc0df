"""
SQLAlchemy async engine and session management

This module provides:
1. Base: declarative base shared by every ORM model
2. Database: owns one AsyncEngine + async_sessionmaker (injected through the DI container)
3. create_db_and_tables: schema bootstrap for local runs and tests (production uses Alembic)

The engine is created lazily on first use so that the event loop that owns it is the
one serving requests (FastAPI lifespan / TestClient portal).
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import Settings
from src.platform.logging.loguru_io import Logger


class Base(DeclarativeBase):
    pass


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


class Database:
    """
    Database handle for the dependency injection container.

    Usage:
        async with database.session() as session:
            ...

        uow = SqlAlchemyUnitOfWork(session_maker=database.session_maker)
    """

    def __init__(self, *, settings: Settings) -> None:
        self._settings = settings
        self._engine: Optional[AsyncEngine] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    @property
    def session_maker(self) -> async_sessionmaker[AsyncSession]:
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_maker

    def _create_engine(self) -> AsyncEngine:
        url = self._settings.DATABASE_URL_ASYNC
        if self._settings.IS_SQLITE:
            engine = create_async_engine(
                url,
                echo=self._settings.DB_ECHO,
                connect_args={'timeout': 30},
            )
            event.listen(engine.sync_engine, 'connect', _enable_sqlite_foreign_keys)
        else:
            engine = create_async_engine(
                url,
                echo=self._settings.DB_ECHO,
                pool_size=self._settings.DB_POOL_SIZE,
                max_overflow=self._settings.DB_POOL_MAX_OVERFLOW,
                pool_timeout=self._settings.DB_POOL_TIMEOUT,
                pool_recycle=self._settings.DB_POOL_RECYCLE,
                pool_pre_ping=self._settings.DB_POOL_PRE_PING,
            )
        Logger.base.info(f'🔗 [DB] Engine created for {engine.url.render_as_string()}')
        return engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for read sessions

        Note: Automatically handles rollback on exception
        """
        async with self.session_maker() as session:
            yield session

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            Logger.base.info('🔌 [DB] Engine disposed')
        self._engine = None
        self._session_maker = None


async def create_db_and_tables(database: Database) -> None:
    """Create database tables if they don't exist"""
    # Register every model on Base.metadata before create_all
    import src.service.flight_booking.driven_adapter.model  # noqa: F401

    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    Logger.base.info('🗄️  [DB] Tables ensured')
