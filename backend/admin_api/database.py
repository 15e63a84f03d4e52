"""
DA Admin Backend — Database Connection Bootstrap
==================================================

What:  A lifecycle-scoped async SQLAlchemy engine handle.
How:   `bootstrap_database()` builds a DatabaseHandle from settings, verifies
       the connection with `SELECT 1`, and returns it to the lifespan, which
       stores it on `app.state.database` and disposes it on shutdown.
Who:   Called once by main.lifespan(). No route handler consumes the handle;
       the health endpoint only reports whether it is connected.

Failure policy:
    Missing URL, unreachable server or timeout during the startup check:
    - production: log the error and continue without a handle
    - otherwise:  raise DatabaseError, which aborts application startup

Connection Pooling:
    pool_size=DB_POOL_SIZE (default 10), pool_pre_ping on, recycle hourly.
    SQLite URLs (used by tests) keep SQLAlchemy's default pool.
"""

import asyncio
import logging
from typing import Optional

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from admin_api.config import Settings
from admin_api.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class DatabaseHandle:
    """
    Owns one AsyncEngine for the lifetime of the application.

    Usage:
        handle = DatabaseHandle("postgresql+asyncpg://...")
        await handle.connect()
        ...
        await handle.dispose()
    """

    def __init__(
        self,
        url: str,
        pool_size: int = 10,
        connect_timeout: float = 10.0,
        echo: bool = False,
    ):
        self.url = url
        self.pool_size = pool_size
        self.connect_timeout = connect_timeout
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self.connected = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatabaseHandle":
        if not settings.database_url:
            raise DatabaseError("DATABASE_URL environment variable is not defined")
        return cls(
            url=settings.database_url,
            pool_size=settings.db_pool_size,
            connect_timeout=settings.db_connect_timeout,
            echo=settings.log_level == "DEBUG",
        )

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise DatabaseError("Database handle is not connected")
        return self._engine

    @property
    def host(self) -> str:
        try:
            url = make_url(self.url)
        except ArgumentError:
            return "unknown"
        return url.host or url.database or "local"

    def _create_engine(self) -> AsyncEngine:
        url = make_url(self.url)
        options = {"echo": self.echo, "pool_pre_ping": True}
        if url.get_backend_name() != "sqlite":
            options.update(
                pool_size=self.pool_size,
                pool_timeout=self.connect_timeout,
                pool_recycle=3600,
            )
        engine = create_async_engine(url, **options)
        _register_pool_events(engine)
        return engine

    async def connect(self) -> None:
        """
        Create the engine and run a connection check.

        Raises:
            DatabaseError: invalid URL, unreachable server or timeout.
        """
        logger.info("Attempting to connect to the database...")
        try:
            self._engine = self._create_engine()
            await asyncio.wait_for(self._check(), timeout=self.connect_timeout)
        except (SQLAlchemyError, OSError, ImportError, ValueError, asyncio.TimeoutError) as exc:
            await self.dispose()
            raise DatabaseError(
                f"Could not connect to the database: {str(exc) or type(exc).__name__}",
                context={"host": self.host},
            ) from exc

        self.connected = True
        logger.info("Database connected: %s", self.host)

    async def _check(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close all pooled connections. Safe to call more than once."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            if self.connected:
                logger.info("Database disconnected: %s", self.host)
        self.connected = False


def _register_pool_events(engine: AsyncEngine) -> None:
    """Log pool connection events on the sync engine behind the async facade."""

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        logger.debug("Pool opened a new database connection")

    @event.listens_for(engine.sync_engine, "close")
    def _on_close(dbapi_connection, connection_record):
        logger.debug("Pool closed a database connection")

    @event.listens_for(engine.sync_engine, "invalidate")
    def _on_invalidate(dbapi_connection, connection_record, exception):
        logger.error("Database connection invalidated: %s", exception)


async def bootstrap_database(settings: Settings) -> Optional[DatabaseHandle]:
    """
    Open the application's database handle at startup.

    Returns:
        A connected DatabaseHandle, or None when the connection failed in
        production.

    Raises:
        DatabaseError: connection failed outside production.
    """
    try:
        handle = DatabaseHandle.from_settings(settings)
        await handle.connect()
        return handle
    except DatabaseError as exc:
        logger.error("Database connection error: %s", exc.message)
        logger.error("Database URL configured: %s", bool(settings.database_url))
        logger.error("Environment: %s", settings.environment)
        if not settings.is_production:
            raise
        logger.warning("Continuing without database connection in production mode")
        return None
