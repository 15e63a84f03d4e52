"""
DA Admin Backend — Database Bootstrap Tests
=============================================

What:  DatabaseHandle lifecycle and the startup failure policy.
How:   Real SQLite databases through aiosqlite in pytest's tmp_path; no
       server needed.

What we test:
    ✅ Connect, report connected, dispose
    ✅ Unreachable or invalid URLs raise DatabaseError
    ✅ Production tolerates failures (no handle); other environments raise
    ✅ The lifespan stores the handle on app.state and disposes it
"""

import pytest

from admin_api.config import Settings
from admin_api.database import DatabaseHandle, bootstrap_database
from admin_api.exceptions import DatabaseError
from admin_api.main import create_app, lifespan


def sqlite_url(path) -> str:
    return f"sqlite+aiosqlite:///{path}"


class TestDatabaseHandle:

    @pytest.mark.asyncio
    async def test_connect_and_dispose(self, tmp_path):
        handle = DatabaseHandle(sqlite_url(tmp_path / "app.db"))
        await handle.connect()
        assert handle.connected
        assert handle.engine is not None

        await handle.dispose()
        assert not handle.connected
        with pytest.raises(DatabaseError):
            handle.engine

    @pytest.mark.asyncio
    async def test_dispose_twice_is_harmless(self, tmp_path):
        handle = DatabaseHandle(sqlite_url(tmp_path / "app.db"))
        await handle.connect()
        await handle.dispose()
        await handle.dispose()
        assert not handle.connected

    @pytest.mark.asyncio
    async def test_unreachable_database_raises(self, tmp_path):
        handle = DatabaseHandle(sqlite_url(tmp_path / "no" / "such" / "dir" / "app.db"))
        with pytest.raises(DatabaseError, match="Could not connect"):
            await handle.connect()
        assert not handle.connected

    @pytest.mark.asyncio
    async def test_invalid_url_raises(self):
        handle = DatabaseHandle("definitely not a url")
        with pytest.raises(DatabaseError):
            await handle.connect()
        assert handle.host == "unknown"

    def test_from_settings_requires_url(self):
        settings = Settings(_env_file=None)
        with pytest.raises(DatabaseError, match="not defined"):
            DatabaseHandle.from_settings(settings)

    def test_from_settings_copies_pool_options(self, tmp_path):
        settings = Settings(
            _env_file=None,
            database_url=sqlite_url(tmp_path / "app.db"),
            db_pool_size=5,
            db_connect_timeout=3,
        )
        handle = DatabaseHandle.from_settings(settings)
        assert handle.pool_size == 5
        assert handle.connect_timeout == 3


class TestBootstrapDatabase:

    @pytest.mark.asyncio
    async def test_returns_connected_handle(self, tmp_path):
        settings = Settings(_env_file=None, database_url=sqlite_url(tmp_path / "app.db"))
        handle = await bootstrap_database(settings)
        try:
            assert handle is not None
            assert handle.connected
        finally:
            await handle.dispose()

    @pytest.mark.asyncio
    async def test_production_without_url_continues(self):
        settings = Settings(_env_file=None, environment="production")
        assert await bootstrap_database(settings) is None

    @pytest.mark.asyncio
    async def test_production_unreachable_continues(self, tmp_path):
        settings = Settings(
            _env_file=None,
            environment="production",
            database_url=sqlite_url(tmp_path / "missing" / "app.db"),
        )
        assert await bootstrap_database(settings) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("environment", ["development", "staging"])
    async def test_non_production_failure_raises(self, environment):
        settings = Settings(_env_file=None, environment=environment)
        with pytest.raises(DatabaseError):
            await bootstrap_database(settings)


class TestLifespan:

    @pytest.mark.asyncio
    async def test_handle_is_stored_and_disposed(self, tmp_path):
        settings = Settings(
            _env_file=None,
            database_url=sqlite_url(tmp_path / "app.db"),
            log_level="WARNING",
        )
        app = create_app(settings)
        async with lifespan(app):
            handle = app.state.database
            assert handle is not None and handle.connected
        assert app.state.database is None
        assert not handle.connected

    @pytest.mark.asyncio
    async def test_production_starts_without_database(self):
        settings = Settings(_env_file=None, environment="production", log_level="WARNING")
        app = create_app(settings)
        async with lifespan(app):
            assert app.state.database is None

    @pytest.mark.asyncio
    async def test_development_startup_fails_without_database(self):
        app = create_app(Settings(_env_file=None, log_level="WARNING"))
        with pytest.raises(DatabaseError):
            async with lifespan(app):
                pass
