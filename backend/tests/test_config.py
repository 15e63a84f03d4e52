"""
DA Admin Backend — Settings Tests
===================================
"""

import pytest
from pydantic import ValidationError

from admin_api.config import DEFAULT_ALLOWED_ORIGINS, Settings


class TestDatabaseURL:

    def test_primary_variable(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db/primary")
        assert Settings(_env_file=None).database_url == "postgresql+asyncpg://u:p@db/primary"

    def test_legacy_variable(self, monkeypatch):
        monkeypatch.setenv("DA_DATABASE_URL", "postgresql+asyncpg://u:p@db/legacy")
        assert Settings(_env_file=None).database_url == "postgresql+asyncpg://u:p@db/legacy"

    def test_primary_wins_when_both_set(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db/primary")
        monkeypatch.setenv("DA_DATABASE_URL", "postgresql+asyncpg://u:p@db/legacy")
        assert Settings(_env_file=None).database_url.endswith("/primary")

    def test_unset_by_default(self):
        assert Settings(_env_file=None).database_url is None


class TestEnvironmentMode:

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.port == 3001
        assert settings.environment == "development"
        assert settings.is_development
        assert settings.verbose_errors
        assert settings.max_body_size == 10 * 1024 * 1024
        assert settings.allowed_origins == DEFAULT_ALLOWED_ORIGINS

    def test_production(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "Production")
        settings = Settings(_env_file=None)
        assert settings.is_production
        assert not settings.is_development
        assert not settings.verbose_errors

    def test_other_environment_is_permissive_but_quiet(self):
        settings = Settings(_env_file=None, environment="staging")
        assert settings.is_development
        assert not settings.verbose_errors

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert Settings(_env_file=None).port == 8080

    @pytest.mark.parametrize(
        "environment, vercel, expected",
        [("production", True, False), ("production", False, True), ("development", True, True)],
    )
    def test_should_listen(self, environment, vercel, expected):
        settings = Settings(_env_file=None, environment=environment, vercel=vercel)
        assert settings.should_listen is expected


class TestLogLevel:

    def test_normalized_to_upper_case(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")
