"""
DA Admin Backend — Application Configuration
==============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py and `python -m admin_api`; tests build their own
       Settings instances and hand them to create_app().
When:  Loaded once at module import time.

Environment modes:
    production   → strict CORS allowlist, generic 500 messages,
                   database bootstrap failure is logged and tolerated
    development  → permissive CORS, raw 500 messages
    anything else → permissive CORS (not production), generic 500 messages
"""

from typing import List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

# Production frontends that may always call the API
DEFAULT_ALLOWED_ORIGINS = [
    "https://da-admin-five.vercel.app",
    "https://da-admin.vercel.app",
]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development. Production
    deployments set ENVIRONMENT=production and usually FRONTEND_URL.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001, ge=1, le=65535)

    # What: Deployment mode, drives CORS strictness and error verbosity
    environment: str = Field(default="development")

    # What: Set by the Vercel runtime; the platform owns the listener there
    vercel: bool = Field(default=False)

    # ── Database ──────────────────────────────────────────────────────────
    # What: SQLAlchemy async URL, e.g. postgresql+asyncpg://user:pw@host/db
    # Two variable names are accepted; DATABASE_URL wins when both are set.
    database_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "DA_DATABASE_URL", "database_url"),
        description="Async database connection URL",
    )
    db_pool_size: int = Field(default=10, ge=1, le=100)
    db_connect_timeout: float = Field(default=10.0, gt=0, le=120)

    # ── CORS ──────────────────────────────────────────────────────────────
    allowed_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))
    frontend_url: Optional[str] = Field(default=None)

    # ── Request bodies ────────────────────────────────────────────────────
    # Default: 10MB = 10 * 1024 * 1024
    max_body_size: int = Field(default=10_485_760, ge=1024)

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("environment")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        return v.strip().lower() or "development"

    # ── Derived values ────────────────────────────────────────────────────
    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Anything that is not production gets the permissive CORS policy."""
        return not self.is_production

    @property
    def verbose_errors(self) -> bool:
        """Raw exception messages are only returned in explicit development mode."""
        return self.environment == "development"

    @property
    def should_listen(self) -> bool:
        """On Vercel in production the platform serves the ASGI app itself."""
        return not (self.is_production and self.vercel)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "populate_by_name": True,
    }


# Singleton instance used by the module-level app in main.py
settings = Settings()
