"""
Records API - Application Configuration
=========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py (app factory, logging) and database.py (engine).
When:  Loaded once at module import time; validated before app starts.

Connection parameters are kept as separate fields (host, port, user, ...)
and assembled into a SQLAlchemy URL by `Settings.sqlalchemy_url`. Setting
DATABASE_URL replaces the assembled URL entirely.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development against a
    PostgreSQL instance. Attributes are grouped by concern.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Async driver used by SQLAlchemy. Any async dialect works, e.g.
    # "mysql+aiomysql" (install the `mysql` extra) or "sqlite+aiosqlite".
    db_driver: str = Field(default="postgresql+asyncpg")
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432, ge=1, le=65535)
    db_user: str = Field(default="records")
    db_password: str = Field(default="records")
    db_name: str = Field(default="records")

    # Full connection string; takes precedence over the fields above
    database_url: Optional[str] = Field(
        default=None,
        description="Async SQLAlchemy connection URL (overrides DB_* parts)",
    )

    # Pool capacity. max_overflow is always 0 so this is a hard ceiling.
    db_pool_size: int = Field(default=10, ge=1, le=100)

    # Seconds a request waits for a free connection. None = wait forever,
    # i.e. the queue of waiting requests is unbounded.
    db_pool_timeout: Optional[float] = Field(default=None, gt=0)

    db_pool_pre_ping: bool = Field(default=True)

    # Create the `data` table at startup when it does not exist yet
    db_create_tables: bool = Field(default=True)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated list; "*" permits every origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=5000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
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

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATABASE_URL and database_url both work
    }

    @property
    def sqlalchemy_url(self) -> str:
        """
        What:  The connection URL handed to create_async_engine().
        How:   DATABASE_URL verbatim when set, otherwise built from the
               DB_* fields with URL.create() so credentials are escaped.
        """
        if self.database_url:
            return self.database_url
        url = URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)


# Singleton instance used by the module-level app in main.py
settings = Settings()
