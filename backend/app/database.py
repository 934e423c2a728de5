"""
Records API - Database Session Management
===========================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   The lifespan handler in main.py calls `create_engine_from_settings()`
       and `create_session_factory()` once at startup and stores both on
       `app.state`. `get_db_session` reads the factory from there for every
       request, and `dispose_engine()` closes the pool on shutdown.
Who:   Used by route handlers via FastAPI's dependency injection system.

Connection Pooling:
    pool_size=10:       Connections kept open for concurrent requests
    max_overflow=0:     The pool never grows past pool_size
    pool_timeout=None:  Requests wait for a free connection indefinitely
                        (unbounded queue of waiters)
    pool_pre_ping:      Validates connections before use
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Holds the shared metadata used by `init_models()` to create tables.
    """
    pass


# ── Engine & Session Factory ──────────────────────────────────────────────
def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Build the async engine (and with it the connection pool).

    SQL echo is enabled only when LOG_LEVEL is DEBUG.
    """
    return create_async_engine(
        settings.sqlalchemy_url,
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_timeout=settings.db_pool_timeout,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
        echo=settings.log_level == "DEBUG",
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: rows stay readable after commit
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_models(engine: AsyncEngine) -> None:
    """
    What:  Creates any missing tables registered on Base.metadata.
    When:  Startup, if DB_CREATE_TABLES is true.
    Note:  Existing tables are left untouched (CREATE TABLE only when absent).
    """
    # Registers Record on Base.metadata
    from app.models import record  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory stored on app.state
        2. Yields it to the route handler
        3. On success: commits anything still pending
        4. On error: rolls back the transaction and re-raises
        5. Always: closes the session (returns the connection to the pool)

    Example usage in a route:
        @router.get("/")
        async def list_records(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine(engine: AsyncEngine) -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
