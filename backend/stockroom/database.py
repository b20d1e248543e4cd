"""
Stockroom Backend — Database Session Management
=================================================

What:  Async SQLAlchemy engine, session factory, query helper, and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   Creates an async engine with connection pooling and hands every request
       its own session. Queries are fixed SQL text with driver-bound parameters.
Who:   Used by the inventory service and the health route.
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling Strategy:
    pool_size / max_overflow come from settings (PostgreSQL only).
    SQLite URLs keep SQLAlchemy's default pool for the driver, since the
    in-memory variant rejects pool sizing arguments.
"""

from typing import Any, AsyncGenerator, Dict, List, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from stockroom.config import settings


def build_engine(database_url: str) -> AsyncEngine:
    """Create an async engine, applying pool settings where the dialect supports them."""
    options: Dict[str, Any] = {
        # Echo SQL queries in DEBUG mode for development visibility
        "echo": settings.log_level == "DEBUG",
    }
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(database_url, **options)


# ── Engine Configuration ──────────────────────────────────────────────────
engine = build_engine(settings.database_url)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: Prevents lazy-loading issues after commit
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    What:    Creates an async session, yields it for use, and handles cleanup.
    Who:     Injected into route handlers via FastAPI's Depends() system.

    Every route in this service only reads, so there is nothing to commit.
    On error the transaction is rolled back and the exception re-raised for
    the global error handlers.
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Query Helper ──────────────────────────────────────────────────────────
async def fetch_rows(
    session: AsyncSession,
    statement: str,
    params: Optional[Mapping[str, Any]] = None,
) -> List[Dict[str, Any]]:
    """
    Execute a SQL text statement and return its rows as plain dicts.

    Args:
        session:   Request-scoped async session
        statement: SQL text using named placeholders (e.g. ``WHERE id = :id``)
        params:    Values bound by the driver, never interpolated into the text

    Raises:
        sqlalchemy.exc.SQLAlchemyError: Propagated unchanged; callers decide
        how to report it.
    """
    result = await session.execute(text(statement), dict(params or {}))
    return [dict(row) for row in result.mappings().all()]


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables(target: Optional[AsyncEngine] = None) -> None:
    """
    Create every table registered on ``Base.metadata`` if it does not exist.

    Used for local development databases and the test suite; production
    schemas are managed outside this service.
    """
    # Import models so they register with Base.metadata
    from stockroom.models import stuff  # noqa: F401

    async with (target or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Gracefully closes all connections in the pool (called on shutdown)."""
    await engine.dispose()
