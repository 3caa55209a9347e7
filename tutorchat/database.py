"""
Database session management for the Tutor Chat API
SQLAlchemy async engine, schema initialization and request sessions
"""

import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from tutorchat.config import Settings

logger = logging.getLogger(__name__)

# Base class for all models
Base = declarative_base()


def make_async_url(url: str) -> str:
    """Point a plain database URL at its async driver (asyncpg / aiosqlite)"""
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Create the shared async engine (one connection pool per process)

    pool_pre_ping: Verify connections before using them
    echo: Log all SQL statements when DEBUG=True
    """
    url = make_async_url(settings.DATABASE_URL)
    engine_kwargs = {"echo": settings.DEBUG}

    if not url.startswith("sqlite"):
        engine_kwargs.update(
            pool_pre_ping=True,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
        )
        if settings.DATABASE_SSL:
            engine_kwargs["connect_args"] = {"ssl": "require"}

    return create_async_engine(url, **engine_kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Session factory bound to the shared engine"""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


async def init_db(engine: AsyncEngine) -> bool:
    """
    Create users, chats and messages tables if they don't exist

    Tables are created in dependency order (users -> chats -> messages).
    Failures are logged and swallowed so the server still comes up when the
    database is unreachable; requests touching the database then fail with 500.

    Returns:
        bool: True if every table is ready
    """
    # Import models so they're registered with Base.metadata
    from tutorchat.models import User, Chat, Message  # noqa: F401

    try:
        async with engine.begin() as conn:
            for table in Base.metadata.sorted_tables:
                await conn.run_sync(table.create, checkfirst=True)
                logger.info(f"{table.name.capitalize()} table ready")
    except Exception as e:
        logger.error(f"Database init error: {e}")
        return False

    return True


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for FastAPI endpoints to get a database session
    Rolls back pending work on error and always closes the session
    """
    session_factory = request.app.state.context.session_factory
    async with session_factory() as db:
        try:
            yield db
        except Exception:
            await db.rollback()
            raise
