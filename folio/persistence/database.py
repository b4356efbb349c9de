"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from folio.config import Settings
from folio.domain.error import StoreError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@contextmanager
def store_operation(operation: str) -> Iterator[None]:
    """Translate SQLAlchemy failures into domain ``StoreError``.

    The original exception is logged (with traceback) and chained, so the
    detail stays server-side while callers only handle ``StoreError``.

    Args:
        operation: Name of the repository operation, for logs
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.exception("Store operation failed", operation=operation, error=str(e))
        raise StoreError(operation, str(e)) from e
