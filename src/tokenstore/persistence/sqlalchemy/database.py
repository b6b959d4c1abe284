"""Async engine and schema helpers for the token database."""

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Import models to register with TokenStoreBase.metadata
import tokenstore.persistence.sqlalchemy.models  # noqa: F401
from tokenstore.persistence.sqlalchemy.base import TokenStoreBase

logger = logging.getLogger(__name__)


def create_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the given SQLAlchemy URL.

    In-memory SQLite databases live inside a single connection, so they
    get a StaticPool to let every session see the same data.
    """
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        return create_async_engine(
            database_url,
            echo=echo,
            poolclass=StaticPool,
        )

    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory used by the token repository."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create the token table if it is missing (idempotent).

    Existing tables and their data are never modified.
    """
    async with engine.begin() as conn:
        await conn.run_sync(TokenStoreBase.metadata.create_all)
    logger.debug("Token tables ensured")


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop the token table (testing and development resets only)."""
    logger.warning("Dropping token tables...")
    async with engine.begin() as conn:
        await conn.run_sync(TokenStoreBase.metadata.drop_all)
