"""SQLAlchemy implementation of TokenRecordRepository.

Every method runs in its own session and transaction, so calls for
different uids can run concurrently and a failed write leaves nothing
behind.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tokenstore.exceptions import DuplicateRecordError, PersistenceError
from tokenstore.persistence.sqlalchemy.models import TokenRecordModel
from tokenstore.repositories import TokenRecordRepository
from tokenstore.schemas import TokenRecord
from tokenstore.time import ensure_tz_aware, to_utc

logger = logging.getLogger(__name__)


class TokenRecordRepositorySQLAlchemy(TokenRecordRepository):
    """
    SQLAlchemy implementation of TokenRecordRepository.

    Driver and query failures are translated into PersistenceError so the
    token store never sees SQLAlchemy exceptions.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """Initialize repository with a session factory.

        Parameters
        ----------
        session_factory
            Factory producing SQLAlchemy async sessions bound to the
            token database
        """
        self._session_factory = session_factory

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[AsyncSession]:
        """Open a session with a transaction, committed on clean exit."""
        try:
            async with self._session_factory() as session, session.begin():
                yield session
        except (SQLAlchemyError, OSError) as e:
            logger.error("Token repository %s failed: %s", operation, e)
            msg = f"Token repository {operation} failed"
            raise PersistenceError(msg) from e

    def _to_data(self, model: TokenRecordModel) -> TokenRecord:
        """Map SQLAlchemy model to the record data class."""
        return TokenRecord(
            uid=model.uid,
            hashed_token=model.hashed_token,
            expires_at=ensure_tz_aware(model.expires_at),
            origin_url=model.origin_url,
        )

    async def find_by_uid(self, uid: str) -> TokenRecord | None:
        async with self._transaction("lookup") as session:
            model = await session.get(TokenRecordModel, uid)
            return self._to_data(model) if model else None

    async def create(self, record: TokenRecord) -> None:
        async with self._transaction("create") as session:
            session.add(
                TokenRecordModel(
                    uid=record.uid,
                    hashed_token=record.hashed_token,
                    expires_at=to_utc(record.expires_at),
                    origin_url=record.origin_url,
                ),
            )
            try:
                await session.flush()
            except IntegrityError as e:
                if "unique" in str(e).lower():
                    raise DuplicateRecordError(record.uid) from e
                raise
        logger.info("Created token record for uid: %s", record.uid)

    async def replace(self, record: TokenRecord) -> bool:
        stmt = (
            update(TokenRecordModel)
            .where(TokenRecordModel.uid == record.uid)
            .values(
                hashed_token=record.hashed_token,
                expires_at=to_utc(record.expires_at),
                origin_url=record.origin_url,
            )
        )
        async with self._transaction("replace") as session:
            result = await session.execute(stmt)
            replaced = result.rowcount > 0  # type: ignore[attr-defined]

        if replaced:
            logger.debug("Replaced token record for uid: %s", record.uid)
        return replaced

    async def delete_by_uid(self, uid: str) -> bool:
        stmt = delete(TokenRecordModel).where(TokenRecordModel.uid == uid)
        async with self._transaction("delete") as session:
            result = await session.execute(stmt)
            deleted = result.rowcount > 0  # type: ignore[attr-defined]

        if deleted:
            logger.info("Deleted token record for uid: %s", uid)
        return deleted

    async def delete_all(self) -> int:
        async with self._transaction("delete all") as session:
            result = await session.execute(delete(TokenRecordModel))
            deleted: int = result.rowcount  # type: ignore[attr-defined]

        logger.info("Deleted %d token records", deleted)
        return deleted

    async def count_all(self) -> int:
        stmt = select(func.count()).select_from(TokenRecordModel)
        async with self._transaction("count") as session:
            result = await session.execute(stmt)
            return result.scalar_one()
