"""Token store for passwordless login.

Keeps at most one live token per user, verifies presented tokens against
stored bcrypt digests and hands back the redirect URL captured at issuance.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from datetime import datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError

from tokenstore.exceptions import (
    DuplicateRecordError,
    InvalidArgumentError,
    PersistenceError,
)
from tokenstore.persistence.sqlalchemy import (
    TokenRecordRepositorySQLAlchemy,
    create_engine,
    create_session_factory,
    create_tables,
)
from tokenstore.repositories import TokenRecordRepository
from tokenstore.schemas import TokenRecord, VerificationResult
from tokenstore.services.token_hashing_service import TokenHashingService
from tokenstore.time import utc_now
from tokenstore_config import Settings, get_settings

logger = logging.getLogger(__name__)


def _require_text(name: str, value: object) -> None:
    if not isinstance(value, str) or not value:
        msg = f"{name} must be a non-empty string"
        raise InvalidArgumentError(msg)


class TokenStore:
    """Issue, verify and revoke single-use login tokens keyed by uid.

    Issuing a token for a uid that already has one overwrites the stored
    record, so the previous token stops verifying. Expiry is evaluated
    lazily in ``verify``; expired records stay stored (and counted) until
    they are replaced, revoked or cleared.

    The lookup-then-write in ``issue_or_replace`` is not isolated against
    concurrent issuance for the same uid. A create that collides with a
    concurrent one falls back to a replace, so the last write wins.

    Examples
    --------
    >>> async with TokenStore.connect("sqlite+aiosqlite:///tokens.db") as store:
    ...     await store.issue_or_replace("abc123", "u1", 60_000, "/dashboard")
    ...     result = await store.verify("abc123", "u1")
    ...     result.origin_url
    '/dashboard'
    """

    def __init__(
        self,
        repository: TokenRecordRepository,
        hashing_service: TokenHashingService,
        *,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the token store.

        Parameters
        ----------
        repository
            Record repository the tokens are persisted in
        hashing_service
            Hash provider used to digest and verify tokens
        clock
            Returns the current timezone-aware time
        """
        self._repository = repository
        self._hashing_service = hashing_service
        self._clock = clock

    @classmethod
    @asynccontextmanager
    async def connect(
        cls,
        database_url: str | None = None,
        *,
        settings: Settings | None = None,
    ) -> AsyncIterator["TokenStore"]:
        """Open a token store that owns its database engine.

        The table is created if missing. The engine is disposed when the
        context exits.

        Parameters
        ----------
        database_url
            SQLAlchemy async URL; defaults to ``settings.database_url``
        settings
            Configuration to use; defaults to the cached application settings

        Raises
        ------
        PersistenceError
            If the database cannot be reached or initialized
        """
        settings = settings or get_settings()
        engine = create_engine(
            database_url or settings.database_url,
            echo=settings.database_echo,
        )
        try:
            try:
                await create_tables(engine)
            except (SQLAlchemyError, OSError) as e:
                msg = "Could not initialize token database"
                raise PersistenceError(msg) from e

            yield cls(
                TokenRecordRepositorySQLAlchemy(create_session_factory(engine)),
                TokenHashingService(rounds=settings.token_hash_rounds),
            )
        finally:
            await engine.dispose()

    async def issue_or_replace(
        self,
        token: str,
        uid: str,
        lifetime_ms: int,
        origin_url: str | None = None,
    ) -> None:
        """Store a token for a uid, replacing any token the uid already has.

        Parameters
        ----------
        token
            Plaintext token; only its digest is stored
        uid
            Identifier of the user the token authenticates
        lifetime_ms
            Validity in milliseconds, counted from now
        origin_url
            Optional URL returned on successful verification

        Raises
        ------
        InvalidArgumentError
            If token or uid is empty or lifetime_ms is not a positive integer
        HashError
            If the token cannot be hashed
        PersistenceError
            If the repository write fails
        """
        _require_text("token", token)
        _require_text("uid", uid)
        if (
            isinstance(lifetime_ms, bool)
            or not isinstance(lifetime_ms, int)
            or lifetime_ms <= 0
        ):
            msg = "lifetime_ms must be a positive integer"
            raise InvalidArgumentError(msg)
        if origin_url is not None and not isinstance(origin_url, str):
            msg = "origin_url must be a string or None"
            raise InvalidArgumentError(msg)

        # bcrypt is CPU bound; keep it off the event loop
        hashed_token = await asyncio.to_thread(self._hashing_service.hash, token)
        record = TokenRecord(
            uid=uid,
            hashed_token=hashed_token,
            expires_at=self._clock() + timedelta(milliseconds=lifetime_ms),
            origin_url=origin_url,
        )

        existing = await self._repository.find_by_uid(uid)
        if existing is None:
            await self._create(record)
        else:
            await self._replace(record)

    async def _create(self, record: TokenRecord) -> None:
        try:
            await self._repository.create(record)
        except DuplicateRecordError:
            # Issued concurrently for the same uid
            logger.debug("Lost create race for uid %s, replacing", record.uid)
            if not await self._repository.replace(record):
                raise

    async def _replace(self, record: TokenRecord) -> None:
        if await self._repository.replace(record):
            return
        # Revoked between lookup and write
        logger.debug("Token for uid %s vanished before replace, creating", record.uid)
        await self._repository.create(record)

    async def verify(self, token: str, uid: str) -> VerificationResult:
        """Check a presented token for a uid.

        Missing, expired and mismatching tokens all yield an invalid
        result. Repository and hashing failures are logged and also yield
        an invalid result; they are never raised.

        Parameters
        ----------
        token
            Plaintext token presented by the user
        uid
            Identifier of the user claiming the token

        Returns
        -------
        ``VerificationResult(valid=True, origin_url=<url or "">)`` on a
        match, ``VerificationResult(valid=False, origin_url=None)`` otherwise

        Raises
        ------
        InvalidArgumentError
            If token or uid is empty
        """
        _require_text("token", token)
        _require_text("uid", uid)

        try:
            record = await self._repository.find_by_uid(uid)
            if record is None:
                logger.debug("No token stored for uid: %s", uid)
                return VerificationResult.invalid()

            # Expired records never reach the hash comparison
            if record.is_expired(self._clock()):
                logger.debug("Token expired for uid: %s", uid)
                return VerificationResult.invalid()

            matches = await asyncio.to_thread(
                self._hashing_service.verify,
                token,
                record.hashed_token,
            )
        except Exception:
            logger.exception("Token verification failed for uid: %s", uid)
            return VerificationResult.invalid()

        if not matches:
            logger.debug("Token mismatch for uid: %s", uid)
            return VerificationResult.invalid()

        return VerificationResult(valid=True, origin_url=record.origin_url or "")

    async def revoke(self, uid: str) -> None:
        """Remove the token of a uid. Revoking an unknown uid is a no-op.

        Raises
        ------
        InvalidArgumentError
            If uid is empty
        PersistenceError
            If the repository delete fails
        """
        _require_text("uid", uid)
        if not await self._repository.delete_by_uid(uid):
            logger.debug("No token to revoke for uid: %s", uid)

    async def clear(self) -> None:
        """Remove every stored token.

        Raises
        ------
        PersistenceError
            If the repository delete fails
        """
        await self._repository.delete_all()

    async def count(self) -> int:
        """Return the number of stored tokens, expired ones included.

        Raises
        ------
        PersistenceError
            If the repository count fails
        """
        return await self._repository.count_all()
