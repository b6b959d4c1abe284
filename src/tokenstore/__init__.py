"""Passwordless token store.

This package persists single-use, time-limited login tokens keyed by user
id and verifies presented tokens against stored bcrypt digests. It is the
storage back end of a passwordless (magic link) login flow.

Architecture:
    tokenstore/
    ├── services/           # TokenStore and bcrypt hashing
    ├── repositories/       # Abstract record repository
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy async implementation
    ├── schemas.py          # Data classes
    ├── exceptions.py       # Token store exceptions
    └── cli.py              # Admin CLI

Usage:
    from tokenstore import TokenStore

    async with TokenStore.connect("postgresql+asyncpg://...") as store:
        await store.issue_or_replace(token, uid, 600_000, "/dashboard")
        result = await store.verify(token, uid)
"""

from tokenstore.exceptions import (
    DuplicateRecordError,
    HashError,
    InvalidArgumentError,
    PersistenceError,
    TokenStoreError,
)
from tokenstore.repositories import TokenRecordRepository
from tokenstore.schemas import TokenRecord, VerificationResult
from tokenstore.services import TokenHashingService, TokenStore

__all__ = [
    # Services
    "TokenStore",
    "TokenHashingService",
    # Repositories (interfaces)
    "TokenRecordRepository",
    # Schemas
    "TokenRecord",
    "VerificationResult",
    # Exceptions
    "TokenStoreError",
    "InvalidArgumentError",
    "PersistenceError",
    "DuplicateRecordError",
    "HashError",
]
