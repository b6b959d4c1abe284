"""SQLAlchemy implementation for tokenstore persistence.

Provides:
- TokenStoreBase: Declarative base for token models
- TokenRecordModel: SQLAlchemy model for token records
- TokenRecordRepositorySQLAlchemy: Repository implementation
- create_engine / create_session_factory / create_tables: engine helpers

Examples
--------
engine = create_engine("sqlite+aiosqlite:///tokens.db")
await create_tables(engine)
repository = TokenRecordRepositorySQLAlchemy(create_session_factory(engine))
"""

from tokenstore.persistence.sqlalchemy.base import TokenStoreBase
from tokenstore.persistence.sqlalchemy.database import (
    create_engine,
    create_session_factory,
    create_tables,
    drop_tables,
)
from tokenstore.persistence.sqlalchemy.models import TokenRecordModel
from tokenstore.persistence.sqlalchemy.repositories import (
    TokenRecordRepositorySQLAlchemy,
)

__all__ = [
    "TokenRecordModel",
    "TokenRecordRepositorySQLAlchemy",
    "TokenStoreBase",
    "create_engine",
    "create_session_factory",
    "create_tables",
    "drop_tables",
]
