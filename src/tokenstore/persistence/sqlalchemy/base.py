"""SQLAlchemy declarative base for tokenstore models.

This provides a separate Base for token models. An embedding application
that runs its own migrations should include TokenStoreBase.metadata in
its migration configuration.

Examples
--------
# In Alembic env.py:
from tokenstore.persistence.sqlalchemy import TokenStoreBase

target_metadata = [YourBase.metadata, TokenStoreBase.metadata]
"""

from sqlalchemy.orm import DeclarativeBase


class TokenStoreBase(DeclarativeBase):
    """Declarative base for tokenstore models."""
