"""SQLAlchemy model for passwordless login tokens."""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tokenstore.persistence.sqlalchemy.base import TokenStoreBase


class TokenRecordModel(TokenStoreBase):
    """
    SQLAlchemy model for a user's single live login token.

    The uid is the primary key, so each user has at most one row. Expired
    rows are kept until they are overwritten, revoked or cleared.

    Table: passwordless_tokens
    """

    __tablename__ = "passwordless_tokens"

    # User identifier (no FK to stay decoupled from any user table)
    uid: Mapped[str] = mapped_column(
        String(255),
        primary_key=True,
    )

    # bcrypt digest (~60 chars), never the plaintext token
    hashed_token: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    origin_url: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<TokenRecordModel(uid={self.uid}, expires_at={self.expires_at})>"
