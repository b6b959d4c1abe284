"""Repository interfaces for tokenstore.

This package defines the abstract record repository that the token store
depends on. Implementations live under ``tokenstore.persistence``.
"""

from tokenstore.repositories.token_record_repository import TokenRecordRepository

__all__ = ["TokenRecordRepository"]
