"""Persistence implementations for tokenstore.

This package contains database-specific implementations of the
repository interface defined in tokenstore.repositories.

Structure:
    persistence/
    └── sqlalchemy/     # SQLAlchemy async implementation (PostgreSQL, SQLite)

Usage:
    from tokenstore.persistence.sqlalchemy import (
        TokenRecordRepositorySQLAlchemy,
        TokenRecordModel,
        TokenStoreBase,
    )
"""
