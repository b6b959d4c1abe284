"""
Pytest configuration for integration tests.

Import the shared database fixtures to make them available.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    postgres_container,
    postgres_url,
    session_factory,
    sqlite_engine,
    token_repository,
)

__all__ = [
    "postgres_container",
    "postgres_url",
    "session_factory",
    "sqlite_engine",
    "token_repository",
]
