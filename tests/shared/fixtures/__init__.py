"""Shared pytest fixtures for all test suites."""

from tests.shared.fixtures.database import (
    postgres_container,
    postgres_url,
    session_factory,
    sqlite_engine,
    token_repository,
)
from tests.shared.fixtures.factories import FakeClock, TokenRecordFactory
from tests.shared.fixtures.threads import joined_threads

__all__ = [
    "postgres_container",
    "postgres_url",
    "session_factory",
    "sqlite_engine",
    "token_repository",
    "FakeClock",
    "TokenRecordFactory",
    "joined_threads",
]
