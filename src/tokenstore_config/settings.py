"""Token store settings loaded from environment variables.

Values come from, highest priority first:
1. OS environment variables
2. The file named by TOKENSTORE_ENV_FILE
3. config/.env.dev, then config/.env, relative to the working directory
4. Field defaults

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_files() -> tuple[Path, ...]:
    """Candidate .env files, lowest priority first. Missing files are skipped."""
    config_dir = Path.cwd() / "config"
    files = [config_dir / ".env", config_dir / ".env.dev"]
    override = os.environ.get("TOKENSTORE_ENV_FILE")
    if override:
        files.append(Path(override))
    return tuple(files)


class Settings(BaseSettings):
    """Token store configuration loaded from environment variables.

    Instantiating ``Settings()`` reads the OS environment only;
    ``get_settings()`` also reads the discovered .env files.
    """

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database (POSTGRES_ prefix)
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "tokenstore"

    # Full SQLAlchemy URL, e.g. sqlite+aiosqlite:///tokens.db
    # Takes precedence over the POSTGRES_ settings when set
    database_dsn: str = ""
    database_echo: bool = False

    # bcrypt work factor for token digests
    token_hash_rounds: int = Field(default=10, ge=4, le=31)

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL of the token database."""
        if self.database_dsn:
            return self.database_dsn
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


@lru_cache()
def get_settings() -> Settings:
    """Return cached token store settings, reading the discovered .env files."""
    return Settings(_env_file=_env_files())


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
