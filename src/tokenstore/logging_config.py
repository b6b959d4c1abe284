"""Process-wide logging setup for token store entry points."""

import logging
import sys
from functools import lru_cache

from tokenstore_config import get_settings


@lru_cache(maxsize=1)
def configure_logging() -> None:
    """Configure logging for the tokenstore package.

    Sets up:
    - Console output with timestamps and module names
    - Configurable log level for tokenstore modules (from settings)
    - WARNING level for noisy database drivers
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("tokenstore").setLevel(log_level)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
