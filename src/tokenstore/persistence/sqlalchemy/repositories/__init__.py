from tokenstore.persistence.sqlalchemy.repositories.token_record_repository import (
    TokenRecordRepositorySQLAlchemy,
)

__all__ = ["TokenRecordRepositorySQLAlchemy"]
