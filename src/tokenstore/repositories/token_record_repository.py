"""Abstract repository interface for token records.

This interface defines the contract for token persistence.
Implementations can use SQLAlchemy or any other key-addressable storage.
"""

from abc import ABC, abstractmethod

from tokenstore.schemas import TokenRecord


class TokenRecordRepository(ABC):
    """
    Abstract repository for token records keyed by uid.

    Implementations must raise ``PersistenceError`` (or its subclass
    ``DuplicateRecordError``) on storage failures instead of leaking
    driver-specific exceptions.

    Example implementation:
        class TokenRecordRepositorySQLAlchemy(TokenRecordRepository):
            def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
                self._session_factory = session_factory

            async def find_by_uid(self, uid: str) -> TokenRecord | None:
                # SQLAlchemy-specific implementation
                ...
    """

    @abstractmethod
    async def find_by_uid(self, uid: str) -> TokenRecord | None:
        """
        Find the token record for a user.

        Parameters
        ----------
        uid
            The user's identifier

        Returns
        -------
        The stored record if found, None otherwise
        """

    @abstractmethod
    async def create(self, record: TokenRecord) -> None:
        """
        Store a new record.

        Parameters
        ----------
        record
            The record to insert

        Raises
        ------
        DuplicateRecordError
            If a record for ``record.uid`` already exists
        """

    @abstractmethod
    async def replace(self, record: TokenRecord) -> bool:
        """
        Overwrite every field of the record stored for ``record.uid``.

        Parameters
        ----------
        record
            The replacement record

        Returns
        -------
        True if a record was replaced, False if none exists for the uid
        """

    @abstractmethod
    async def delete_by_uid(self, uid: str) -> bool:
        """
        Delete the record for a user.

        Parameters
        ----------
        uid
            The user's identifier

        Returns
        -------
        True if deleted, False if not found
        """

    @abstractmethod
    async def delete_all(self) -> int:
        """
        Delete every record.

        Returns
        -------
        Number of deleted records
        """

    @abstractmethod
    async def count_all(self) -> int:
        """
        Count stored records, expired ones included.

        Returns
        -------
        Number of records (0 when empty)
        """
