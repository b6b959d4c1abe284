"""Token store exceptions.

These exceptions are raised by the tokenstore package and should be
caught and handled by the embedding application (e.g. translated into
HTTP 400/500 responses).
"""


class TokenStoreError(Exception):
    """Base exception for all token store errors."""

    def __init__(self, message: str = "Token store error"):
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(TokenStoreError):
    """Raised when a required input is missing, empty or out of range."""

    def __init__(self, message: str = "Invalid argument"):
        super().__init__(message)


class PersistenceError(TokenStoreError):
    """Raised when the record repository fails (connectivity, query error)."""

    def __init__(self, message: str = "Token persistence failed"):
        super().__init__(message)


class DuplicateRecordError(PersistenceError):
    """Raised when creating a record for a uid that already has one."""

    def __init__(self, uid: str):
        self.uid = uid
        super().__init__(f"A token record already exists for uid: {uid}")


class HashError(TokenStoreError):
    """Raised when hashing or comparing a token fails."""

    def __init__(self, message: str = "Token hashing failed"):
        super().__init__(message)
