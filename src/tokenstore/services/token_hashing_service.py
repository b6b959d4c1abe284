"""Token hashing service using bcrypt.

Provides salted one-way hashing of login tokens and constant-time
verification against stored digests.
"""

import bcrypt

from tokenstore.exceptions import HashError


class TokenHashingService:
    """Service for secure token hashing and verification.

    Uses bcrypt with a configurable work factor. ``bcrypt.checkpw``
    compares digests in constant time, so verification time does not
    depend on where a mismatch occurs.

    Examples
    --------
    >>> service = TokenHashingService()
    >>> digest = service.hash("abc123")
    >>> service.verify("abc123", digest)
    True
    >>> service.verify("wrong-token", digest)
    False
    """

    DEFAULT_ROUNDS = 10

    # bcrypt only reads the first 72 bytes of its input
    MAX_TOKEN_BYTES = 72

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """Initialize the token hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Login tokens are
            short-lived and random, so the default is lower than what one
            would pick for user passwords.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, token: str) -> str:
        """Hash a plaintext token.

        Parameters
        ----------
        token
            The plaintext token to hash

        Returns
        -------
        The bcrypt digest as a string

        Raises
        ------
        HashError
            If the token is longer than 72 bytes or bcrypt rejects it
        """
        encoded = self._encode(token)
        try:
            salt = bcrypt.gensalt(rounds=self._rounds)
            hashed = bcrypt.hashpw(encoded, salt)
        except (ValueError, TypeError) as e:
            msg = f"Could not hash token: {e}"
            raise HashError(msg) from e
        return hashed.decode("utf-8")

    def verify(self, token: str, hashed_token: str) -> bool:
        """Verify a token against a stored digest.

        Parameters
        ----------
        token
            The plaintext token to check
        hashed_token
            The bcrypt digest to verify against

        Returns
        -------
        True if the token matches, False otherwise

        Raises
        ------
        HashError
            If the token is longer than 72 bytes, the digest is malformed or
            the comparison fails
        """
        encoded = self._encode(token)
        try:
            return bcrypt.checkpw(
                encoded,
                hashed_token.encode("utf-8"),
            )
        except (ValueError, TypeError) as e:
            msg = f"Could not verify token: {e}"
            raise HashError(msg) from e

    def _encode(self, token: str) -> bytes:
        encoded = token.encode("utf-8")
        # Tokens sharing a 72-byte prefix must never match each other
        if len(encoded) > self.MAX_TOKEN_BYTES:
            msg = f"Token exceeds {self.MAX_TOKEN_BYTES} bytes"
            raise HashError(msg)
        return encoded
