"""Data classes shared by the token store and its repositories."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenRecord:
    """Immutable token record as persisted by a repository.

    Attributes
    ----------
    uid
        Identifier of the user the token authenticates (the record key)
    hashed_token
        bcrypt digest of the plaintext token
    expires_at
        Absolute, timezone-aware expiry timestamp
    origin_url
        Redirect target captured at issuance, if any
    """

    uid: str
    hashed_token: str
    expires_at: datetime
    origin_url: str | None = None

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at

    def __repr__(self) -> str:
        return f"<TokenRecord(uid={self.uid}, expires_at={self.expires_at.isoformat()})>"


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of a token verification.

    ``origin_url`` is only set on a valid result; it is ``""`` when the
    token was issued without one.
    """

    valid: bool
    origin_url: str | None = None

    @classmethod
    def invalid(cls) -> "VerificationResult":
        return cls(valid=False, origin_url=None)

    def __bool__(self) -> bool:
        return self.valid
