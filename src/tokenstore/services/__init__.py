"""Token store services.

Provides token hashing and the token store itself.
"""

from tokenstore.services.token_hashing_service import TokenHashingService
from tokenstore.services.token_store import TokenStore

__all__ = [
    "TokenHashingService",
    "TokenStore",
]
