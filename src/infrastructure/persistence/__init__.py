"""Token store adapters.

Usage:
    from src.infrastructure.persistence import FirestoreTokenStore
"""

from src.infrastructure.persistence.firestore_token_store import FirestoreTokenStore
from src.infrastructure.persistence.memory_token_store import InMemoryTokenStore
from src.infrastructure.persistence.redis_token_store import RedisTokenStore

__all__ = [
    "FirestoreTokenStore",
    "InMemoryTokenStore",
    "RedisTokenStore",
]
